"""Token listing renderers: ``< value, Kind >`` text and JSON."""

from __future__ import annotations

import json

from lexscan.tokens import Token

FORMATS = ("text", "json")


def render(tokens: list[Token], fmt: str = "text") -> str:
    """Render tokens in the named output format."""
    if fmt == "text":
        return render_text(tokens)
    if fmt == "json":
        return render_json(tokens)
    raise ValueError(f"unknown output format {fmt!r} (expected one of: {', '.join(FORMATS)})")


def render_text(tokens: list[Token]) -> str:
    """One ``< value, Kind >`` line per token."""
    return "".join(f"< {tok.value}, {tok.kind.label} >\n" for tok in tokens)


def render_json(tokens: list[Token]) -> str:
    items = [
        {
            "value": tok.value,
            "kind": tok.kind.label,
            "line": tok.span.start.line,
            "column": tok.span.start.column,
        }
        for tok in tokens
    ]
    return json.dumps(items, indent=2) + "\n"
