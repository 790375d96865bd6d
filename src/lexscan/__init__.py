"""Line-oriented lexical scanner for C-family source text."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lexscan.lexer import DiagnosticSink
    from lexscan.tokens import Token

__version__ = "0.1.0"


def scan(
    source: str,
    filename: str = "input.cs",
    sink: DiagnosticSink | None = None,
) -> list[Token]:
    """Scan source text into classified tokens."""
    from lexscan.lexer import scan as _scan

    return _scan(source, filename, sink)
