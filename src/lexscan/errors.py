"""Error and diagnostic types with formatted source context."""

from __future__ import annotations

from dataclasses import dataclass

from lexscan.tokens import Position, Span


def _format_context(
    label: str,
    message: str,
    start: Position,
    underline_len: int,
    source: str,
    filename: str,
) -> str:
    lines = source.split("\n")
    line_idx = start.line - 1
    col = start.column

    # Build the source line (strip trailing CR for display)
    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\r")
    else:
        source_line = ""

    pad = " " * (col - 1)
    carets = "^" * max(1, underline_len)

    line_num = str(start.line)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"{label}: {message}\n"
        f"{' ' * gutter_width}--> {filename}:{start.line}:{col}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )


class InvalidInputError(ValueError):
    """Raised before scanning when the source is empty or contains NUL."""

    def __init__(self, message: str, source: str, position: Position | None = None) -> None:
        self.message = message
        self.source = source
        self.position = position
        super().__init__(self.format())

    def format(self, filename: str = "input.cs") -> str:
        if self.position is None:
            return f"error: {self.message}\n  --> {filename}"
        return _format_context("error", self.message, self.position, 1, self.source, filename)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A recoverable classification problem reported alongside an Error token."""

    message: str
    word: str
    span: Span

    def format(self, source: str, filename: str = "input.cs") -> str:
        start, end = self.span.start, self.span.end
        # Underline the word when on one line, otherwise a single caret
        if end.line == start.line:
            underline_len = end.column - start.column
        else:
            underline_len = 1
        return _format_context("warning", self.message, start, underline_len, source, filename)
