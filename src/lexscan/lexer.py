"""Line-oriented scanner: splits source into words and classifies each one."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from functools import partial

from lexscan.errors import Diagnostic, InvalidInputError
from lexscan.tokens import (
    WORD_SPLIT_RE,
    Position,
    Span,
    Token,
    TokenKind,
    is_comment_start,
    is_delimiter,
    is_directive,
    is_identifier,
    is_number,
    is_operator,
    is_reserved,
)

DiagnosticSink = Callable[[Diagnostic], None]

_Predicate = Callable[[str], bool]
_Handler = Callable[[str, Span], None]


@dataclass(slots=True)
class ScanState:
    """Control state carried across the whole input, except in_comment."""

    in_directive: bool = False
    in_string: bool = False
    expecting_identifier: bool = False
    in_comment: bool = False  # reset at every line boundary
    string_parts: list[str] = field(default_factory=list)
    string_start: Position | None = None


def _split_words(line: str, line_no: int) -> Iterator[tuple[str, Span]]:
    """Yield the non-blank words of a line with their spans."""
    col = 1
    for piece in WORD_SPLIT_RE.split(line):
        if piece and not piece.isspace():
            yield piece, Span(Position(line_no, col), Position(line_no, col + len(piece)))
        col += len(piece)


def _starts_directive(word: str) -> bool:
    return word.startswith("#")


def _starts_string(word: str) -> bool:
    return word.startswith('"')


def _always(word: str) -> bool:
    return True


class Scanner:
    """Tokenize C-family source text into a list of classified Token objects.

    One instance owns one scan: its declared-name table, span state and
    collected diagnostics are never shared with another scan.
    """

    def __init__(
        self,
        source: str,
        filename: str = "input.cs",
        sink: DiagnosticSink | None = None,
    ) -> None:
        self.filename = filename
        self._source = source
        self._sink = sink
        self._state = ScanState()
        self.tokens: list[Token] = []
        self.diagnostics: list[Diagnostic] = []
        self.declared: set[str] = set()

        # Evaluated top to bottom, first match wins.
        self._rules: tuple[tuple[_Predicate, _Handler], ...] = (
            (self._in_directive, self._lex_directive_body),
            (_starts_directive, self._lex_directive_start),
            (self._in_string, self._lex_string_part),
            (_starts_string, self._lex_string_open),
            (self._in_comment, partial(self._emit, TokenKind.COMMENT)),
            # Shadowed by the '#' prefix rule; never reached.
            (is_directive, partial(self._emit, TokenKind.DIRECTIVE)),
            (is_comment_start, self._lex_comment_start),
            (is_delimiter, partial(self._emit, TokenKind.DELIMITER)),
            (is_number, partial(self._emit, TokenKind.NUMBER)),
            (is_operator, partial(self._emit, TokenKind.OPERATOR)),
            (self._expecting_identifier, self._lex_declaration_target),
            (is_reserved, self._lex_reserved),
            (is_identifier, self._lex_identifier_use),
            (_always, partial(self._emit, TokenKind.ERROR)),
        )

    def scan(self) -> list[Token]:
        """Scan the full source and return the token list."""
        self._check_source()

        for line_no, line in enumerate(self._source.split("\n"), start=1):
            self._state.in_comment = False
            for word, span in _split_words(line, line_no):
                self._classify(word, span)

        # Spans still open at end of input produce no token
        return self.tokens

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_source(self) -> None:
        if not self._source:
            raise InvalidInputError("empty source", self._source)
        nul = self._source.find("\0")
        if nul != -1:
            line = self._source.count("\n", 0, nul) + 1
            column = nul - self._source.rfind("\n", 0, nul)
            raise InvalidInputError(
                "NUL character in source", self._source, Position(line, column)
            )

    def _classify(self, word: str, span: Span) -> None:
        expecting = self._state.expecting_identifier
        for matches, handle in self._rules:
            if matches(word):
                handle(word, span)
                break
        # The declaration slot covers exactly one word, whatever it was
        if expecting:
            self._state.expecting_identifier = False

    def _emit(self, kind: TokenKind, word: str, span: Span) -> None:
        self.tokens.append(Token(word, kind, span))

    def _report(self, message: str, word: str, span: Span) -> None:
        diagnostic = Diagnostic(message, word, span)
        self.diagnostics.append(diagnostic)
        if self._sink is not None:
            self._sink(diagnostic)

    # ------------------------------------------------------------------
    # State predicates
    # ------------------------------------------------------------------

    def _in_directive(self, word: str) -> bool:
        return self._state.in_directive

    def _in_string(self, word: str) -> bool:
        return self._state.in_string

    def _in_comment(self, word: str) -> bool:
        return self._state.in_comment

    def _expecting_identifier(self, word: str) -> bool:
        return self._state.expecting_identifier

    # ------------------------------------------------------------------
    # Directives and comments
    # ------------------------------------------------------------------

    def _lex_directive_start(self, word: str, span: Span) -> None:
        self._state.in_directive = True
        self._emit(TokenKind.DIRECTIVE, word, span)

    def _lex_directive_body(self, word: str, span: Span) -> None:
        self._state.in_directive = False
        self._emit(TokenKind.DIRECTIVE, word, span)

    def _lex_comment_start(self, word: str, span: Span) -> None:
        self._state.in_comment = True
        self._emit(TokenKind.COMMENT, word, span)

    # ------------------------------------------------------------------
    # String literals
    # ------------------------------------------------------------------

    def _lex_string_open(self, word: str, span: Span) -> None:
        state = self._state
        state.in_string = True
        state.string_parts = [word]
        state.string_start = span.start
        # A lone '"' opens a span; it cannot also close it
        if len(word) > 1 and word.endswith('"'):
            self._close_string(span.end)

    def _lex_string_part(self, word: str, span: Span) -> None:
        self._state.string_parts.append(word)
        if word.endswith('"'):
            self._close_string(span.end)

    def _close_string(self, end: Position) -> None:
        state = self._state
        start = state.string_start if state.string_start is not None else end
        # Words are joined without the whitespace that separated them
        value = "".join(state.string_parts)
        state.in_string = False
        state.string_parts = []
        state.string_start = None
        self._emit(TokenKind.STRING, value, Span(start, end))

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def _lex_reserved(self, word: str, span: Span) -> None:
        self._state.expecting_identifier = True
        self._emit(TokenKind.RESERVED, word, span)

    def _lex_declaration_target(self, word: str, span: Span) -> None:
        self._state.expecting_identifier = False
        if is_identifier(word):
            self.declared.add(word)
            self._emit(TokenKind.IDENTIFIER, word, span)
            return
        self._report(f"expected identifier/string after type, found `{word}`", word, span)
        self._emit(TokenKind.ERROR, word, span)

    def _lex_identifier_use(self, word: str, span: Span) -> None:
        if word in self.declared:
            self._emit(TokenKind.IDENTIFIER, word, span)
            return
        self._report(f"undeclared variable `{word}`", word, span)
        self._emit(TokenKind.ERROR, word, span)


def scan(
    source: str,
    filename: str = "input.cs",
    sink: DiagnosticSink | None = None,
) -> list[Token]:
    """Convenience function: scan source text and return the token list."""
    return Scanner(source, filename, sink).scan()
