"""Token kinds, data structures, and word shape tests."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    NUMBER = auto()  # 42, 3, 14f, 0x1F, 0o17, 0b101
    STRING = auto()  # "..." possibly assembled from several words
    OPERATOR = auto()  # single char: + - * / % = < > ! & |
    IDENTIFIER = auto()  # declared name
    DIRECTIVE = auto()  # #word and the word after it
    COMMENT = auto()  # // and the rest of its line
    RESERVED = auto()  # keyword from RESERVED_WORDS
    DELIMITER = auto()  # , . ; ( ) [ ] { }
    ERROR = auto()  # undeclared name or unrecognised word

    @property
    def label(self) -> str:
        """Display name used in listings, e.g. ``Number``."""
        return self.name.capitalize()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range; end is one past the last character."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A classified word (or assembled string literal) with its source range."""

    value: str
    kind: TokenKind
    span: Span


DELIMITERS = frozenset(",.;()[]{}")
OPERATORS = frozenset("+-*/%=<>!&|(){},[].;")

RESERVED_WORDS = (
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
    "char", "checked", "class", "const", "continue", "decimal", "default",
    "delegate", "do", "double", "else", "enum", "event", "explicit",
    "extern", "false", "finally", "fixed", "float", "for", "foreach",
    "goto", "if", "implicit", "int", "interface", "internal", "is", "lock",
    "long", "namespace", "new", "null", "object", "operator", "out",
    "override", "params", "private", "protected", "public", "readonly",
    "ref", "return", "sbyte", "sealed", "short", "sizeof", "stackalloc",
    "static", "string", "struct", "switch", "this", "throw", "true", "try",
    "typeof", "uint", "ulong", "unchecked", "unsafe", "ushort", "using",
    r"using\sstatic", "virtual", "void", "volatile", "while",
)  # fmt: skip

# Splits a line on whitespace runs and single delimiters, keeping both.
WORD_SPLIT_RE = re.compile(r"(\s+|[,.;()\[\]{}])")

_DIRECTIVE_RE = re.compile(r"^#(\w+)")
_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?[fF]?|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
# Searched, not anchored: any keyword bounded by non-word chars counts.
_RESERVED_RE = re.compile(r"\b(?:" + "|".join(RESERVED_WORDS) + r")\b")


def is_directive(word: str) -> bool:
    """Return True if word has the ``#name`` directive shape."""
    return _DIRECTIVE_RE.match(word) is not None


def is_comment_start(word: str) -> bool:
    """Return True if word opens a line comment."""
    return word.startswith("//")


def is_delimiter(word: str) -> bool:
    return len(word) == 1 and word in DELIMITERS


def is_number(word: str) -> bool:
    """Return True for decimal (optionally f/F suffixed), hex, octal or binary literals."""
    return _NUMBER_RE.fullmatch(word) is not None


def is_operator(word: str) -> bool:
    return len(word) == 1 and word in OPERATORS


def is_identifier(word: str) -> bool:
    """Return True if word is a letter or underscore followed by word chars (ASCII)."""
    return _IDENTIFIER_RE.fullmatch(word) is not None


def is_reserved(word: str) -> bool:
    """Return True if word contains a reserved keyword on word boundaries."""
    return _RESERVED_RE.search(word) is not None
