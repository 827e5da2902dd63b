"""Token kinds, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    # Comments
    LINE_COMMENT = auto()  # // ... or # ... (body only)
    INLINE_COMMENT = auto()  # /* ... */ (body only)

    # Whitespace
    NEWLINE = auto()  # \n terminating a line comment
    HORIZONTAL_TAB = auto()  # reserved, never produced

    # Content
    IDENTIFIER = auto()  # ASCII letter, then letters/digits/_/-
    NUMERIC_LITERAL = auto()  # reserved, never produced
    OPERATOR_OR_DELIMITER = auto()  # see OPERATORS


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme and the byte offset where its text begins."""

    kind: TokenKind
    lexeme: str
    byte_offset: int


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based byte offset."""

    line: int
    column: int
    offset: int


# Tried top to bottom, first match wins: longer literals precede their prefixes.
OPERATORS: tuple[str, ...] = (
    "{", "}", "[", "]", "(", ")",
    "+", "-", "*", "/",
    "%{", "%",
    "<=", "<",
    ">=", ">",
    "==", "=>", "=",
    "!=", "!",
    "...", ".",
    "&&", "||",
    ":", "?", ",", "${",
)  # fmt: skip


def is_alpha(text: str) -> bool:
    """Return True if text is non-empty and every character is an ASCII letter."""
    return text != "" and all("a" <= ch <= "z" or "A" <= ch <= "Z" for ch in text)


def is_digit(text: str) -> bool:
    """Return True if text is non-empty and every character is an ASCII digit."""
    return text != "" and all("0" <= ch <= "9" for ch in text)


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return is_alpha(ch) or is_digit(ch) or ch == "_" or ch == "-"


def byte_length(text: str) -> int:
    """Return the UTF-8 encoded length of text."""
    return len(text.encode("utf-8"))
