"""HCL scanner — converts source text into a flat list of positioned tokens."""

from __future__ import annotations

import logging

from hclscan.errors import UnrecognizedCharacter, UnterminatedBlockComment
from hclscan.tokens import (
    OPERATORS,
    Position,
    Token,
    TokenKind,
    byte_length,
    is_alpha,
    is_ident_char,
)

logger = logging.getLogger(__name__)

LINE_COMMENT_PREFIXES = ("//", "#")


def match_identifier(text: str) -> tuple[str, str] | None:
    """Split one identifier off the front of text.

    Returns ``(lexeme, rest)``, or None when text does not start with an
    ASCII letter.
    """
    end = _identifier_end(text, 0)
    if end == 0:
        return None
    return text[:end], text[end:]


def match_operator(text: str) -> str | None:
    """Return the operator or delimiter literal at the front of text, if any."""
    return _operator_at(text, 0)


def _identifier_end(source: str, start: int) -> int:
    """Return the index just past the identifier at start, or start if none."""
    if start >= len(source) or not is_alpha(source[start]):
        return start
    end = start + 1
    while end < len(source) and is_ident_char(source[end]):
        end += 1
    return end


def _operator_at(source: str, start: int) -> str | None:
    for op in OPERATORS:
        if source.startswith(op, start):
            return op
    return None


class Scanner:
    """Tokenize HCL source text into a list of Token objects.

    ``source[:self._pos]`` is the consumed prefix and ``self._offset`` the
    byte offset credited for it. With ``exact_offsets`` off, the offset
    follows the legacy accounting: ``\\r\\n`` counts as one byte and a line
    comment resumes at ``start + len(body) + 2`` whatever its prefix.
    """

    def __init__(self, source: str, *, exact_offsets: bool = False) -> None:
        self._source = source
        self._exact = exact_offsets
        self._pos = 0
        self._offset = 0
        self._tokens: list[Token] = []

    def scan(self) -> list[Token]:
        """Scan the full source and return the token list."""
        logger.debug(
            f"Scanning {len(self._source)} characters (exact_offsets={self._exact})"
        )
        while self._pos < len(self._source):
            self._scan_normal()
        logger.debug(f"Scanned {len(self._tokens)} tokens")
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        line_start = self._source.rfind("\n", 0, self._pos) + 1
        line = self._source.count("\n", 0, self._pos) + 1
        return Position(line, self._pos - line_start + 1, self._offset)

    def _startswith(self, prefix: str) -> bool:
        return self._source.startswith(prefix, self._pos)

    def _emit(self, kind: TokenKind, lexeme: str, offset: int) -> None:
        self._tokens.append(Token(kind, lexeme, offset))

    # ------------------------------------------------------------------
    # Normal mode
    # ------------------------------------------------------------------

    def _scan_normal(self) -> None:
        if self._startswith("\r\n"):
            self._pos += 2
            self._offset += 2 if self._exact else 1
            return

        ch = self._source[self._pos]

        if ch in " \t\n":
            self._pos += 1
            self._offset += 1
            return

        for prefix in LINE_COMMENT_PREFIXES:
            if self._startswith(prefix):
                self._scan_line_comment(prefix)
                return

        if self._startswith("/*"):
            self._scan_block_comment()
            return

        op = _operator_at(self._source, self._pos)
        if op is not None:
            self._emit(TokenKind.OPERATOR_OR_DELIMITER, op, self._offset)
            self._pos += len(op)
            self._offset += byte_length(op)
            return

        end = _identifier_end(self._source, self._pos)
        if end > self._pos:
            text = self._source[self._pos : end]
            self._emit(TokenKind.IDENTIFIER, text, self._offset)
            self._pos = end
            self._offset += byte_length(text)
            return

        logger.debug(f"Unrecognized character {ch!r} at byte {self._offset}")
        raise UnrecognizedCharacter(ch, self._current_pos(), self._source)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _scan_line_comment(self, prefix: str) -> None:
        start_offset = self._offset
        body_start = self._pos + len(prefix)
        comment_offset = start_offset + byte_length(prefix)

        newline = self._source.find("\n", body_start)
        if newline == -1:
            # Comment runs to end of input
            body = self._source[body_start:]
            self._emit(TokenKind.LINE_COMMENT, body, comment_offset)
            self._pos = len(self._source)
            self._offset = comment_offset + byte_length(body)
            return

        raw = self._source[body_start:newline]
        body = raw[:-1] if raw.endswith("\r") else raw
        self._emit(TokenKind.LINE_COMMENT, body, comment_offset)

        if self._exact:
            newline_offset = comment_offset + byte_length(raw)
            resume = newline_offset + 1
        else:
            newline_offset = comment_offset + byte_length(body)
            resume = start_offset + byte_length(body) + 2
        self._emit(TokenKind.NEWLINE, "\n", newline_offset)

        self._pos = newline + 1
        self._offset = resume

    def _scan_block_comment(self) -> None:
        body_start = self._pos + 2
        end = self._source.find("*/", body_start)
        if end == -1:
            logger.debug(f"Unterminated block comment opened at byte {self._offset}")
            raise UnterminatedBlockComment(self._current_pos(), self._source)

        body = self._source[body_start:end]
        self._emit(TokenKind.INLINE_COMMENT, body, self._offset + 2)
        self._pos = end + 2
        self._offset += byte_length(body) + 4


def scan(source: str, *, exact_offsets: bool = False) -> list[Token]:
    """Convenience function: scan source text and return the token list."""
    return Scanner(source, exact_offsets=exact_offsets).scan()
