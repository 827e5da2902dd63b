"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from hclscan.scanner import scan
from hclscan.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that scans source with the default (legacy) offsets."""

    def _lex(source: str) -> list[Token]:
        return scan(source)

    return _lex


@pytest.fixture
def lex_exact():
    """Return a helper that scans source reporting true byte offsets."""

    def _lex(source: str) -> list[Token]:
        return scan(source, exact_offsets=True)

    return _lex


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_offsets(tokens: list[Token], expected: list[int]) -> None:
    """Assert that the token byte offsets match the expected list."""
    actual = [t.byte_offset for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
