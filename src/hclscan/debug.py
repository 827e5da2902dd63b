"""Token dumps: human-readable listings and JSON-serializable records."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from hclscan.tokens import Token, TokenKind


def kind_name(kind: TokenKind) -> str:
    """Return the CamelCase name of a token kind, e.g. ``LineComment``."""
    return "".join(part.capitalize() for part in kind.name.split("_"))


def format_token(tok: Token) -> str:
    """Format a token as ``Kind@offset 'lexeme'``."""
    return f"{kind_name(tok.kind)}@{tok.byte_offset} {tok.lexeme!r}"


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one formatted line per token to *file*."""
    for tok in tokens:
        file.write(format_token(tok) + "\n")


def token_to_dict(tok: Token) -> dict[str, Any]:
    return {"kind": kind_name(tok.kind), "lexeme": tok.lexeme, "byte_offset": tok.byte_offset}


def tokens_to_json(tokens: list[Token]) -> str:
    return json.dumps([token_to_dict(t) for t in tokens], indent=2, ensure_ascii=False)
