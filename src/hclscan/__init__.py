"""HCL-style configuration language scanner."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hclscan.tokens import Token

__version__ = "0.1.0"


def scan(source: str, *, exact_offsets: bool = False) -> list[Token]:
    """Scan HCL source text into an ordered list of tokens."""
    from hclscan.scanner import scan as _scan

    return _scan(source, exact_offsets=exact_offsets)
