"""Scan error types with formatted source context."""

from __future__ import annotations

from hclscan.tokens import Position


class ScanError(Exception):
    """Raised on the first scanning error, with position and source context."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def underline_width(self) -> int:
        return 1

    def format(self, filename: str = "input.hcl") -> str:
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # At least one caret, but stay within the line
        underline_len = max(1, min(self.underline_width(), len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class UnterminatedBlockComment(ScanError):
    """A ``/*`` with no matching ``*/`` before end of input."""

    def __init__(self, position: Position, source: str) -> None:
        super().__init__("unterminated block comment (expected '*/')", position, source)

    def underline_width(self) -> int:
        return 2


class UnrecognizedCharacter(ScanError):
    """A character that starts no whitespace, comment, operator or identifier."""

    def __init__(self, lexeme: str, position: Position, source: str) -> None:
        self.lexeme = lexeme
        super().__init__(f"unrecognized character {lexeme!r}", position, source)
