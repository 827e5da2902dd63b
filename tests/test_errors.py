"""Test error types, positions, and context snippets."""

import pytest

from hclscan.errors import ScanError, UnrecognizedCharacter, UnterminatedBlockComment
from hclscan.scanner import scan


class TestHierarchy:
    def test_unterminated_is_scan_error(self):
        with pytest.raises(ScanError):
            scan("/*")

    def test_unrecognized_is_scan_error(self):
        with pytest.raises(ScanError):
            scan("1")


class TestErrorPositions:
    def test_unrecognized_position(self):
        with pytest.raises(UnrecognizedCharacter) as exc_info:
            scan("a = 1")
        err = exc_info.value
        assert err.lexeme == "1"
        assert err.position.line == 1
        assert err.position.column == 5
        assert err.position.offset == 4

    def test_error_on_second_line(self):
        with pytest.raises(UnrecognizedCharacter) as exc_info:
            scan("a = b\n  \"x\"")
        err = exc_info.value
        assert err.position.line == 2
        assert err.position.column == 3
        assert err.position.offset == 8

    def test_offset_is_in_bytes(self):
        with pytest.raises(UnrecognizedCharacter) as exc_info:
            scan("/* é */ 7")
        err = exc_info.value
        assert err.position.column == 9
        assert err.position.offset == 9

    def test_non_ascii_inside_identifier(self):
        with pytest.raises(UnrecognizedCharacter) as exc_info:
            scan("café")
        err = exc_info.value
        assert err.lexeme == "é"
        assert err.position.column == 4
        assert err.position.offset == 3

    def test_unterminated_after_newline(self):
        with pytest.raises(UnterminatedBlockComment) as exc_info:
            scan("a\n  /* b")
        err = exc_info.value
        assert err.position.line == 2
        assert err.position.column == 3


class TestErrorFormatting:
    def test_format_contains_line(self):
        with pytest.raises(ScanError) as exc_info:
            scan("name = 42 # answer")
        assert "name = 42 # answer" in exc_info.value.format()

    def test_format_contains_error_prefix(self):
        with pytest.raises(ScanError) as exc_info:
            scan("1")
        assert exc_info.value.format().startswith("error:")

    def test_format_contains_position(self):
        with pytest.raises(ScanError) as exc_info:
            scan("a\nb\n9")
        assert "3:1" in exc_info.value.format()

    def test_format_with_custom_filename(self):
        with pytest.raises(ScanError) as exc_info:
            scan("1")
        assert "main.hcl" in exc_info.value.format("main.hcl")

    def test_single_caret_for_character(self):
        with pytest.raises(ScanError) as exc_info:
            scan("a 1 b")
        last_line = exc_info.value.format().splitlines()[-1]
        assert last_line.endswith("  ^")

    def test_double_caret_for_comment_opener(self):
        with pytest.raises(UnterminatedBlockComment) as exc_info:
            scan("x /* y")
        last_line = exc_info.value.format().splitlines()[-1]
        assert last_line.endswith("  ^^")

    def test_str_is_formatted(self):
        with pytest.raises(ScanError) as exc_info:
            scan("1")
        assert str(exc_info.value) == exc_info.value.format()
