"""Test fatal input errors and diagnostic formatting."""

import pytest

from lexscan.errors import InvalidInputError
from lexscan.lexer import Scanner, scan


class TestInvalidInput:
    def test_empty_source(self):
        with pytest.raises(InvalidInputError, match="empty"):
            scan("")

    def test_nul_only(self):
        with pytest.raises(InvalidInputError, match="NUL"):
            scan("\0")

    def test_nul_position(self):
        with pytest.raises(InvalidInputError) as exc_info:
            scan("hello\0world")
        err = exc_info.value
        assert err.position.line == 1
        assert err.position.column == 6

    def test_nul_on_second_line(self):
        with pytest.raises(InvalidInputError) as exc_info:
            scan("int x;\n\0")
        err = exc_info.value
        assert err.position.line == 2
        assert err.position.column == 1

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            scan("")

    def test_no_tokens_on_failure(self):
        scanner = Scanner("int x;\0")
        with pytest.raises(InvalidInputError):
            scanner.scan()
        assert scanner.tokens == []

    def test_whitespace_is_not_rejected(self):
        assert scan(" ") == []


class TestErrorFormatting:
    def test_format_contains_error_prefix(self):
        with pytest.raises(InvalidInputError) as exc_info:
            scan("\0")
        assert exc_info.value.format().startswith("error:")

    def test_format_contains_position(self):
        with pytest.raises(InvalidInputError) as exc_info:
            scan("a\nb\0")
        formatted = exc_info.value.format()
        assert "2:2" in formatted
        assert "^" in formatted

    def test_format_with_custom_filename(self):
        with pytest.raises(InvalidInputError) as exc_info:
            scan("\0")
        assert "prog.cs" in exc_info.value.format("prog.cs")

    def test_empty_source_format(self):
        with pytest.raises(InvalidInputError) as exc_info:
            scan("")
        formatted = exc_info.value.format("prog.cs")
        assert formatted == "error: empty source\n  --> prog.cs"


class TestDiagnosticFormatting:
    def test_warning_block(self):
        source = "int y;\nx = 1;"
        scanner = Scanner(source)
        scanner.scan()
        formatted = scanner.diagnostics[0].format(source, "prog.cs")
        assert formatted.startswith("warning: undeclared variable `x`")
        assert "prog.cs:2:1" in formatted
        assert "x = 1;" in formatted

    def test_underline_covers_word(self):
        source = "int 1x;"
        scanner = Scanner(source)
        scanner.scan()
        last_line = scanner.diagnostics[0].format(source).splitlines()[-1]
        assert last_line.endswith("    ^^")
