"""Tests for token listing renderers and the debug dump."""

from __future__ import annotations

import io
import json

import pytest

from lexscan.debug import dump_scan
from lexscan.lexer import Scanner, scan
from lexscan.render import render, render_json, render_text


class TestRenderText:
    def test_pairs(self) -> None:
        assert render_text(scan("int x;")) == (
            "< int, Reserved >\n< x, Identifier >\n< ;, Delimiter >\n"
        )

    def test_string_value_kept_verbatim(self) -> None:
        assert render_text(scan('"a b"')) == '< "ab", String >\n'

    def test_empty(self) -> None:
        assert render_text([]) == ""


class TestRenderJson:
    def test_fields(self) -> None:
        data = json.loads(render_json(scan("int x\n  x")))
        assert data == [
            {"value": "int", "kind": "Reserved", "line": 1, "column": 1},
            {"value": "x", "kind": "Identifier", "line": 1, "column": 5},
            {"value": "x", "kind": "Identifier", "line": 2, "column": 3},
        ]

    def test_empty(self) -> None:
        assert json.loads(render_json([])) == []


class TestDispatch:
    def test_text(self) -> None:
        tokens = scan("1")
        assert render(tokens, "text") == render_text(tokens)

    def test_json(self) -> None:
        tokens = scan("1")
        assert render(tokens, "json") == render_json(tokens)

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="unknown output format"):
            render([], "xml")


class TestDebugDump:
    def test_dump(self) -> None:
        scanner = Scanner("int b;\nint a;\nc", "prog.cs")
        scanner.scan()
        out = io.StringIO()
        dump_scan(scanner, file=out)
        text = out.getvalue()
        assert text.startswith("Scan prog.cs\n")
        assert "  1:1 Reserved 'int'\n" in text
        assert "  3:1 Error 'c'\n" in text
        assert "Declared: a, b\n" in text
        assert text.endswith("Diagnostics: 1\n")

    def test_dump_no_names(self) -> None:
        scanner = Scanner("1")
        scanner.scan()
        out = io.StringIO()
        dump_scan(scanner, file=out)
        assert "Declared: (none)\n" in out.getvalue()
