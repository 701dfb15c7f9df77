"""Tests for mdtree.utils and the debug logging of degraded input."""

import logging

import pytest

from mdtree import ParseConfig, parse
from mdtree.stringbuilder import StringBuilder
from mdtree.utils import get_logger


class TestGetLogger:
    """Logger naming."""

    def test_prefixes_package_name(self) -> None:
        assert get_logger("parser").name == "mdtree.parser"

    def test_keeps_qualified_name(self) -> None:
        assert get_logger("mdtree.parser").name == "mdtree.parser"

    def test_no_handlers_installed(self) -> None:
        assert get_logger("x").handlers == []


class TestDebugLogging:
    """Degraded constructs are reported at DEBUG."""

    def test_unclosed_span_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mdtree"):
            parse("**open")
        assert any("Unclosed" in r.getMessage() for r in caplog.records)

    def test_nesting_limit_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mdtree"):
            parse("> > x", config=ParseConfig(max_nesting_depth=1))
        assert any("Nesting depth" in r.getMessage() for r in caplog.records)


class TestStringBuilder:
    """List-backed string accumulation."""

    def test_chaining(self) -> None:
        sb = StringBuilder()
        sb.append("a").append("").append_line("b").append_line()
        assert sb.build() == "ab\n\n"

    def test_bool(self) -> None:
        sb = StringBuilder()
        assert not sb
        sb.append("")
        assert not sb
        sb.append("x")
        assert sb
