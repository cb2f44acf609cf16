"""Tests for utility modules."""

import io
import logging

import pytest

from tagscan.utils import (
    collapse_whitespace,
    disable_debug,
    enable_debug,
    expand_entities,
    get_logger,
    trim_before_close,
    trim_leading,
    trim_trailing,
)


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        assert get_logger("mymodule").name == "tagscan.mymodule"

    def test_logger_with_prefix(self) -> None:
        assert get_logger("tagscan.lexer").name == "tagscan.lexer"

    def test_name_starting_with_package_not_submodule(self) -> None:
        assert get_logger("tagscan_other").name == "tagscan.tagscan_other"

    def test_exact_package_name(self) -> None:
        assert get_logger("tagscan").name == "tagscan"

    def test_scanner_logs_swallowed_tags(self, caplog: pytest.LogCaptureFixture) -> None:
        from tagscan.lexer import Scanner

        with caplog.at_level("DEBUG", logger="tagscan"):
            Scanner(b"<blink>").next_raw()
        assert any("unknown" in record.getMessage() for record in caplog.records)

    def test_enable_debug_traces_a_scan(self) -> None:
        from tagscan import tokenize

        stream = io.StringIO()
        handler = enable_debug(stream)
        try:
            list(tokenize(b"<PRE>x</PRE><blink>"))
        finally:
            disable_debug(handler)
        trace = stream.getvalue()
        assert "tagscan.lexer.normalizer: Entering literal mode" in trace
        assert "Tag <blink> unknown" in trace

    def test_disable_debug_detaches(self) -> None:
        from tagscan import tokenize

        stream = io.StringIO()
        disable_debug(enable_debug(stream))
        list(tokenize(b"<blink>"))
        assert stream.getvalue() == ""
        assert logging.getLogger("tagscan").level == logging.NOTSET


class TestWhitespace:
    """Whitespace helpers."""

    def test_collapse(self) -> None:
        assert collapse_whitespace(" a \t\n\f b  ") == " a b "

    def test_collapse_leaves_nbsp(self) -> None:
        assert collapse_whitespace("a\u00a0\u00a0b") == "a\u00a0\u00a0b"

    def test_trim_leading_and_trailing(self) -> None:
        assert trim_leading(" \n x ") == "x "
        assert trim_trailing(" x \t\n") == " x"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("line\n", "line"),
            ("line\n   ", "line"),
            ("line   ", "line   "),
            ("a\n\n", "a\n"),
            ("", ""),
        ],
    )
    def test_trim_before_close(self, text: str, expected: str) -> None:
        assert trim_before_close(text) == expected


class TestExpandEntities:
    """Default entity expander."""

    def test_named(self) -> None:
        assert expand_entities("&lt;&auml;&gt;") == "<ä>"

    def test_numeric(self) -> None:
        assert expand_entities("&#65;&#x42;") == "AB"

    def test_plain_text_untouched(self) -> None:
        assert expand_entities("no entities") == "no entities"
