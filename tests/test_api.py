"""Tests for the public API and the tokenize() driver."""

from __future__ import annotations

import pytest

import tagscan
from tagscan import (
    MarkupSyntaxError,
    ScanConfig,
    TagDescriptor,
    Token,
    TokenType,
    build_tag_table,
    scan_config_context,
    tokenize,
)


def values(tokens: list[Token]) -> list[str]:
    out = []
    for token in tokens:
        if token.is_tag:
            slash = "/" if token.type is TokenType.TAG_END else ""
            out.append(f"<{slash}{token.name}>")
        elif token.type is TokenType.TEXT:
            out.append(token.value)
        else:
            out.append(token.type.name)
    return out


class TestTokenize:
    """The high-level driver."""

    def test_bytes_input(self) -> None:
        assert values(list(tokenize(b"<B> hi </B>"))) == ["<B>", "hi", "</B>", "EOF"]

    def test_str_input(self) -> None:
        assert values(list(tokenize("<P>grüße</P>"))) == ["<P>", "grüße", "</P>", "EOF"]

    def test_ends_with_single_eof(self) -> None:
        tokens = list(tokenize(b"x"))
        assert tokens[-1].type is TokenType.EOF
        assert [t.type for t in tokens].count(TokenType.EOF) == 1

    def test_declaration_passes_through(self) -> None:
        tokens = list(tokenize(b"<!DOCTYPE html>\n<HTML><BODY>x</BODY></HTML>"))
        assert values(tokens) == [
            "DECLARATION", "<HTML>", "<BODY>", "x", "</BODY>", "</HTML>", "EOF",
        ]  # fmt: skip

    def test_source_file_on_tokens(self) -> None:
        token = next(tokenize(b"<P>", source_file="a.html"))
        assert token.location.source_file == "a.html"

    def test_custom_table(self) -> None:
        table = build_tag_table([TagDescriptor.container("note", block=True)])
        assert values(list(tokenize(b"<P><note> x </note>", table=table))) == [
            "<NOTE>", "x", "</NOTE>", "EOF",
        ]  # fmt: skip

    def test_is_lazy(self) -> None:
        stream = tokenize(b"<P>a</P>")
        assert next(stream).name == "P"


class TestRawTextElements:
    """SCRIPT and STYLE bodies are read verbatim."""

    def test_script_body_verbatim(self) -> None:
        tokens = list(tokenize(b"<SCRIPT>if (a<b && c) { x = '<p>'; }</SCRIPT>after"))
        assert values(tokens) == [
            "<SCRIPT>", "if (a<b && c) { x = '<p>'; }", "</SCRIPT>", "after", "EOF",
        ]  # fmt: skip

    def test_entities_not_expanded(self) -> None:
        tokens = list(tokenize(b"<STYLE>a::after { content: '&amp;' }</STYLE>"))
        assert tokens[1].value == "a::after { content: '&amp;' }"

    def test_whitespace_kept(self) -> None:
        tokens = list(tokenize(b"<STYLE>\n  p { }\n</STYLE>"))
        assert tokens[1].value == "\n  p { }\n"

    def test_empty_body(self) -> None:
        assert values(list(tokenize(b"<SCRIPT></SCRIPT>"))) == ["<SCRIPT>", "</SCRIPT>", "EOF"]

    def test_attributes_kept(self) -> None:
        token = next(tokenize(b'<SCRIPT type="text/javascript"></SCRIPT>'))
        assert token.get_attribute("TYPE") == "text/javascript"

    def test_unterminated(self) -> None:
        tokens = list(tokenize(b"<SCRIPT>var x;"))
        assert values(tokens) == ["<SCRIPT>", "var x;", "SCAN_ERROR", "EOF"]
        assert "SCRIPT" in tokens[2].value

    def test_positions_point_into_the_body_and_terminator(self) -> None:
        start, body, end, _ = tokenize(b"<SCRIPT>\nx\n  </script>", source_file="p.html")
        assert (start.lineno, start.col) == (1, 1)
        assert (body.lineno, body.col) == (1, 9)
        assert (end.lineno, end.col) == (3, 3)
        assert str(end.location) == "p.html:3:3"

    def test_after_text(self) -> None:
        tokens = list(tokenize(b"a <SCRIPT>x</SCRIPT>"))
        assert values(tokens) == ["a", "<SCRIPT>", "x", "</SCRIPT>", "EOF"]

    def test_disabled_by_config(self) -> None:
        config = ScanConfig(raw_text_tags=frozenset())
        tokens = list(tokenize(b"<SCRIPT>a<b>c</b></SCRIPT>", config=config))
        assert values(tokens) == [
            "<SCRIPT>", "a", "<B>", "c", "</B>", "</SCRIPT>", "EOF",
        ]  # fmt: skip


class TestStrictMode:
    """Strict mode raises instead of yielding SCAN_ERROR."""

    def test_lenient_by_default(self) -> None:
        tokens = list(tokenize(b"\x01"))
        assert tokens[0].type is TokenType.SCAN_ERROR

    def test_strict_raises(self) -> None:
        with pytest.raises(MarkupSyntaxError) as excinfo:
            list(tokenize(b"<P>\n<P>\x01", source_file="x.html", config=ScanConfig(strict=True)))
        err = excinfo.value
        assert err.lineno == 2
        assert err.col_offset == 4
        assert err.source_file == "x.html"
        assert str(err).startswith("x.html:2:4 ")

    def test_strict_from_context(self) -> None:
        with scan_config_context(ScanConfig(strict=True)):
            with pytest.raises(MarkupSyntaxError):
                list(tokenize(b'<a href="x'))

    def test_strict_unterminated_raw_text(self) -> None:
        with pytest.raises(MarkupSyntaxError, match="unterminated <STYLE>"):
            list(tokenize(b"<STYLE>x", config=ScanConfig(strict=True)))

    def test_strict_tokens_before_error_are_delivered(self) -> None:
        stream = tokenize(b"<P>x</P>\x01", config=ScanConfig(strict=True))
        assert next(stream).name == "P"
        assert next(stream).value == "x"
        assert next(stream).type is TokenType.TAG_END
        with pytest.raises(MarkupSyntaxError):
            next(stream)


class TestPublicSurface:
    """Names exported from the package root."""

    def test_all_names_exist(self) -> None:
        for name in tagscan.__all__:
            assert hasattr(tagscan, name), name

    def test_token_accessors(self) -> None:
        token = next(tokenize(b'<A HREF="u">'))
        assert token.id == "A"
        assert token.is_tag
        assert token.get_attribute("href") == "u"
        assert repr(token) == "Token(TAG_START, <A>, 1:1)"

    def test_text_token_has_no_tag(self) -> None:
        token = next(tokenize(b"x"))
        assert token.id is None
        assert token.name is None
        assert token.classification is None
        assert token.get_attribute("x") is None
