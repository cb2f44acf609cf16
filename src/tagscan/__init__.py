"""
tagscan: Markup Scanner for Text Extraction

Turns a byte stream of tag-delimited markup into a typed token stream for a
structural parser that assembles plain text. Comments, marked sections and
unknown elements are skipped; whitespace is normalized the way a text
renderer wants it; <PRE> switches to literal mode.

Quick Start:
    >>> from tagscan import tokenize
    >>> [t.value for t in tokenize(b"<P>  a   b  </P>") if t.value]
    ['a b']

Lower-level pieces:
    >>> from tagscan import CharacterSource, Scanner, TokenNormalizer
    >>> normalizer = TokenNormalizer(Scanner(CharacterSource(b"<BR>x")))
    >>> normalizer.next().name
    'BR'

Malformed markup is reported as SCAN_ERROR tokens. Pass
``ScanConfig(strict=True)`` to have tokenize() raise MarkupSyntaxError
instead.
"""

from __future__ import annotations

from collections.abc import Iterator

from tagscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from tagscan.errors import (
    MarkupSyntaxError,
    PushbackOverflowError,
    ScannerStateError,
    TagscanError,
)
from tagscan.lexer import (
    DEFAULT_TAG_TABLE,
    CharacterSource,
    Classification,
    Scanner,
    ScanMode,
    TagDescriptor,
    TagTable,
    TokenNormalizer,
    build_tag_table,
)
from tagscan.location import SourceLocation
from tagscan.tokens import Attribute, Token, TokenType

__version__ = "0.1.0"


def tokenize(
    data: bytes | bytearray | memoryview | str,
    *,
    source_file: str | None = None,
    table: TagTable | None = None,
    config: ScanConfig | None = None,
) -> Iterator[Token]:
    """Tokenize markup into a normalized token stream.

    The body of each raw-text element (SCRIPT, STYLE by default) is read
    verbatim and delivered as one TEXT token followed by the element's
    TAG_END token.

    Args:
        data: UTF-8 encoded input (a str is encoded first)
        source_file: Optional source name for diagnostics
        table: Recognized elements (defaults to DEFAULT_TAG_TABLE)
        config: Scan configuration (uses the active context config if None)

    Yields:
        Tokens, ending with exactly one EOF token.

    Raises:
        MarkupSyntaxError: in strict mode, on the first malformed construct

    Example:
        >>> [t.type.name for t in tokenize("<SCRIPT>a<b</SCRIPT>")]
        ['TAG_START', 'TEXT', 'TAG_END', 'EOF']

    """
    if config is None:
        config = get_scan_config()
    scanner = Scanner(data, table=table, source_file=source_file, config=config)
    normalizer = TokenNormalizer(scanner)
    raw_text_tags = frozenset(name.upper() for name in config.raw_text_tags)

    for token in normalizer.tokens():
        yield _checked(token, config)

        if (
            token.type is TokenType.TAG_START
            and token.name in raw_text_tags
            and token.tag is not None
            and token.tag.has_end_tag
        ):
            body_lineno, body_col = scanner.position
            content, found = normalizer.read_until(token.name)
            if content:
                yield Token(
                    TokenType.TEXT,
                    content,
                    _lineno=body_lineno,
                    _col=body_col,
                    _source_file=source_file,
                )
            if not found:
                error = Token(
                    TokenType.SCAN_ERROR,
                    f"unterminated <{token.name}> element",
                    _lineno=token.lineno,
                    _col=token.col,
                    _source_file=source_file,
                )
                yield _checked(error, config)
                yield normalizer.next()
                return
            # The terminator never spans lines; point at its "<"
            end_lineno, end_col = scanner.position
            yield Token(
                TokenType.TAG_END,
                tag=token.tag,
                _lineno=end_lineno,
                _col=end_col - len(token.name) - 3,
                _source_file=source_file,
            )


def _checked(token: Token, config: ScanConfig) -> Token:
    if config.strict and token.type is TokenType.SCAN_ERROR:
        raise MarkupSyntaxError(
            token.value,
            lineno=token.lineno,
            col_offset=token.col,
            source_file=token.location.source_file,
        )
    return token


__all__ = [
    "DEFAULT_TAG_TABLE",
    "Attribute",
    "CharacterSource",
    "Classification",
    "MarkupSyntaxError",
    "PushbackOverflowError",
    "ScanConfig",
    "ScanMode",
    "Scanner",
    "ScannerStateError",
    "SourceLocation",
    "TagDescriptor",
    "TagTable",
    "TagscanError",
    "Token",
    "TokenNormalizer",
    "TokenType",
    "__version__",
    "build_tag_table",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "tokenize",
]
