"""Pull-based markup scanner.

Consumes characters from a CharacterSource and produces raw tokens one at
a time. Discarded constructs (comments, marked sections, unknown tags, end
tags of void elements, empty text runs) restart scanning inside an explicit
loop, so long runs of them never grow the call stack.

Thread Safety:
Scanner instances are single-use. Create one per input.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from tagscan.config import ScanConfig, get_scan_config
from tagscan.lexer.charsets import NAME_START, is_text_lead
from tagscan.lexer.scanners import (
    MarkupScannerMixin,
    RawTextReaderMixin,
    TagScannerMixin,
    TextScannerMixin,
)
from tagscan.lexer.source import CharacterSource
from tagscan.lexer.tags import DEFAULT_TAG_TABLE, TagTable
from tagscan.tokens import Token, TokenType
from tagscan.utils.logger import get_logger
from tagscan.utils.text import expand_entities

logger = get_logger(__name__)


class Scanner(
    MarkupScannerMixin,
    TagScannerMixin,
    TextScannerMixin,
    RawTextReaderMixin,
):
    """Raw tokenizer over a CharacterSource.

    Usage:
            >>> scanner = Scanner(b"<B>hi</B>")
            >>> scanner.next_raw().type.name, scanner.next_raw().value
            ('TAG_START', 'hi')

    Every call to next_raw() returns exactly one token; once the input is
    exhausted it keeps returning EOF.

    """

    __slots__ = (
        "_source",
        "_table",
        "_config",
        "_source_file",
        "_expand_entities",
        "_declaration_keyword",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(
        self,
        source: CharacterSource | bytes | bytearray | memoryview | str,
        *,
        table: TagTable | None = None,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner.

        Args:
            source: A CharacterSource, or raw input to wrap in one
            table: Recognized elements (defaults to DEFAULT_TAG_TABLE)
            source_file: Optional source name for diagnostics
            config: Scan configuration (defaults to the active context config)
        """
        self._config = config if config is not None else get_scan_config()
        if not isinstance(source, CharacterSource):
            source = CharacterSource(
                source, pushback_capacity=self._config.pushback_capacity
            )
        self._source = source
        self._table = table if table is not None else DEFAULT_TAG_TABLE
        self._source_file = source_file
        self._expand_entities = self._config.entity_expander or expand_entities
        self._declaration_keyword = self._config.declaration_keyword

        self._saved_lineno: int = source.lineno
        self._saved_col: int = source.col + 1

    @property
    def config(self) -> ScanConfig:
        return self._config

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def table(self) -> TagTable:
        return self._table

    @property
    def position(self) -> tuple[int, int]:
        """(lineno, col) at which the next unread character sits."""
        return self._source.lineno, self._source.col + 1

    def next_raw(self) -> Token:
        """Scan and return the next raw token."""
        source = self._source
        while True:
            self._save_location()
            char = source.next()

            if not char:
                return self._make_token(TokenType.EOF)

            if char == "<":
                follow = source.next()
                if follow == "!":
                    token = self._scan_bang()
                elif follow == "/" or follow in NAME_START:
                    token = self._scan_tag(follow)
                else:
                    # Not markup after all: the "<" is literal text
                    source.pushback(follow)
                    token = self._scan_text(char)
            elif is_text_lead(char):
                token = self._scan_text(char)
            else:
                token = self._make_error(f"unexpected character U+{ord(char):04X}")

            if token is not None:
                return token

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Remember where the next character, which starts a token, sits."""
        self._saved_lineno = self._source.lineno
        self._saved_col = self._source.col + 1

    def _make_token(self, token_type: TokenType, value: str = "", **kwargs) -> Token:
        """Create a Token at the saved location.

        Args:
            token_type: The token type.
            value: Text content, declaration body or error message.
            **kwargs: ``tag`` and ``attributes`` for tag tokens.
        """
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _source_file=self._source_file,
            **kwargs,
        )

    def _make_error(self, message: str) -> Token:
        """Create a SCAN_ERROR token carrying message."""
        token = self._make_token(TokenType.SCAN_ERROR, message)
        logger.debug("%s: %s", token.location, message)
        return token
