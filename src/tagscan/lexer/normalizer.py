"""Lookahead-based whitespace normalization and literal-mode toggling.

Several whitespace rules depend on the token that follows a text run, so
the normalizer keeps a one-token lookahead slot in front of the Scanner:

- A newline right after the preformatted start tag is dropped.
- Before the preformatted end tag, a trailing newline (and spaces after
  it) is dropped.
- Outside literal mode, trailing whitespace is trimmed before any end tag
  and before a block start tag, and leading whitespace is trimmed after
  any non-void start tag, block end tag and layout marker (BR, HR). Start
  tags of raw-text elements are exempt; their body is read verbatim.
- Outside literal mode, whitespace runs collapse to a single space.
- Leading whitespace at the very start of the input is trimmed, as after
  a block boundary. Trailing whitespace before the end of input is only
  collapsed.

A TEXT token is never delivered with empty content.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace

from tagscan.errors import ScannerStateError
from tagscan.lexer.core import Scanner
from tagscan.lexer.modes import ScanMode
from tagscan.lexer.tags import Classification
from tagscan.tokens import Token, TokenType
from tagscan.utils.logger import get_logger
from tagscan.utils.text import (
    collapse_whitespace,
    trim_before_close,
    trim_leading,
    trim_trailing,
)

logger = get_logger(__name__)


class TokenNormalizer:
    """Token stream with whitespace normalization applied.

    Usage:
            >>> normalizer = TokenNormalizer(Scanner(b"<P>  a   b  </P>"))
            >>> [t.value for t in normalizer.tokens() if t.type is TokenType.TEXT]
            ['a b']

    Thread Safety:
        Single-use and single-threaded, like the Scanner it wraps.

    """

    __slots__ = (
        "_scanner",
        "_mode",
        "_lookahead",
        "_at_start",
        "_preformatted",
        "_raw_text_tags",
        "_layout_markers",
    )

    def __init__(self, scanner: Scanner) -> None:
        config = scanner.config
        self._scanner = scanner
        self._mode = ScanMode.NORMAL
        self._lookahead: Token | None = None
        self._at_start = True
        self._preformatted = config.preformatted_tag.upper()
        self._raw_text_tags = frozenset(name.upper() for name in config.raw_text_tags)
        self._layout_markers = frozenset(name.upper() for name in config.layout_markers)

    @property
    def mode(self) -> ScanMode:
        return self._mode

    @property
    def scanner(self) -> Scanner:
        return self._scanner

    @property
    def has_lookahead(self) -> bool:
        return self._lookahead is not None

    def next(self) -> Token:
        """Return the next normalized token."""
        while True:
            if self._lookahead is not None:
                token = self._lookahead
                self._lookahead = None
            else:
                token = self._scanner.next_raw()

            if self._is_preformatted(token, TokenType.TAG_START):
                self._enter_mode(ScanMode.LITERAL)
                following = self._fill()
                if following.type is TokenType.TEXT and following.value.startswith("\n"):
                    self._replace_lookahead(following.value[1:])

            elif self._is_preformatted(token, TokenType.TAG_END):
                self._enter_mode(ScanMode.NORMAL)

            elif token.type is TokenType.TEXT:
                text = self._finish_text(token.value)
                if not text:
                    continue
                if text != token.value:
                    token = replace(token, value=text)

            if self._mode is ScanMode.NORMAL and self._trims_following(token):
                following = self._fill()
                if following.type is TokenType.TEXT:
                    self._replace_lookahead(trim_leading(following.value))

            self._at_start = False
            return token

    def tokens(self) -> Iterator[Token]:
        """Iterate over normalized tokens, ending with EOF."""
        while True:
            token = self.next()
            yield token
            if token.type is TokenType.EOF:
                return

    def read_until(self, name: str) -> tuple[str, bool]:
        """Read raw text up to ``</name>``; see RawTextReaderMixin.read_until.

        Raises:
            ScannerStateError: if a token is already waiting in the lookahead
                slot, since its characters were consumed past the raw text
        """
        if self._lookahead is not None:
            raise ScannerStateError(
                f"cannot read raw text for <{name}>: lookahead slot holds {self._lookahead!r}"
            )
        return self._scanner.read_until(name)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _fill(self) -> Token:
        """Ensure the lookahead slot is occupied and return its token."""
        if self._lookahead is None:
            self._lookahead = self._scanner.next_raw()
        return self._lookahead

    def _replace_lookahead(self, text: str) -> None:
        """Rewrite the TEXT token in the slot; drop it if text is empty."""
        pending = self._lookahead
        if pending is None:
            return
        if not text:
            self._lookahead = None
        elif text != pending.value:
            self._lookahead = replace(pending, value=text)

    def _enter_mode(self, mode: ScanMode) -> None:
        if mode is not self._mode:
            logger.debug("Entering %s mode", mode.name.lower())
        self._mode = mode

    def _is_preformatted(self, token: Token, token_type: TokenType) -> bool:
        return token.type is token_type and token.name == self._preformatted

    def _finish_text(self, text: str) -> str:
        following = self._fill()
        normal = self._mode is ScanMode.NORMAL

        if self._is_preformatted(following, TokenType.TAG_END):
            text = trim_before_close(text)
        elif normal and (
            following.type is TokenType.TAG_END
            or (
                following.type is TokenType.TAG_START
                and following.classification is Classification.BLOCK
            )
        ):
            text = trim_trailing(text)

        if normal:
            if self._at_start:
                text = trim_leading(text)
            text = collapse_whitespace(text)
        return text

    def _trims_following(self, token: Token) -> bool:
        """Whether leading whitespace of the text after token is dropped."""
        if token.tag is None:
            return False
        if token.type is TokenType.TAG_START:
            if token.name in self._raw_text_tags:
                return False
            return (
                token.classification is not Classification.VOID
                or token.name in self._layout_markers
            )
        return token.classification is Classification.BLOCK
