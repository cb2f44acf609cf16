"""Text-run scanner mixin."""

from __future__ import annotations

from collections.abc import Callable

from tagscan.lexer.charsets import MARKUP_FOLLOWERS
from tagscan.lexer.source import CharacterSource
from tagscan.tokens import Token, TokenType
from tagscan.utils.logger import get_logger

logger = get_logger(__name__)


class TextScannerMixin:
    """Mixin providing text-run scanning.

    A run ends at end of input or at a ``<`` that starts markup (``<!``,
    ``</`` or ``<`` + name start). Any other ``<`` is kept as literal text.

    """

    # These will be set by the Scanner class
    _source: CharacterSource
    _expand_entities: Callable[[str], str]

    def _make_token(self, token_type: TokenType, value: str = "", **kwargs) -> Token:
        """Create token at the saved location. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_text(self, char: str) -> Token | None:
        """Scan a text run whose first character is char.

        Returns:
            TEXT token, or None when the run is empty after entity expansion.
        """
        source = self._source
        run: list[str] = []
        while char:
            if char == "<":
                follow = source.next()
                source.pushback(follow)
                if follow in MARKUP_FOLLOWERS:
                    source.pushback(char)
                    break
            run.append(char)
            char = source.next()

        # Entity expansion must happen before whitespace normalization
        text = self._expand_entities("".join(run))
        if not text:
            return None

        logger.debug("Scanned text %r", text)
        return self._make_token(TokenType.TEXT, text)
