"""Start/end tag scanner mixin.

Scans ``<NAME attr=value ...>`` and ``</NAME>``, then classifies the name
through the tag table. Unknown elements and end tags of void elements are
swallowed so the scanner can restart.
"""

from __future__ import annotations

import logging

from tagscan.lexer.charsets import NAME_CHARS, NAME_START, QUOTES, SPACE
from tagscan.lexer.source import CharacterSource
from tagscan.lexer.tags import TagTable
from tagscan.tokens import Attribute, Token, TokenType
from tagscan.utils.logger import get_logger

logger = get_logger(__name__)


class TagScannerMixin:
    """Mixin providing tag and attribute scanning.

    Attribute values are kept verbatim. Entity references are deliberately
    left alone: ``HREF="x?a=1&b=2"`` must survive untouched.

    """

    # These will be set by the Scanner class
    _source: CharacterSource
    _table: TagTable

    def _make_token(self, token_type: TokenType, value: str = "", **kwargs) -> Token:
        """Create token at the saved location. Implemented by Scanner."""
        raise NotImplementedError

    def _make_error(self, message: str) -> Token:
        """Create SCAN_ERROR token. Implemented by Scanner."""
        raise NotImplementedError

    def _skip_space(self, char: str) -> str:
        source = self._source
        while char in SPACE:
            char = source.next()
        return char

    def _scan_name(self, char: str) -> tuple[str, str]:
        """Scan an element or attribute name starting with char.

        Returns:
            (name, first character after the name)
        """
        source = self._source
        name = [char]
        char = source.next()
        while char in NAME_CHARS:
            name.append(char)
            char = source.next()
        return "".join(name), char

    def _scan_quoted_value(self, quote: str) -> str | None:
        """Scan up to the matching quote; may span lines. None at end of input."""
        source = self._source
        value: list[str] = []
        char = source.next()
        while char != quote:
            if not char:
                return None
            value.append(char)
            char = source.next()
        return "".join(value)

    def _scan_unquoted_value(self, char: str) -> tuple[str, str]:
        """Scan until whitespace or ">", keeping anything above the space threshold."""
        source = self._source
        value: list[str] = []
        while char and char != ">" and ord(char) > 0x20:
            value.append(char)
            char = source.next()
        return "".join(value), char

    def _scan_tag(self, char: str) -> Token | None:
        """Scan a tag after ``<``; char is ``/`` or the first name character.

        Returns:
            TAG_START, TAG_END or SCAN_ERROR token, or None when the tag was
            swallowed and scanning should restart.
        """
        source = self._source
        is_end_tag = char == "/"
        if is_end_tag:
            char = source.next()
        if char not in NAME_START:
            return self._make_error("malformed tag, expected element name")

        name, char = self._scan_name(char)
        char = self._skip_space(char)

        # Created on demand; most tags carry no attributes
        attributes: list[Attribute] | None = None
        if not is_end_tag:
            while char in NAME_START:
                attr_name, char = self._scan_name(char)
                after_name = char
                char = self._skip_space(char)

                value = ""
                if char == "=":
                    char = self._skip_space(source.next())
                    if char in QUOTES:
                        quoted = self._scan_quoted_value(char)
                        if quoted is None:
                            return self._make_error(
                                f"unterminated value of attribute '{attr_name}'"
                            )
                        value = quoted
                        char = source.next()
                    else:
                        value, char = self._scan_unquoted_value(char)
                elif after_name not in SPACE:
                    # Garbage glued to the name, like att;"x"; drop up to space or ">"
                    while char and char not in SPACE and char != ">":
                        char = source.next()
                char = self._skip_space(char)

                if attributes is None:
                    attributes = []
                attributes.append(Attribute(attr_name, value))

        # Accept XHTML style <hr />
        if char != ">":
            if not char:
                return self._make_error(f"unterminated tag '<{name}'")
            if char != "/" or source.next() != ">":
                return self._make_error(f"malformed tag '<{name}', expected '>'")

        if logger.isEnabledFor(logging.DEBUG):
            rendered = "".join(f' {a.name}="{a.value}"' for a in attributes or ())
            logger.debug('Scanned tag "<%s%s%s>"', "/" if is_end_tag else "", name, rendered)

        descriptor = self._table.lookup(name)
        if descriptor is None:
            logger.debug("Tag <%s> unknown -- swallowed", name)
            return None

        if is_end_tag:
            if not descriptor.has_end_tag:
                logger.debug("End tag of void element <%s> swallowed", name)
                return None
            return self._make_token(TokenType.TAG_END, tag=descriptor)

        return self._make_token(
            TokenType.TAG_START,
            tag=descriptor,
            attributes=tuple(attributes) if attributes is not None else None,
        )
