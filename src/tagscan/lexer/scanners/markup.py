"""Comment, marked-section and declaration scanner mixin.

Handles everything that starts with ``<!``. Comments and marked sections
(``<![if ...]>``) are skipped and produce no token; the one recognized
declaration keyword produces a DECLARATION token.
"""

from __future__ import annotations

from enum import Enum, auto

from tagscan.lexer.charsets import ASCII_LETTERS, DECLARATION_CHARS, SPACE
from tagscan.lexer.source import CharacterSource
from tagscan.tokens import Token, TokenType


class CommentState(Enum):
    """Progress through the ``-->`` closing sequence."""

    SEEN_NONE = auto()
    SEEN_ONE_DASH = auto()
    SEEN_TWO_DASH = auto()
    CLOSED = auto()


def advance_comment_state(state: CommentState, char: str) -> CommentState:
    """Feed one character to the comment-closing automaton.

    Any run of two or more dashes followed by ">" closes the comment.
    """
    if state is CommentState.SEEN_NONE:
        return CommentState.SEEN_ONE_DASH if char == "-" else CommentState.SEEN_NONE
    if state is CommentState.SEEN_ONE_DASH:
        return CommentState.SEEN_TWO_DASH if char == "-" else CommentState.SEEN_NONE
    if state is CommentState.SEEN_TWO_DASH:
        if char == ">":
            return CommentState.CLOSED
        return CommentState.SEEN_TWO_DASH if char == "-" else CommentState.SEEN_NONE
    return state


class MarkupScannerMixin:
    """Mixin scanning the constructs introduced by ``<!``."""

    # These will be set by the Scanner class
    _source: CharacterSource
    _declaration_keyword: str

    def _make_token(self, token_type: TokenType, value: str = "", **kwargs) -> Token:
        """Create token at the saved location. Implemented by Scanner."""
        raise NotImplementedError

    def _make_error(self, message: str) -> Token:
        """Create SCAN_ERROR token. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_bang(self) -> Token | None:
        """Scan after ``<!``.

        Returns:
            DECLARATION or SCAN_ERROR token, or None when the construct was
            skipped and scanning should restart.
        """
        char = self._source.next()
        if char == "-":
            if self._source.next() != "-":
                return self._make_error("malformed comment, expected '<!--'")
            return self._skip_comment()
        if char == "[":
            return self._skip_marked_section()
        if char in ASCII_LETTERS:
            return self._scan_declaration(char)
        return self._make_error("malformed '<!' construct")

    def _skip_comment(self) -> Token | None:
        source = self._source
        state = CommentState.SEEN_NONE
        while state is not CommentState.CLOSED:
            char = source.next()
            if not char:
                return self._make_error("unterminated comment")
            state = advance_comment_state(state, char)
        return None

    def _skip_marked_section(self) -> Token | None:
        """Skip ``<![if ...]>`` / ``<![endif]>`` style constructs."""
        source = self._source
        char = source.next()
        while char != "]":
            if not char:
                return self._make_error("unterminated '<![' construct")
            char = source.next()

        char = source.next()
        while char in SPACE:
            char = source.next()
        if char != ">":
            return self._make_error("malformed '<![' construct, expected '>'")
        return None

    def _scan_declaration(self, char: str) -> Token:
        source = self._source
        name = [char]
        char = source.next()
        while char in DECLARATION_CHARS:
            name.append(char)
            char = source.next()

        keyword = "".join(name)
        if keyword.upper() != self._declaration_keyword.upper():
            return self._make_error(f"unknown declaration '<!{keyword}'")

        # Newlines do not terminate the declaration
        body: list[str] = []
        while char != ">":
            if not char:
                return self._make_error(f"unterminated '<!{keyword}' declaration")
            body.append(char)
            char = source.next()

        return self._make_token(TokenType.DECLARATION, keyword + "".join(body))
