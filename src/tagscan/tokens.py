"""Token and TokenType definitions for the tagscan scanner.

The scanner produces a stream of Token objects that a structural parser
consumes. Each Token carries its kind, payload and (for tags) the element
descriptor with its classification, so there is never a second value to
keep in sync with the token.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from tagscan.lexer.tags import Classification, TagDescriptor
    from tagscan.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the scanner."""

    TAG_START = auto()  # <NAME attr=...>
    TAG_END = auto()  # </NAME>
    TEXT = auto()  # Text run, entity references expanded
    DECLARATION = auto()  # <!DOCTYPE ...>
    SCAN_ERROR = auto()  # Malformed construct; value holds the message
    EOF = auto()


class Attribute(NamedTuple):
    """A tag attribute: name as written, value verbatim without quotes."""

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type
        value: Text content, declaration body or error message
        tag: Element descriptor for TAG_START / TAG_END tokens
        attributes: Attributes of a start tag, None when it had none
        _lineno: Line where the token started (1-indexed)
        _col: Column where the token started
        _source_file: Optional source name

    """

    type: TokenType
    value: str = ""
    tag: TagDescriptor | None = None
    attributes: tuple[Attribute, ...] | None = None
    _lineno: int = 1
    _col: int = 0
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from tagscan.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def col(self) -> int:
        return self._col

    @property
    def is_tag(self) -> bool:
        return self.type is TokenType.TAG_START or self.type is TokenType.TAG_END

    @property
    def id(self) -> str | None:
        """Token identity of a tag: ``"PRE"`` for <PRE>, ``"END_PRE"`` for </PRE>."""
        if self.tag is None:
            return None
        if self.type is TokenType.TAG_END:
            return self.tag.end_id
        return self.tag.start_id

    @property
    def name(self) -> str | None:
        """Upper-case element name of a tag token."""
        return self.tag.name if self.tag is not None else None

    @property
    def classification(self) -> Classification | None:
        return self.tag.classification if self.tag is not None else None

    def get_attribute(self, name: str) -> str | None:
        """Return the raw value of the first attribute called name (any case)."""
        if not self.attributes:
            return None
        wanted = name.upper()
        for attribute in self.attributes:
            if attribute.name.upper() == wanted:
                return attribute.value
        return None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.tag is not None:
            slash = "/" if self.type is TokenType.TAG_END else ""
            return f"Token({self.type.name}, <{slash}{self.tag.name}>, {self._lineno}:{self._col})"
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"
