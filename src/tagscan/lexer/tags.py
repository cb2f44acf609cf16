"""Recognized element names and their whitespace classification.

The table is built once, sorted by upper-case name, and searched with a
case-insensitive binary search. It is never mutated after construction.

Classification drives whitespace policy in the normalizer, not rendering:
- VOID: no end tag (BR, IMG, ...); end tags for these are discarded
- INLINE: container whose boundaries keep surrounding whitespace
- BLOCK: container whose boundaries trim surrounding whitespace
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import TypeVar

T = TypeVar("T")


class Classification(Enum):
    """Element classification used by whitespace normalization."""

    VOID = auto()
    INLINE = auto()
    BLOCK = auto()


@dataclass(frozen=True, slots=True)
class TagDescriptor:
    """One recognized element.

    Attributes:
        name: Upper-case element name (sort key)
        classification: VOID, INLINE or BLOCK
        start_id: Identity of the start-tag token
        end_id: Identity of the end-tag token, None for void elements

    """

    name: str
    classification: Classification
    start_id: str
    end_id: str | None = None

    @classmethod
    def void(cls, name: str) -> TagDescriptor:
        name = name.upper()
        return cls(name, Classification.VOID, name)

    @classmethod
    def container(cls, name: str, *, block: bool) -> TagDescriptor:
        name = name.upper()
        classification = Classification.BLOCK if block else Classification.INLINE
        return cls(name, classification, name, f"END_{name}")

    @property
    def has_end_tag(self) -> bool:
        return self.end_id is not None


def binary_search(
    items: Sequence[T], target: str, key: Callable[[T], str]
) -> T | None:
    """Find the item whose key equals target, ignoring case.

    Args:
        items: Sequence sorted by upper-cased key
        target: Name to look for
        key: Extracts the name from an item

    Returns:
        The matching item, or None when absent.
    """
    wanted = target.upper()
    lo, hi = 0, len(items)
    while lo < hi:
        mid = (lo + hi) // 2
        probe = key(items[mid]).upper()
        if probe < wanted:
            lo = mid + 1
        elif probe > wanted:
            hi = mid
        else:
            return items[mid]
    return None


class TagTable:
    """Immutable, name-sorted table of recognized elements.

    Usage:
            >>> table = build_tag_table([TagDescriptor.void("br")])
            >>> table.lookup("Br").classification
            <Classification.VOID: 1>
            >>> table.lookup("blink") is None
            True

    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[TagDescriptor]) -> None:
        ordered = tuple(sorted(entries, key=lambda d: d.name.upper()))
        for previous, current in zip(ordered, ordered[1:]):
            if previous.name.upper() == current.name.upper():
                raise ValueError(f"duplicate tag name in table: {current.name!r}")
        self._entries = ordered

    def lookup(self, name: str) -> TagDescriptor | None:
        """Look up an element name case-insensitively."""
        return binary_search(self._entries, name, key=_descriptor_name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[TagDescriptor]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(d.name for d in self._entries)


def _descriptor_name(descriptor: TagDescriptor) -> str:
    return descriptor.name


def build_tag_table(entries: Iterable[TagDescriptor]) -> TagTable:
    """Build a TagTable, sorting entries and rejecting duplicates."""
    return TagTable(entries)


VOID_TAGS = (
    "AREA", "BASE", "BASEFONT", "BR", "HR", "IMG",
    "INPUT", "ISINDEX", "LINK", "META", "PARAM",
)  # fmt: skip

INLINE_TAGS = (
    "A", "APPLET", "B", "BIG", "CODE", "DFN", "EM", "FONT",
    "I", "KBD", "MAP", "NOBR", "SAMP", "SELECT", "SMALL", "STRIKE",
    "STRONG", "SUB", "SUP", "TEXTAREA", "TT", "U", "VAR",
)  # fmt: skip

BLOCK_TAGS = (
    "ADDRESS", "BLOCKQUOTE", "BODY", "CAPTION", "CENTER", "CITE",
    "DD", "DIR", "DIV", "DL", "DT", "FORM",
    "H1", "H2", "H3", "H4", "H5", "H6",
    "HEAD", "HTML", "LI", "MENU", "OL", "OPTION", "P", "PRE",
    "SCRIPT", "STYLE", "TABLE", "TD", "TH", "TITLE", "TR", "UL",
)  # fmt: skip

DEFAULT_TAG_TABLE = build_tag_table(
    [
        *(TagDescriptor.void(name) for name in VOID_TAGS),
        *(TagDescriptor.container(name, block=False) for name in INLINE_TAGS),
        *(TagDescriptor.container(name, block=True) for name in BLOCK_TAGS),
    ]
)
