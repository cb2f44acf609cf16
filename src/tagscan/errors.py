"""Exception classes for tagscan.

Malformed markup is reported as SCAN_ERROR tokens, never raised. The
exceptions here cover contract violations and the strict-checking driver.
"""

from __future__ import annotations


class TagscanError(Exception):
    """Base exception for all tagscan errors.

    Subclass this for specific error categories.
    """

    pass


class PushbackOverflowError(TagscanError):
    """More characters were pushed back than the source can hold.

    This is a programming error in the scanner, not a property of the input.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"pushback capacity of {capacity} characters exceeded")


class ScannerStateError(TagscanError):
    """A scanner operation was requested in a state that cannot honor it."""

    pass


class MarkupSyntaxError(TagscanError):
    """Malformed markup encountered in strict mode.

    Raised by the tokenize() driver instead of yielding a SCAN_ERROR token.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize syntax error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column where error occurred
            source_file: Source name (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
