"""Source location tracking for diagnostics.

Provides SourceLocation dataclass for positions reported alongside tokens.
Positions are only ever used to build diagnostic messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for diagnostics.

    Line numbers are 1-indexed. The column is the 1-indexed column of the
    character most recently read on that line, or 0 when no character of
    the line has been read yet.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column on that line
        source_file: Source name (optional)

    Examples:
            >>> loc = SourceLocation(3, 7, "page.html")
            >>> str(loc)
            'page.html:3:7'

    """

    lineno: int
    col_offset: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for diagnostics.

        Returns:
            Formatted string like "page.html:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def format_message(self, message: str) -> str:
        """Render a diagnostic line in the ``File "x", line N, column M`` form."""
        name = self.source_file or "<input>"
        return f'File "{name}", line {self.lineno}, column {self.col_offset}: {message}'
