"""Source location tracking for diagnostics and debugging.

Provides SourceLocation dataclass for tracking positions in source text.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token in its source buffer.

    All positions are 1-indexed (lineno and col_offset start at 1).
    Offsets are 0-indexed positions into the source string.

    Attributes:
        lineno: Row of the first character (1-indexed)
        col_offset: Column of the first character (1-indexed)
        offset: Absolute start offset in source buffer
        end_offset: Absolute end offset in source buffer (exclusive)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5)
            >>> str(loc)
            '2:5'

            >>> loc = SourceLocation(1, 1, source_file="main.c")
            >>> str(loc)
            'main.c:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.c:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of source characters covered by this location."""
        return self.end_offset - self.offset

