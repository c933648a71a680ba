"""Exception classes for tinylex.

Lexical errors are normally reported as diagnostics, not raised; see
``tinylex.diagnostics``. The exceptions here cover the loader and the
opt-in strict mode.
"""

from __future__ import annotations

from tinylex.location import SourceLocation


class TinylexError(Exception):
    """Base exception for all tinylex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(TinylexError):
    """Invalid input encountered while lexing in strict mode.

    Raised only when ``LexConfig.fail_on_invalid`` is set, after the
    diagnostic for the offending character has been emitted.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            lineno: Row where the error occurred (1-indexed)
            col_offset: Column where the error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        super().__init__(f"{self._prefix()}{message}")

    def _prefix(self) -> str:
        """Location prefix for the message, empty when nothing is known."""
        if self.lineno is not None and self.col_offset is not None:
            where = str(SourceLocation(self.lineno, self.col_offset, source_file=self.source_file))
        else:
            parts = [self.source_file, self.lineno]
            where = ":".join(str(part) for part in parts if part not in (None, ""))
        return f"{where} " if where else ""


class SourceReadError(TinylexError):
    """A source file could not be loaded into memory."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize read error.

        Args:
            path: Path that was being read
            reason: Description of the failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"could not open file {path}: {reason}")
