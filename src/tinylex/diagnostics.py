"""Diagnostic reporting for lexical errors.

A diagnostic names the severity and kind of a problem, its row:column
location, the offending source line, and a caret under the offending
character:

    WARNING: Invalid token at 3:7
    int x @ 4;
          ^ -- offending character

Reporting is a side effect, never an exception: the lexer reports and keeps
scanning. Where the text goes is decided by a sink, so callers and tests
can capture diagnostics without reading the console.

Sinks:
- StreamSink: write to a text stream (stdout by default)
- CollectingSink: keep Diagnostic values in a list
- LoggingSink: route through the ``tinylex.diagnostics`` logger
- any callable taking a Diagnostic

"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TextIO, runtime_checkable

from tinylex.utils.logger import get_logger

logger = get_logger(__name__)

CARET_MARKER = "^ -- offending character"


class Severity(Enum):
    """How serious a diagnostic is."""

    ERROR = "ERROR"
    WARNING = "WARNING"

    @property
    def label(self) -> str:
        return self.value

    @property
    def log_level(self) -> int:
        return logging.ERROR if self is Severity.ERROR else logging.WARNING


class DiagnosticKind(Enum):
    """What went wrong. Each kind carries its message text."""

    INVALID_TOKEN = "Invalid token"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single formatted-on-demand diagnostic.

    Attributes:
        severity: ERROR or WARNING
        kind: Diagnostic kind (selects the message)
        lineno: Row of the offending character (1-indexed)
        col: Column of the offending character (1-indexed)
        line: Full text of the offending source line, without newline
        source_file: Optional source file path (not part of the message text)

    """

    severity: Severity
    kind: DiagnosticKind
    lineno: int
    col: int
    line: str
    source_file: str | None = None

    @property
    def location(self) -> str:
        return f"{self.lineno}:{self.col}"

    @property
    def caret_line(self) -> str:
        return " " * min(self.col - 1, len(self.line)) + CARET_MARKER

    def format(self) -> str:
        """Render the three-line message, without a trailing newline."""
        header = f"{self.severity.label}: {self.kind.message} at {self.location}"
        return f"{header}\n{self.line}\n{self.caret_line}"

    def __str__(self) -> str:
        return self.format()


@runtime_checkable
class DiagnosticSink(Protocol):
    """Protocol for diagnostic destinations."""

    def emit(self, diagnostic: Diagnostic) -> None:
        """Deliver one diagnostic."""
        ...


class StreamSink:
    """Write diagnostics to a text stream.

    With no stream, ``sys.stdout`` is looked up on every emit, so
    redirections made after construction are honored.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, diagnostic: Diagnostic) -> None:
        stream = self.stream
        stream.write(diagnostic.format() + "\n")
        stream.flush()


@dataclass
class CollectingSink:
    """Keep every emitted diagnostic in memory."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def emit(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def clear(self) -> None:
        self.diagnostics.clear()


class LoggingSink:
    """Route diagnostics through a logger at a level matching severity."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self.logger = target if target is not None else logger

    def emit(self, diagnostic: Diagnostic) -> None:
        self.logger.log(diagnostic.severity.log_level, "%s", diagnostic.format())


class _CallableSink:
    __slots__ = ("_func",)

    def __init__(self, func: Callable[[Diagnostic], None]) -> None:
        self._func = func

    def emit(self, diagnostic: Diagnostic) -> None:
        self._func(diagnostic)


def resolve_sink(
    sink: DiagnosticSink | Callable[[Diagnostic], None] | None,
) -> DiagnosticSink:
    """Normalize a sink argument.

    None selects a StreamSink over stdout; plain callables are wrapped.

    Raises:
        TypeError: If sink is neither a DiagnosticSink nor callable.
    """
    if sink is None:
        return StreamSink()
    if isinstance(sink, DiagnosticSink):
        return sink
    if callable(sink):
        return _CallableSink(sink)
    raise TypeError(f"expected a diagnostic sink or callable, got {type(sink).__name__}")


def extract_line(source: str, cursor: int, column: int) -> str:
    """Return the source line holding the character at ``cursor``.

    The line starts ``column - 1`` characters before the cursor and runs to
    the next newline or the end of the buffer. Out-of-range coordinates are
    clamped into the buffer instead of failing.
    """
    column = max(column, 1)
    source_len = len(source)
    line_start = min(max(cursor - (column - 1), 0), source_len)
    line_end = source.find("\n", line_start)
    if line_end == -1:
        line_end = source_len
    return source[line_start:line_end]


def report(
    severity: Severity,
    kind: DiagnosticKind,
    row: int,
    column: int,
    source: str,
    cursor: int,
    *,
    sink: DiagnosticSink | Callable[[Diagnostic], None] | None = None,
    source_file: str | None = None,
) -> Diagnostic:
    """Build a diagnostic for the character at ``cursor`` and emit it.

    Args:
        severity: ERROR or WARNING
        kind: Diagnostic kind
        row: Row of the offending character (1-indexed)
        column: Column of the offending character (1-indexed)
        source: Full source text
        cursor: Absolute offset of the offending character
        sink: Destination (defaults to stdout)
        source_file: Optional source file path, kept on the Diagnostic

    Returns:
        The emitted Diagnostic.
    """
    if column < 1 or cursor - (column - 1) < 0 or cursor > len(source):
        logger.debug(
            "Clamping diagnostic coordinates row=%d column=%d cursor=%d", row, column, cursor
        )
    diagnostic = Diagnostic(
        severity=severity,
        kind=kind,
        lineno=max(row, 1),
        col=max(column, 1),
        line=extract_line(source, cursor, column),
        source_file=source_file,
    )
    resolve_sink(sink).emit(diagnostic)
    return diagnostic


__all__ = [
    "CollectingSink",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    "LoggingSink",
    "Severity",
    "StreamSink",
    "extract_line",
    "report",
    "resolve_sink",
]
