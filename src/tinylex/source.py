"""Loading source files into memory.

The lexer itself does no I/O; callers load the whole file first and hand
the resulting string to ``Lexer``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TextIO

from tinylex.errors import SourceReadError
from tinylex.utils.logger import get_logger

logger = get_logger(__name__)


def read_source(path: str | os.PathLike[str], encoding: str = "utf-8") -> str:
    """Read an entire source file.

    Line endings are preserved as stored, so offsets in tokens match the
    file on disk.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        The file contents.

    Raises:
        SourceReadError: If the file cannot be opened, read or decoded.
    """
    file_path = Path(path)
    try:
        with file_path.open("r", encoding=encoding, newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(str(file_path), str(e)) from e

    logger.debug("Loaded %s (%d chars)", file_path, len(content))
    return content


def read_stream(stream: TextIO, name: str) -> str:
    """Read everything from an already-open text stream, such as stdin.

    Args:
        stream: Stream to drain
        name: Display name used in errors (e.g. "<stdin>")

    Raises:
        SourceReadError: If the stream cannot be read or decoded.
    """
    try:
        content = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(name, str(e)) from e

    logger.debug("Loaded %s (%d chars)", name, len(content))
    return content


__all__ = ["read_source", "read_stream"]
