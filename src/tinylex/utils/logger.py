"""Minimal logging utilities for tinylex.

Every tinylex module logs under the "tinylex." namespace, so one
``logging.getLogger("tinylex")`` handler sees the loader, the lexer and
the driver. The CLI turns this on with ``-v``.

Example:
    >>> from tinylex.utils.logger import get_logger
    >>> logger = get_logger("source")
    >>> logger.debug("Loaded %s (%d chars)", "prog.c", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tinylex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("cli")
        >>> logger.name
        'tinylex.cli'
    """
    if not (name == "tinylex" or name.startswith("tinylex.")):
        name = f"tinylex.{name}"
    return logging.getLogger(name)
