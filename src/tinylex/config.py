"""ContextVar-based lexing configuration for tinylex.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction, unless an explicit
config is passed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from tinylex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(comments_anywhere=True)):
        tokens = list(Lexer(source).tokenize())

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexing configuration.

    Attributes:
        comments_anywhere: Recognize ``//`` line comments at any token
            boundary. When False (the default), a comment starts at a
            ``/`` that directly follows a whitespace character, and only there.
        report_invalid: Emit a diagnostic for each INVALID token
        fail_on_invalid: Raise LexError after reporting an INVALID token

    """

    comments_anywhere: bool = False
    report_invalid: bool = True
    fail_on_invalid: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "LexConfig":
        """Create LexConfig from a mapping.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "comments_anywhere": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.comments_anywhere
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexing configuration for this context."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexing configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(report_invalid=False)):
        ...     tokens = list(Lexer("@").tokenize())

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
