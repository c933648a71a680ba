"""
tinylex: hand-written lexer for a small C-like language

Turns source text into classified tokens (keywords, identifiers, integer
literals, punctuation, operators) with 1-indexed row/column positions.
Invalid characters are reported as diagnostics and lexing continues.

Quick Start:
    >>> from tinylex import Lexer
    >>> lexer = Lexer("while (i <= 10) { i++; }")
    >>> token = lexer.next_token()
    >>> token.type, token.value, token.lineno, token.col
    (<TokenType.KEYWORD: 3>, 'while', 1, 1)

    >>> # Or collect everything at once
    >>> from tinylex import tokenize
    >>> [t.value for t in tokenize("x = 1;")]
    ['x', '=', '1', ';', '']

Capturing diagnostics:
    >>> from tinylex import CollectingSink
    >>> sink = CollectingSink()
    >>> tokens = tokenize("a @ b", sink=sink)
    >>> print(sink.diagnostics[0].format())
    WARNING: Invalid token at 1:3
    a @ b
      ^ -- offending character
"""

from collections.abc import Callable

from tinylex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from tinylex.diagnostics import (
    CollectingSink,
    Diagnostic,
    DiagnosticKind,
    DiagnosticSink,
    LoggingSink,
    Severity,
    StreamSink,
    report,
)
from tinylex.errors import LexError, SourceReadError, TinylexError
from tinylex.lexer import Lexer
from tinylex.location import SourceLocation
from tinylex.source import read_source
from tinylex.tokens import KEYWORDS, Token, TokenType, is_keyword, token_name

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    sink: DiagnosticSink | Callable[[Diagnostic], None] | None = None,
    config: LexConfig | None = None,
) -> list[Token]:
    """Lex source completely.

    Args:
        source: Source text
        source_file: Optional source file path for diagnostics
        sink: Diagnostic destination (stdout when None)
        config: Lexing options (active context config when None)

    Returns:
        All tokens, ending with the END token.
    """
    lexer = Lexer(source, source_file=source_file, sink=sink, config=config)
    return list(lexer.tokenize())


__all__ = [
    "KEYWORDS",
    "CollectingSink",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    "LexConfig",
    "LexError",
    "Lexer",
    "LoggingSink",
    "Severity",
    "SourceLocation",
    "SourceReadError",
    "StreamSink",
    "TinylexError",
    "Token",
    "TokenType",
    "__version__",
    "get_lex_config",
    "is_keyword",
    "lex_config_context",
    "read_source",
    "report",
    "reset_lex_config",
    "set_lex_config",
    "token_name",
    "tokenize",
]
