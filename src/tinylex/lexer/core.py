"""Hand-written lexer for a small C-like language.

Produces one token per ``next_token()`` call: skip trivia, record the start,
classify the character at the cursor by maximal munch, advance, return.
Unrecognized characters are reported through the diagnostic sink and come
back as INVALID tokens; scanning is never aborted (unless strict mode is on).

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from tinylex.config import LexConfig, get_lex_config
from tinylex.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticSink,
    Severity,
    report,
    resolve_sink,
)
from tinylex.errors import LexError
from tinylex.lexer.classifiers import OperatorClassifierMixin, WordClassifierMixin
from tinylex.lexer.scanners import TriviaScannerMixin
from tinylex.tokens import Token, TokenType
from tinylex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (consume one token or leave the cursor alone)
    WordClassifierMixin,
    OperatorClassifierMixin,
    # Scanners (skip input that produces no token)
    TriviaScannerMixin,
):
    """On-demand lexer over one source string.

    State is the cursor plus the (row, column) of the character under it,
    always updated together. ``0 <= cursor <= len(source)`` holds at all
    times and the cursor never moves backwards.

    Usage:
            >>> lexer = Lexer("int x = 1;")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(KEYWORD, 'int', 1:1)
        Token(IDENTIFIER, 'x', 1:5)
        Token(EQUAL, '=', 1:7)
        Token(NUMBER, '1', 1:9)
        Token(SEMICOLON, ';', 1:10)
        Token(END, '', 1:11)

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_sink",
        "_config",
    )

    def __init__(
        self,
        source: str,
        *,
        source_file: str | None = None,
        sink: DiagnosticSink | Callable[[Diagnostic], None] | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Source text; may be empty
            source_file: Optional source file path for diagnostics
            sink: Where diagnostics go (stdout when None)
            config: Lexing options (active context config when None)
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._sink = resolve_sink(sink)
        self._config = config if config is not None else get_lex_config()

    # =========================================================================
    # Public state
    # =========================================================================

    @property
    def source(self) -> str:
        return self._source

    @property
    def cursor(self) -> int:
        return self._pos

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def col(self) -> int:
        return self._col

    @property
    def config(self) -> LexConfig:
        return self._config

    # =========================================================================
    # Cursor navigation
    # =========================================================================

    def cursor_in_bounds(self) -> bool:
        """Return True while the cursor is on a character."""
        return self._pos < self._source_len

    def advance(self) -> None:
        """Consume exactly one character.

        Bumps the cursor and the column only. Newlines are NOT special-cased:
        a caller stepping over a newline must bump the row and reset the
        column itself (trim() does), or positions drift. At end of input
        this is a no-op.
        """
        if self._pos >= self._source_len:
            return
        self._pos += 1
        self._col += 1

    def _advance_by(self, count: int) -> None:
        """Consume count characters known not to contain a newline."""
        count = min(count, self._source_len - self._pos)
        self._pos += count
        self._col += count

    def _peek(self, ahead: int = 0) -> str:
        """Peek at the character ``ahead`` places past the cursor.

        Returns:
            The character, or empty string past end of input.
        """
        pos = self._pos + ahead
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    # =========================================================================
    # Token production
    # =========================================================================

    def next_token(self) -> Token:
        """Produce the next token.

        Once input is exhausted every call returns an END token.

        Raises:
            LexError: On an invalid character, only if
                ``config.fail_on_invalid`` is set.
        """
        self.trim()

        if not self.cursor_in_bounds():
            return self._make_token_at_current(TokenType.END)

        start_pos = self._pos
        start_lineno = self._lineno
        start_col = self._col

        token = (
            self._try_classify_word(start_pos)
            or self._try_classify_number(start_pos)
            or self._try_classify_operator(start_pos)
        )
        if token is not None:
            return token

        return self._invalid_token(start_pos, start_lineno, start_col)

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the single END token.

        Complexity: O(n) where n = len(source)
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.END:
                return

    def _invalid_token(self, start_pos: int, start_lineno: int, start_col: int) -> Token:
        """Consume one unclassifiable character and report it."""
        self._advance_by(1)
        token = self._make_token(TokenType.INVALID, start_pos)
        logger.debug("Invalid character %r at %d:%d", token.value, start_lineno, start_col)

        if self._config.report_invalid:
            report(
                Severity.WARNING,
                DiagnosticKind.INVALID_TOKEN,
                start_lineno,
                start_col,
                self._source,
                start_pos,
                sink=self._sink,
                source_file=self._source_file,
            )

        if self._config.fail_on_invalid:
            raise LexError(
                f"{DiagnosticKind.INVALID_TOKEN.message} {token.value!r}",
                lineno=start_lineno,
                col_offset=start_col,
                source_file=self._source_file,
            )
        return token

    # =========================================================================
    # Token construction
    # =========================================================================

    def _make_token(self, token_type: TokenType, start_pos: int) -> Token:
        """Create a Token spanning start_pos up to the cursor.

        Tokens never span a newline, so the start column is recovered
        from the current column and the lexeme length.
        """
        end_pos = self._pos
        return Token(
            type=token_type,
            value=self._source[start_pos:end_pos],
            _lineno=self._lineno,
            _col=self._col - (end_pos - start_pos),
            _start_offset=start_pos,
            _end_offset=end_pos,
            _source_file=self._source_file,
        )

    def _make_token_at_current(self, token_type: TokenType) -> Token:
        """Create a zero-length Token at the cursor (for END)."""
        return Token(
            type=token_type,
            value="",
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=self._pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )
