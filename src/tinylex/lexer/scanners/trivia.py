"""Whitespace and line-comment scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tinylex.lexer.charsets import COMMENT_MARKER, COMMENT_PREFIX, WHITESPACE

if TYPE_CHECKING:
    from tinylex.config import LexConfig


class TriviaScannerMixin:
    """Mixin providing trim(): skipping of insignificant input.

    Line comments run to the end of the line. By default a comment opens
    only at a ``/`` that directly follows a whitespace character, so
    ``a //x`` and ``a / x`` both end in a comment while ``a//x`` does not.
    With ``comments_anywhere`` a comment opens at ``//`` and nowhere else.

    Every newline stepped over bumps the row and resets the column, so the
    first character of a line is always at column 1.

    """

    _source: str
    _pos: int
    _source_len: int
    _lineno: int
    _col: int
    _config: LexConfig

    def cursor_in_bounds(self) -> bool:
        """Check the cursor is on a character. Implemented by Lexer."""
        raise NotImplementedError

    def advance(self) -> None:
        """Consume one character, column only. Implemented by Lexer."""
        raise NotImplementedError

    def _peek(self, ahead: int = 0) -> str:
        """Peek at a character. Implemented by Lexer."""
        raise NotImplementedError

    def trim(self) -> None:
        """Skip whitespace and line comments before the next token.

        Postcondition: the cursor is on the first character of a token,
        or out of bounds.
        """
        gated = not self._config.comments_anywhere
        source = self._source

        while self.cursor_in_bounds():
            char = source[self._pos]
            if char in WHITESPACE:
                if gated and self._peek(1) == COMMENT_MARKER:
                    self._consume_trivia()  # whitespace before the marker
                    self.advance()  # the marker
                    self._skip_to_line_end()
                    if not self.cursor_in_bounds():
                        break
                # Either plain whitespace or the newline ending a comment
                self._consume_trivia()
            elif not gated and source.startswith(COMMENT_PREFIX, self._pos):
                self._skip_to_line_end()
            else:
                break

    def _consume_trivia(self) -> None:
        """Consume one whitespace character, keeping row/column in step."""
        if self._source[self._pos] == "\n":
            self._lineno += 1
            # advance() brings this to 1
            self._col = 0
        self.advance()

    def _skip_to_line_end(self) -> None:
        """Advance up to, not over, the next newline or end of input."""
        line_end = self._source.find("\n", self._pos)
        if line_end == -1:
            line_end = self._source_len
        self._col += line_end - self._pos
        self._pos = line_end
