"""Identifier, keyword and number classifier mixin."""

from __future__ import annotations

from tinylex.lexer.charsets import ALNUM, DIGITS, LETTERS
from tinylex.tokens import KEYWORDS, Token, TokenType


class WordClassifierMixin:
    """Mixin providing maximal-munch word and integer classification.

    A letter starts an identifier that runs over letters and digits; a
    digit starts a number that runs over digits only. So ``123abc`` is
    NUMBER ``123`` then IDENTIFIER ``abc``.

    """

    _source: str
    _pos: int
    _source_len: int

    def _advance_by(self, count: int) -> None:
        """Consume count non-newline characters. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, start_pos: int) -> Token:
        """Create token spanning start_pos..cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_run(self, start_pos: int, charset: frozenset[str]) -> int:
        """Return the end of the run of charset characters after start_pos."""
        source = self._source
        source_len = self._source_len
        end = start_pos + 1
        while end < source_len and source[end] in charset:
            end += 1
        return end

    def _try_classify_word(self, start_pos: int) -> Token | None:
        """Classify an identifier or keyword at the cursor.

        Returns:
            Token if the cursor is on a letter, None otherwise.
        """
        if self._source[start_pos] not in LETTERS:
            return None

        end = self._scan_run(start_pos, ALNUM)
        self._advance_by(end - start_pos)

        if self._source[start_pos:end] in KEYWORDS:
            return self._make_token(TokenType.KEYWORD, start_pos)
        return self._make_token(TokenType.IDENTIFIER, start_pos)

    def _try_classify_number(self, start_pos: int) -> Token | None:
        """Classify an integer literal at the cursor.

        No sign, decimal point or exponent is recognized.

        Returns:
            Token if the cursor is on a digit, None otherwise.
        """
        if self._source[start_pos] not in DIGITS:
            return None

        end = self._scan_run(start_pos, DIGITS)
        self._advance_by(end - start_pos)
        return self._make_token(TokenType.NUMBER, start_pos)
