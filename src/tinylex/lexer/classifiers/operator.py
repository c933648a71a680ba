"""Punctuation and operator classifier mixin."""

from __future__ import annotations

from tinylex.tokens import Token, TokenType

# One character, no lookahead
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.PAREN_OPEN,
    ")": TokenType.PAREN_CLOSE,
    "{": TokenType.CURLY_OPEN,
    "}": TokenType.CURLY_CLOSE,
    "=": TokenType.EQUAL,
    ";": TokenType.SEMICOLON,
    "/": TokenType.SLASH_FORWARD,
}

# first char -> (second char, two-char kind, one-char kind)
TWO_CHAR_TOKENS: dict[str, tuple[str, TokenType, TokenType]] = {
    "<": ("=", TokenType.LTE, TokenType.LT),
    ">": ("=", TokenType.GTE, TokenType.GT),
    "+": ("+", TokenType.PLUS_PLUS, TokenType.PLUS),
    "-": ("-", TokenType.MINUS_MINUS, TokenType.MINUS),
}


class OperatorClassifierMixin:
    """Mixin providing punctuation and operator classification.

    Two-character operators are matched longest first: ``<=`` is one LTE
    token, while ``< =`` is LT followed by EQUAL. Every branch produces
    exactly one token; ``/`` is always a single SLASH_FORWARD.

    """

    _source: str
    _pos: int

    def _peek(self, ahead: int = 0) -> str:
        """Peek at a character. Implemented by Lexer."""
        raise NotImplementedError

    def _advance_by(self, count: int) -> None:
        """Consume count non-newline characters. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, start_pos: int) -> Token:
        """Create token spanning start_pos..cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_operator(self, start_pos: int) -> Token | None:
        """Classify the punctuation or operator at the cursor.

        Args:
            start_pos: Cursor offset of the first character

        Returns:
            Token if the character starts an operator, None otherwise
            (cursor unchanged).
        """
        char = self._source[start_pos]

        token_type = SINGLE_CHAR_TOKENS.get(char)
        if token_type is not None:
            self._advance_by(1)
            return self._make_token(token_type, start_pos)

        pair = TWO_CHAR_TOKENS.get(char)
        if pair is None:
            return None

        second, double_type, single_type = pair
        if self._peek(1) == second:
            self._advance_by(2)
            return self._make_token(double_type, start_pos)

        self._advance_by(1)
        return self._make_token(single_type, start_pos)
