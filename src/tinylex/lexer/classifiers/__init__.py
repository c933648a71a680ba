"""Token classifiers for the tinylex lexer.

Each classifier is a mixin that recognizes one family of tokens at the
cursor. A classifier either consumes its token and returns it, or returns
None without moving the cursor.
"""

from tinylex.lexer.classifiers.operator import (
    SINGLE_CHAR_TOKENS,
    TWO_CHAR_TOKENS,
    OperatorClassifierMixin,
)
from tinylex.lexer.classifiers.word import WordClassifierMixin

__all__ = [
    "OperatorClassifierMixin",
    "SINGLE_CHAR_TOKENS",
    "TWO_CHAR_TOKENS",
    "WordClassifierMixin",
]
