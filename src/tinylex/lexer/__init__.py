"""On-demand lexer for tinylex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + navigation)
├── charsets.py          # ASCII character classes, comment markers
├── classifiers/         # Token classification mixins
│   ├── word.py          # Identifiers, keywords, numbers
│   └── operator.py      # Punctuation and operators
└── scanners/            # Trivia skipping
    └── trivia.py        # Whitespace and line comments

Usage:
    >>> from tinylex.lexer import Lexer
    >>> lexer = Lexer("x <= 10")
    >>> for token in lexer.tokenize():
    ...     print(token)
Token(IDENTIFIER, 'x', 1:1)
Token(LTE, '<=', 1:3)
Token(NUMBER, '10', 1:6)
Token(END, '', 1:8)

"""

from tinylex.lexer.core import Lexer

__all__ = ["Lexer"]
