"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Classes are ASCII-only, matching the C locale: a non-ASCII letter such as
"é" is not a letter here and lexes as INVALID.

Usage:
    from tinylex.lexer.charsets import LETTERS

    if char in LETTERS:  # O(1) lookup
        ...
"""

import string

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

LETTERS: frozenset[str] = frozenset(string.ascii_letters)

DIGITS: frozenset[str] = frozenset(string.digits)

ALNUM: frozenset[str] = LETTERS | DIGITS

# Opens a line comment when it follows whitespace
COMMENT_MARKER = "/"

# Opens a line comment anywhere (LexConfig.comments_anywhere)
COMMENT_PREFIX = "//"
