"""Token and TokenType definitions for the tinylex lexer.

The lexer produces one Token per call to ``Lexer.next_token()``.
Each Token has a type, the lexeme text, and a source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Lexeme Ownership:
Python strings cannot borrow from another string, so the lexeme is copied
out of the source when the token is built. The token also keeps its start
and end offsets, so the span into the original buffer is never lost and the
token stays valid after the source string is released.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tinylex.location import SourceLocation


class TokenType(Enum):
    """Token kinds produced by the lexer.

    Organized by category:
    - Stream structure (END, INVALID)
    - Words and literals (KEYWORD, IDENTIFIER, NUMBER)
    - Punctuation
    - Operators

    """

    # Stream structure
    END = auto()
    INVALID = auto()

    # Words and literals
    KEYWORD = auto()  # if, else, while, return, int, void
    IDENTIFIER = auto()  # [A-Za-z][A-Za-z0-9]*
    NUMBER = auto()  # [0-9]+

    # Punctuation
    PAREN_OPEN = auto()  # (
    PAREN_CLOSE = auto()  # )
    CURLY_OPEN = auto()  # {
    CURLY_CLOSE = auto()  # }
    EQUAL = auto()  # =
    SEMICOLON = auto()  # ;

    # Comparison operators
    LT = auto()  # <
    GT = auto()  # >
    LTE = auto()  # <=
    GTE = auto()  # >=

    # Arithmetic operators
    PLUS = auto()  # +
    PLUS_PLUS = auto()  # ++
    MINUS = auto()  # -
    MINUS_MINUS = auto()  # --
    SLASH_FORWARD = auto()  # /

    # Declared but never produced: "//" is consumed as a comment by trim()
    SLASH_FORWARD_DOUBLE = auto()

    @property
    def display_name(self) -> str:
        """Name used by the command-line driver, e.g. ``TOKEN_KEYWORD``."""
        return f"TOKEN_{self.name}"


# Reserved words; exact, case-sensitive match only
KEYWORDS: frozenset[str] = frozenset({"if", "else", "while", "return", "int", "void"})


def is_keyword(text: str) -> bool:
    """Return True if text is exactly one of the reserved words."""
    return text in KEYWORDS


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The lexeme, copied from source[_start_offset:_end_offset]
        _lineno: Start row (1-indexed)
        _col: Start column (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _source_file: Optional source file path

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from tinylex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Row number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column (convenience accessor)."""
        return self._col

    @property
    def start_offset(self) -> int:
        """Offset of the first lexeme character in the source."""
        return self._start_offset

    @property
    def end_offset(self) -> int:
        """Offset one past the last lexeme character."""
        return self._end_offset

    @property
    def length(self) -> int:
        """Number of consumed characters; 0 only for END."""
        return self._end_offset - self._start_offset

    @property
    def is_end(self) -> bool:
        return self.type is TokenType.END

    @property
    def is_invalid(self) -> bool:
        return self.type is TokenType.INVALID


def token_name(token: Token) -> str:
    """Return the driver-facing name of a token's kind."""
    return token.type.display_name
