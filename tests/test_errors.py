"""Tests for exception classes."""

from tinylex.errors import LexError, SourceReadError, TinylexError
from tinylex.location import SourceLocation


class TestLexErrorFormatting:
    """Verify LexError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = LexError("Invalid token '@'")
        assert str(err) == "Invalid token '@'"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_and_column(self) -> None:
        err = LexError("Invalid token '@'", lineno=4, col_offset=2)
        assert str(err) == "4:2 Invalid token '@'"

    def test_with_source_file(self) -> None:
        err = LexError("bad", lineno=1, col_offset=1, source_file="main.c")
        assert str(err) == "main.c:1:1 bad"

    def test_line_without_column(self) -> None:
        assert str(LexError("msg", lineno=7)) == "7 msg"

    def test_file_without_position(self) -> None:
        assert str(LexError("msg", source_file="a.c")) == "a.c msg"

    def test_prefix_matches_source_location(self) -> None:
        err = LexError("bad", lineno=2, col_offset=9, source_file="x.c")
        assert str(err).split(" ", 1)[0] == str(SourceLocation(2, 9, source_file="x.c"))

    def test_is_tinylex_error(self) -> None:
        assert isinstance(LexError("x"), TinylexError)


class TestSourceReadError:
    def test_message(self) -> None:
        err = SourceReadError("missing.c", "No such file")
        assert err.path == "missing.c"
        assert str(err) == "could not open file missing.c: No such file"
        assert isinstance(err, TinylexError)
