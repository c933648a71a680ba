"""Tests for the command-line driver."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from tinylex.cli import format_token, main
from tinylex.lexer import Lexer


@pytest.fixture
def program(tmp_path: Path) -> Path:
    path = tmp_path / "prog.c"
    path.write_text("int x;\nx = 1 @ 2;\n", encoding="utf-8")
    return path


class TestFormatToken:
    def test_line_format(self) -> None:
        token = Lexer("  while").next_token()
        assert format_token(token) == "Found token 'while' of type: TOKEN_KEYWORD on line 1 at col 3"


class TestMain:
    def test_prints_tokens_and_diagnostics(
        self, program: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(program)]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[:3] == [
            "Found token 'int' of type: TOKEN_KEYWORD on line 1 at col 1",
            "Found token 'x' of type: TOKEN_IDENTIFIER on line 1 at col 5",
            "Found token ';' of type: TOKEN_SEMICOLON on line 1 at col 6",
        ]
        assert "WARNING: Invalid token at 2:7" in lines
        assert "Found token '@' of type: TOKEN_INVALID on line 2 at col 7" in lines
        assert lines[-1] == "Found token ';' of type: TOKEN_SEMICOLON on line 2 at col 10"

    def test_diagnostic_precedes_invalid_token_line(
        self, program: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main([str(program)])

        lines = capsys.readouterr().out.splitlines()
        warning = lines.index("WARNING: Invalid token at 2:7")
        assert lines[warning + 1] == "x = 1 @ 2;"
        assert lines[warning + 2] == "      ^ -- offending character"
        assert lines[warning + 3].startswith("Found token '@'")

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        missing = tmp_path / "missing.c"

        assert main([str(missing)]) == 1
        assert capsys.readouterr().out.startswith(f"Error: could not open file {missing}")

    def test_strict_stops_at_invalid(
        self, program: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--strict", str(program)]) == 1

        out = capsys.readouterr().out
        assert "Error: " in out
        assert "TOKEN_INVALID" not in out
        assert "'2'" not in out

    def test_comments_anywhere(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "c.c"
        path.write_text("//note\nx", encoding="utf-8")

        assert main(["--comments-anywhere", str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Found token 'x' of type: TOKEN_IDENTIFIER on line 2 at col 1"
        ]

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("return 0;"))

        assert main(["-"]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 3

    def test_undecodable_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        stdin = io.TextIOWrapper(io.BytesIO(b"int \xff x;"), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)

        assert main(["-"]) == 1
        assert capsys.readouterr().out.startswith("Error: could not open file <stdin>: ")

    def test_empty_file_prints_nothing(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "empty.c"
        path.write_text("", encoding="utf-8")

        assert main([str(path)]) == 0
        assert capsys.readouterr().out == ""
