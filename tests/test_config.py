"""Tests for ContextVar-based lexing configuration.

Validates thread isolation, context manager behavior, and how a Lexer
picks up the active config.
"""

from threading import Thread

import pytest

from tinylex import (
    CollectingSink,
    LexConfig,
    LexError,
    Lexer,
    TokenType,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.comments_anywhere is False
        assert config.report_invalid is True
        assert config.fail_on_invalid is False

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.comments_anywhere = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"comments_anywhere": True, "unknown_key": "ignored"})
        assert config.comments_anywhere is True
        assert config.report_invalid is True

    def test_from_dict_empty(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_set_and_reset(self) -> None:
        try:
            set_lex_config(LexConfig(report_invalid=False))
            assert get_lex_config().report_invalid is False
        finally:
            reset_lex_config()
        assert get_lex_config() == LexConfig()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with lex_config_context(LexConfig(comments_anywhere=True)):
                assert get_lex_config().comments_anywhere is True
                raise RuntimeError("boom")
        assert get_lex_config().comments_anywhere is False

    def test_thread_isolation(self) -> None:
        seen: list[bool] = []

        def worker() -> None:
            set_lex_config(LexConfig(comments_anywhere=True))
            seen.append(get_lex_config().comments_anywhere)

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [True]
        assert get_lex_config().comments_anywhere is False


class TestConfigEffects:
    """Options change lexer behavior."""

    def test_report_invalid_disabled(self) -> None:
        sink = CollectingSink()
        tokens = list(Lexer("@", sink=sink, config=LexConfig(report_invalid=False)).tokenize())

        assert tokens[0].type == TokenType.INVALID
        assert len(sink) == 0

    def test_fail_on_invalid_raises_after_report(self) -> None:
        sink = CollectingSink()
        lexer = Lexer("ok\n  @", sink=sink, config=LexConfig(fail_on_invalid=True))

        assert lexer.next_token().value == "ok"
        with pytest.raises(LexError) as exc_info:
            lexer.next_token()

        assert exc_info.value.lineno == 2
        assert exc_info.value.col_offset == 3
        assert len(sink) == 1

    def test_context_config_applies(self) -> None:
        with lex_config_context(LexConfig(comments_anywhere=True)):
            tokens = list(Lexer("//c\nx").tokenize())
        assert [t.value for t in tokens] == ["x", ""]
