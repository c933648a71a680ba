"""Tests for tinylex utility modules."""


class TestGetLogger:
    """Tests for get_logger."""

    def test_prefix_added(self) -> None:
        from tinylex.utils.logger import get_logger

        assert get_logger("mymodule").name == "tinylex.mymodule"

    def test_module_name_kept(self) -> None:
        from tinylex.utils.logger import get_logger

        assert get_logger("tinylex.lexer.core").name == "tinylex.lexer.core"
        assert get_logger("tinylex").name == "tinylex"

    def test_lookalike_prefix_namespaced(self) -> None:
        from tinylex.utils import get_logger

        assert get_logger("tinylexer").name == "tinylex.tinylexer"
