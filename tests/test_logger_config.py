"""
Tests for logger_config.py
"""
import logging

import pytest

from wareki_conv.utils.logger_config import LEVEL
from wareki_conv.utils.logger_config import configure_logger


def _own_handlers() -> list[logging.Handler]:
    return [handler for handler in logging.getLogger().handlers if handler.get_name() == "wareki_conv"]


class TestConfigureLogger:
    """configure_logger のテスト"""

    def test_reconfigure_does_not_stack_handlers(self):
        configure_logger(LEVEL.INFO)
        configure_logger(LEVEL.DEBUG)

        assert len(_own_handlers()) == 1
        assert logging.getLogger().level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "app.log"
        configure_logger(logging.WARNING, log_file)

        handlers = _own_handlers()
        assert len(handlers) == 2
        assert any(isinstance(handler, logging.FileHandler) for handler in handlers)

        configure_logger(logging.WARNING)
        assert len(_own_handlers()) == 1


class TestLevel:
    """LEVEL のテスト"""

    @pytest.mark.parametrize(("name", "expected"), [("debug", LEVEL.DEBUG), (" Warning ", LEVEL.WARNING)])
    def test_from_name(self, name, expected):
        assert LEVEL.from_name(name) is expected

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            LEVEL.from_name("verbose")
