"""
Tests for logging configuration.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from app.utils.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoggingConfig:
    """Tests for setup_logging."""

    def test_console_only(self, restore_root_logger):
        setup_logging(level="warning")
        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1

    def test_file_handler(self, restore_root_logger, tmp_path):
        setup_logging(log_file="api.log", level="DEBUG", log_dir=str(tmp_path))
        logging.getLogger("app.test").debug("written")
        for handler in restore_root_logger.handlers:
            handler.flush()
        assert "written" in (tmp_path / "api.log").read_text()

