#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for logging configuration."""

import logging

import pytest
from rich.logging import RichHandler

from gdocs2html.logging_utils import TRACE_FORMAT, configure_logging, resolve_log_level


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler, (logging.FileHandler, RichHandler)) or type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.mark.unit
class TestResolveLogLevel:
    """Tests for resolve_log_level."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            (logging.ERROR, logging.ERROR),
            ("LOUD", logging.INFO),
        ],
    )
    def test_levels(self, value, expected):
        assert resolve_log_level(value) == expected


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_plain_handler(self, root_logger):
        configure_logging("INFO")
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1
        assert type(root_logger.handlers[0]) is logging.StreamHandler

    def test_rich_handler(self, root_logger):
        configure_logging("DEBUG", use_rich=True)
        assert isinstance(root_logger.handlers[0], RichHandler)

    def test_trace_format(self, root_logger):
        configure_logging("INFO", trace_mode=True)
        assert root_logger.handlers[0].formatter._fmt == TRACE_FORMAT

    def test_log_file(self, root_logger, tmp_path):
        log_file = tmp_path / "out.log"
        configure_logging("INFO", log_file=str(log_file))
        logging.getLogger("gdocs2html.test").info("written to file")
        assert any(isinstance(handler, logging.FileHandler) for handler in root_logger.handlers)
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_unusable_log_file(self, root_logger, tmp_path):
        configure_logging("INFO", log_file=str(tmp_path / "missing" / "out.log"))
        assert not any(isinstance(handler, logging.FileHandler) for handler in root_logger.handlers)
