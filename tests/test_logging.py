"""
Tests for the logging configuration.
"""

import logging
import sys

import pytest

from infounit.core import logging as infounit_logging
from infounit.core.logging import configure_logging, get_logger, update_log_level


@pytest.fixture
def fresh_logging(monkeypatch):
    """Allow configure_logging() to run again and restore the level afterwards."""
    logger = logging.getLogger("infounit")
    level = logger.level
    monkeypatch.setattr(infounit_logging, "_logging_configured", False)
    yield logger
    update_log_level(logging.getLevelName(level).lower())


class TestLogging:
    """Test package logger setup."""

    def test_get_logger_prefix(self):
        """Test that logger names are prefixed with the package name."""
        assert get_logger("parsing").name == "infounit.parsing"
        assert get_logger("infounit.core.parsing").name == "infounit.core.parsing"

    def test_configure_level(self, fresh_logging):
        """Test configuring an explicit level."""
        configure_logging(level="debug")
        assert fresh_logging.level == logging.DEBUG
        assert len(fresh_logging.handlers) == 1
        assert fresh_logging.handlers[0].stream is sys.stderr
        assert fresh_logging.handlers[0].formatter._fmt == infounit_logging.LOG_FORMAT
        assert not fresh_logging.propagate

    def test_configure_from_environment(self, fresh_logging, monkeypatch):
        """Test taking the level from the environment."""
        monkeypatch.setenv("INFOUNIT_LOG_LEVEL", "error")
        configure_logging()
        assert fresh_logging.level == logging.ERROR

    def test_configure_once(self, fresh_logging):
        """Test that later calls do not reconfigure."""
        configure_logging(level="info")
        configure_logging(level="critical")
        assert fresh_logging.level == logging.INFO

    def test_update_level(self, fresh_logging):
        """Test updating the level of the logger and its handlers."""
        configure_logging(level="warning")
        update_log_level("debug")
        assert fresh_logging.level == logging.DEBUG
        assert all(handler.level == logging.DEBUG for handler in fresh_logging.handlers)

    def test_unknown_level(self, fresh_logging):
        """Test that unknown levels fall back to warning."""
        configure_logging(level="chatty")
        assert fresh_logging.level == logging.WARNING
