"""
Logging setup for infounit.

The package logs through a single "infounit" logger that owns one stderr
handler and does not propagate, so applications that configure the root
logger never see infounit diagnostics twice. The level comes from the
caller, then from $INFOUNIT_LOG_LEVEL, then defaults to warning.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVEL_ENV = "INFOUNIT_LOG_LEVEL"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_logging_configured = False


def configure_logging(level: Optional[str] = None):
    """
    Attach the stderr handler to the package logger.

    Only the first call has an effect; the package makes it on import.
    Use update_log_level() to change the level afterwards.

    Args:
        level: 'debug', 'info', 'warning', 'error' or 'critical'; unknown
            names mean warning
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "warning")
    log_level = _level_from_name(level)

    logger = logging.getLogger("infounit")
    logger.setLevel(log_level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package logger, e.g. "parsing" -> "infounit.parsing"."""
    if not name.startswith("infounit"):
        name = f"infounit.{name}"
    return logging.getLogger(name)


def _level_from_name(level: str) -> int:
    return _LEVELS.get(level.lower(), logging.WARNING)


def update_log_level(level: str):
    """Set the level of the package logger and its handlers."""
    log_level = _level_from_name(level)

    logger = logging.getLogger("infounit")
    logger.setLevel(log_level)
    for handler in logger.handlers:
        handler.setLevel(log_level)
