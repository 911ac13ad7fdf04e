"""Logging setup for the dashboard.

Every module logs through `logging.getLogger(__name__)`; this configures the
shared `hpi_core` parent logger once with labeled prefixes
(DEBUG|INFO|WARN|ERROR) written to stdout.
"""

from __future__ import annotations

import logging
import sys

__all__ = [
    "setup_logging",
    "get_logger",
    "reset_logging",
]

ROOT_LOGGER = "hpi_core"

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formats records as `LABEL logger: message`."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    def format(self, record: logging.LogRecord) -> str:
        label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{label} {record.name}: {record.getMessage()}"


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Configure the `hpi_core` logger. Idempotent: later calls return the same logger."""
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    # Streamlit reruns the script; never stack handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    if _logger is None:
        return setup_logging()
    return _logger


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    if _logger is not None:
        for handler in _logger.handlers[:]:
            _logger.removeHandler(handler)
        _logger.propagate = True
    _logger = None
