"""Logging setup for lazywatch.

The TUI owns stdout while it runs, so records only ever go to a log file.
Without a file a ``NullHandler`` keeps library logging silent.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER_NAME = "lazywatch"
LOG_FILENAME = "lazywatch.log"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def normalize_level(level: str | None) -> str:
    """Return an upper-case level name, falling back to ``INFO``."""
    if not level:
        return "INFO"
    candidate = str(level).strip().upper()
    return candidate if candidate in VALID_LEVELS else "INFO"


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> logging.Logger:
    """Configure the ``lazywatch`` logger hierarchy.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional log file path. Parent directories are created.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, normalize_level(level)))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        logger.addHandler(logging.NullHandler())
        return logger

    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s")
    )
    logger.addHandler(file_handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


__all__ = [
    "LOG_FILENAME",
    "ROOT_LOGGER_NAME",
    "VALID_LEVELS",
    "get_logger",
    "normalize_level",
    "setup_logging",
]
