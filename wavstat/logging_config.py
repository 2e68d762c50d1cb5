"""Centralized logging configuration for wavstat."""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "wavstat"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: Path | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure logging for the wavstat logger tree.

    Calling again replaces the handlers installed by a previous call.

    Args:
        level: Logging level (default WARNING)
        log_file: Optional path to a log file
        format_string: Optional custom format string

    Raises:
        OSError: If the log file or its directory cannot be created
    """
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    # Open the file first so a failure leaves the previous handlers in place
    handlers: list[logging.Handler] = []
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    handlers.insert(0, logging.StreamHandler(sys.stderr))

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
