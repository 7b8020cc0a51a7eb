"""Logging setup for the calculate command."""

import logging
import sys
from typing import Optional

from .config import LOG_DATE_FORMAT, LOG_FORMAT

PACKAGE_LOGGER = "grade_calculator"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the package logger to stderr, and optionally to a file.

    Args:
        verbose: Emit DEBUG records; otherwise only WARNING and above
        log_file: Path of a log file to write alongside stderr

    Returns:
        The configured package logger
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Each CLI invocation starts from a clean handler list
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to stderr%s", f" and {log_file}" if log_file else "")
    return logger
