"""Logging helpers shared by the sniff package."""

import logging
import sys

LOGGER_NAME = "docblock_sniffs"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it when a name is given."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def setup_logging(level: int | str = logging.INFO, quiet: bool = False) -> logging.Logger:
    """Configure the package logger with a single stderr handler.

    Args:
        level: Logging level name or number
        quiet: Only show warnings and errors

    Returns:
        The configured package logger
    """
    logger = get_logger()

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    if quiet:
        level = logging.WARNING

    logger.setLevel(level)

    # Replace existing handlers so repeated calls do not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
