"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = "<cyan>{time:HH:mm:ss.SSS}</cyan> <level>{level: <7}</level> <dim>{module}</dim> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} {level: <7} {module}.{function}:{line} {message}"


def setup_logging(level: str = LOG_LEVEL, to_file: bool = False):
    """Log to stderr and, when to_file is set, to a daily review-analysis log."""
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "review_topics_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="14 days",
            compression="gz",
        )
        logger.debug("File logging enabled in {}", LOG_DIR)

    return logger
