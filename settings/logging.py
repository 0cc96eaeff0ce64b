"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_FILE_LEVEL, LOG_LEVEL, LOG_RETENTION

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logging(level: str | None = None, to_file: bool = False):
    """Configure loguru sinks.

    ``level`` overrides RAMP_LOG_LEVEL for the console. The optional file sink
    under LOG_DIR logs at RAMP_LOG_FILE_LEVEL and rotates daily.
    """
    console_level = (level or LOG_LEVEL).upper()
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "ramp_cache_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level=LOG_FILE_LEVEL,
            rotation="00:00",
            retention=LOG_RETENTION,
            compression="gz",
        )
        logger.info("Logging to {} (console={}, file={})", LOG_DIR, console_level, LOG_FILE_LEVEL)

    return logger
