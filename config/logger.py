"""Centralized logging configuration."""

import sys

from loguru import logger

from config.defaults import LOG_LEVEL


log_format = " | ".join((
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green>",
    "<level>{level:<8}</level>",
    "<cyan>{name}:{function}:{line}</cyan>",
    "{message}",
))


def setup_logging(level: str = LOG_LEVEL):
    """Replace loguru's default handler with the app's stderr sink."""
    logger.remove()
    logger.add(sys.stderr, format=log_format, level=level)
    return logger
