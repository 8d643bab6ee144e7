"""Loguru sink configuration."""

import sys

from loguru import logger

from .config import Settings


def configure_logging(settings: Settings) -> None:
    """Replace the default loguru sink with the configured ones.

    Args:
        settings: Server settings providing ``log_level`` and ``log_file``
    """
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=settings.log_level)
    if settings.log_file:
        logger.add(
            settings.log_file,
            rotation="10 MB",
            level="DEBUG" if settings.debug else settings.log_level,
        )
    logger.debug("Logging configured at level {}", settings.log_level)
