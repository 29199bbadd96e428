"""Loguru sinks for the API process: coloured stderr plus an optional rotating file."""

import sys

from loguru import logger

from retirement_calc.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


def configure_logging(settings: Settings) -> None:
    """Replace loguru's default handler with the sinks described by ``settings``."""
    logger.remove()
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=settings.LOG_LEVEL,
        colorize=True,
    )
    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            format=FILE_FORMAT,
            level=settings.LOG_LEVEL,
            rotation=settings.LOG_ROTATION,
        )
    logger.debug(f"Logging configured at level {settings.LOG_LEVEL} ({settings.APP_ENV})")
