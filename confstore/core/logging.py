"""
Logging setup driven by LoggingSettings.

Usage:
    settings = load_settings("confstore.toml")
    setup_logging(settings.logging)
"""
import os
import sys
from typing import Optional
from loguru import logger

from .config import LoggingSettings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Replace loguru's default sink with the sinks described by settings.

    Both sinks log at DEBUG when ``debug_mode`` is set and at INFO
    otherwise. The file sink is only added when ``log_dir`` is given.
    """
    settings = settings or LoggingSettings()
    level = settings.level

    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if settings.log_dir is not None:
        os.makedirs(settings.log_dir, exist_ok=True)
        logger.add(
            os.path.join(settings.log_dir, "confstore_{time}.log"),
            level=level,
            rotation=settings.rotation,
            retention=settings.retention,
        )

    logger.info(f"Logging initialized at {level}")
