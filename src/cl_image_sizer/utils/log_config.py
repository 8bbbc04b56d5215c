"""Loguru sink setup for command line use."""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> None:
    """Enable library logging and route it to stderr at ``level``."""
    logger.remove()
    _ = logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
    logger.enable("cl_image_sizer")
