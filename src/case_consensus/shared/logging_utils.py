"""Logging utilities for the case consensus engine."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(
    log_file: Optional[Path] = None,
    level: str = "INFO",
    rotation: str = "1 day"
) -> None:
    """Configure logging for the application.

    Args:
        log_file: Optional path to log file
        level: Logging level
        rotation: Log rotation policy
    """
    # Remove default handler
    logger.remove()

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, format=FILE_FORMAT, level=level, rotation=rotation)


def get_logger(name: str):
    """Get a loguru logger bound to the given component name.

    Args:
        name: The name for the logger

    Returns:
        A bound loguru logger
    """
    return logger.bind(component=name)
