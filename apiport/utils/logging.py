"""
Logging utilities for the ApiPort client.

Author: Yobie Benjamin
Date: 2026-02-28
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    format: Optional[str] = None,
) -> list[int]:
    """
    Replace loguru's sinks with a console sink and an optional file sink.

    Args:
        level: Log level (TRACE, DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file
        rotation: Log rotation size/time
        retention: Log retention period
        format: Log format string

    Returns:
        Ids of the sinks that were added
    """
    logger.remove()
    format = format or DEFAULT_FORMAT

    sink_ids = [
        logger.add(
            sys.stderr,
            format=format,
            level=level,
            colorize=True,
        )
    ]

    if log_file:
        sink_ids.append(
            logger.add(
                log_file,
                format=format,
                level=level,
                rotation=rotation,
                retention=retention,
                compression="zip",
            )
        )

    return sink_ids


def setup_logging_from_settings(settings) -> list[int]:
    """Configure logging from an ``ApiPortSettings`` instance."""
    return setup_logging(level=settings.log_level, log_file=settings.log_file)
