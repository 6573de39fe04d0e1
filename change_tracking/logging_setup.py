"""
loguru sink configuration for the command line.

The library only logs through `loguru.logger`; it never adds sinks itself.
"""

import sys
from typing import Optional

from loguru import logger


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Replace the default sink with a console sink and an optional file sink."""
    logger.remove()

    # Console output (brief)
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=level
    )

    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
            rotation="10 MB",
            retention="7 days"
        )
