from __future__ import annotations

import sys

from loguru import logger


def configure_logging(level: str = "WARNING") -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}",
    )
