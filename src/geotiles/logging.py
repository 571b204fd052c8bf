"""
Logging setup using Loguru.
"""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {extra[name]} | {message}"


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure the Loguru logger with a single stderr sink.

    Args:
        level: Minimum level name, e.g. ``"DEBUG"`` or ``"WARNING"``.
    """
    logger.remove()
    logger.configure(extra={"name": "geotiles"})
    logger.add(sys.stderr, format=_FORMAT, level=level.upper(), colorize=False)
    logger.bind(name=__name__).debug(f"Logging initialized: level={level.upper()}")


def get_logger(name: str):
    """Get a logger with a specific name."""
    return logger.bind(name=name)
