"""
Logging for command-line entry points.

The API configures logging through basicConfig in apps.api.main; scripts
run outside it and attach their own console handler.
"""
import logging
import os
from typing import Optional


CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger that writes to the console.

    Args:
        name: Logger name (usually module name)
        level: Level name; falls back to LOG_LEVEL, then INFO

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    return logger
