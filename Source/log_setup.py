"""
Logging setup for Grocery Split
"""

import logging
from typing import Optional

from config import LOG_LEVEL, LOG_FILE

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _coerce_level(value: Optional[str]) -> int:
    if isinstance(value, str):
        return _LEVELS.get(value.upper().strip(), logging.WARNING)
    return logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """Return a logger with one stream handler and consistent formatting.

    Honors GROCERY_SPLIT_LOG_LEVEL (default WARNING) and GROCERY_SPLIT_LOG_FILE.
    """
    logger = logging.getLogger(name)
    if getattr(logger, "_grocery_split_configured", False):
        return logger

    level = _coerce_level(LOG_LEVEL)
    logger.setLevel(level)
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if LOG_FILE:
        try:
            file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
        except OSError as e:
            logger.warning(f"Log file {LOG_FILE} could not be opened: {e}")
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    logger.propagate = False
    setattr(logger, "_grocery_split_configured", True)
    return logger
