"""Logging utilities for wavgen."""

import logging
import os
import sys
from typing import Optional

from wavgen.config import LOG_LEVEL_DEFAULT, LOG_LEVEL_ENV


class WavgenFormatter(logging.Formatter):
    """Compact formatter.

    Format: [{level[0]} {time} {module_basename[:9]}] {message}
    Example: [I 14:23:45.123 render   ] wrote out.wav
    """

    def format(self, record):
        level_char = record.levelname[0]
        module_padded = record.name.split(".")[-1][:9].ljust(9)
        timestamp = self.formatTime(record, "%H:%M:%S")
        msecs = f"{record.msecs:03.0f}"
        return f"[{level_char} {timestamp}.{msecs} {module_padded}] {record.getMessage()}"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger for a wavgen module.

    Args:
        name: Component name (usually __name__)
        level: Optional level (DEBUG/INFO/WARNING/ERROR).
               Falls back to WAVGEN_LOG_LEVEL, then WARNING.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, LOG_LEVEL_DEFAULT)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(WavgenFormatter())
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def set_level(level: str) -> None:
    """Change the level of every logger already handed out by get_logger."""
    value = getattr(logging, level.upper(), logging.WARNING)
    for name in list(logging.root.manager.loggerDict):
        if name == "wavgen" or name.startswith("wavgen."):
            logging.getLogger(name).setLevel(value)
