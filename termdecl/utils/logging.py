"""Simple logging utilities for termdecl."""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "termdecl"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a logger instance for the given module name."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if level:
        logger.setLevel(level.upper())

    return logger


def configure_logging(verbose: bool = False, level: Optional[str] = None) -> logging.Logger:
    """Configure the package logger for CLI use.

    --verbose wins over the configured level.
    """
    return get_logger(PACKAGE_LOGGER, "DEBUG" if verbose else (level or "WARNING"))
