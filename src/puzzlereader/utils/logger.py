"""Minimal logging utilities for puzzlereader.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from puzzlereader.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Reading puzzle input")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "puzzlereader." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'puzzlereader.mymodule'
    """
    if not (name == "puzzlereader" or name.startswith("puzzlereader.")):
        name = f"puzzlereader.{name}"
    return logging.getLogger(name)
