"""Utility modules for puzzlereader.

Provides:
- logger: get_logger for logging
"""

from puzzlereader.utils.logger import get_logger

__all__ = [
    "get_logger",
]
