"""
puzzlereader: structured-text cursor for puzzle input

Reads puzzle input the way a person describes it: skip this, read a
number, expect that literal, split into lines. Nested readers share the
original string, so splitting a large input into lines copies nothing.

Quick Start:
    >>> from puzzlereader import Reader
    >>> reader = Reader("3 french hens\\n2 turtle doves")
    >>> for line in reader.lines():
    ...     count = line.expect_integer()
    ...     line.scan_spaces()
    ...     print(count, line.right())
    3 french hens
    2 turtle doves

Installation:
    pip install puzzlereader         # zero runtime dependencies
"""

from puzzlereader.config import (
    ReaderConfig,
    get_reader_config,
    reader_config_context,
    reset_reader_config,
    set_reader_config,
)
from puzzlereader.errors import ExpectedTokenError, PositionOutOfRangeError, ReaderError
from puzzlereader.reader import END, LineSequence, Reader

__version__ = "0.1.0"

__all__ = [
    "END",
    "ExpectedTokenError",
    "LineSequence",
    "PositionOutOfRangeError",
    "Reader",
    "ReaderConfig",
    "ReaderError",
    "__version__",
    "get_reader_config",
    "reader_config_context",
    "reset_reader_config",
    "set_reader_config",
]
