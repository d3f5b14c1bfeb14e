"""Exception classes for puzzlereader.

Only required reads (``expect_*``) and explicit repositioning raise.
Optional skips (``scan_*``) and optional reads (``next_*``) report a miss
through their return value instead.
"""

from __future__ import annotations


class ReaderError(Exception):
    """Base exception for all puzzlereader errors.

    Subclass this for specific error categories.
    """

    pass


class ExpectedTokenError(ReaderError):
    """A required token was not found at the current position.

    Raised by every ``expect_*`` method. The message names what was
    expected, where the reader stood, and a rendered preview of the text
    that was found instead.
    """

    def __init__(self, expected: str, position: int, preview: str) -> None:
        """Initialize with the failure context.

        Args:
            expected: Human-readable description (e.g. "an integer")
            position: Absolute buffer position where the read failed
            preview: Rendered text found at that position
        """
        self.expected = expected
        self.position = position
        self.preview = preview
        self.message = f"Reader expected {expected} at position {position}; found: {preview}"
        super().__init__(self.message)


class PositionOutOfRangeError(ReaderError, IndexError):
    """A position or sub-range falls outside a reader's range.

    Also an ``IndexError``, so callers can catch it the usual way.
    """

    def __init__(self, position: int, start: int, end: int) -> None:
        """Initialize with the rejected position and the permitted bounds.

        Args:
            position: The offending absolute position
            start: Lowest permitted position
            end: Highest permitted position (inclusive)
        """
        self.position = position
        self.start = start
        self.end = end
        super().__init__(
            f"{position} is not a valid position. Must be in the range [{start}, {end}]"
        )
