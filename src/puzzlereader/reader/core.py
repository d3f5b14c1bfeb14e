"""Reader: a position-tracking cursor over an immutable string.

A reader is the text it was built from plus a ``[start, end)`` window and
a current position inside it. Nested readers, from recurse(), next_line()
or lines(), share the very same ``str`` object and only carry their own
window; no text is copied and nothing points back at the parent.

Naming convention for the read methods:

- ``scan*()`` skips optional content and returns how many characters were
  skipped (0 if it was not there).
- ``next*()`` reads an optional value and returns it, or None.
- ``expect*()`` reads required content and raises ExpectedTokenError if it
  is missing.

Thread Safety:
The shared string is immutable, so separate readers over one buffer can be
used from separate threads. A single reader instance is not safe for
concurrent use; its position is plain mutable state.

"""

from __future__ import annotations

from puzzlereader.errors import PositionOutOfRangeError
from puzzlereader.reader.expecting import ExpectMixin
from puzzlereader.reader.lines import LineMixin
from puzzlereader.reader.reading import END, ReadMixin
from puzzlereader.reader.scanning import ScanMixin
from puzzlereader.utils.logger import get_logger

logger = get_logger(__name__)


class Reader(
    # Order matters: each mixin must precede any mixin that stubs its methods
    ScanMixin,
    ReadMixin,
    ExpectMixin,
    LineMixin,
):
    """Cursor over a window of an immutable string.

    Usage:
            >>> reader = Reader("left 3")
            >>> x = 0
            >>> if reader.scan("left "):
            ...     x -= reader.expect_integer()
            ... elif reader.scan("right "):
            ...     x += reader.expect_integer()
            >>> x
            -3

    Invariant:
        ``0 <= start <= position <= end <= len(source)``

    """

    __slots__ = ("_source", "_start", "_end", "_pos")

    def __init__(self, source: str, start: int = 0, end: int | None = None) -> None:
        """Initialize reader over ``source[start:end]``.

        Args:
            source: Text to read; shared, never copied
            start: First position of the window
            end: Position after the window (default: end of source)

        Raises:
            PositionOutOfRangeError: If the window does not fit in source
        """
        if end is None:
            end = len(source)
        if not 0 <= start <= len(source):
            raise PositionOutOfRangeError(start, 0, len(source))
        if not start <= end <= len(source):
            raise PositionOutOfRangeError(end, start, len(source))
        self._source = source
        self._start = start
        self._end = end
        self._pos = start

    def __repr__(self) -> str:
        if self._start == 0:
            where = f"position {self._pos} of {self._end}"
        else:
            where = (
                f"position {self._pos - self._start}({self._pos})"
                f" of {self._end - self._start}({self._end})"
            )
        if self._pos >= self._end:
            return f"<Reader {where}; at end>"
        return f"<Reader {where}; next character == {self._source[self._pos]!r}>"

    def __str__(self) -> str:
        return self.text()

    def __len__(self) -> int:
        return self._end - self._start

    # =========================================================================
    # Positional queries
    # =========================================================================

    @property
    def source(self) -> str:
        """The shared buffer (the whole string, not just this window)."""
        return self._source

    @property
    def position(self) -> int:
        """Absolute position of the next character to read."""
        return self._pos

    @property
    def length(self) -> int:
        """Number of characters in this reader's window."""
        return self._end - self._start

    @property
    def start_position(self) -> int:
        """Start of the window. Zero for root readers."""
        return self._start

    @property
    def end_position(self) -> int:
        """End of the window. ``len(source)`` for root readers."""
        return self._end

    def at_end(self) -> bool:
        """True once every character in the window has been read."""
        return self._pos >= self._end

    def peek_char(self) -> str:
        """The next character without advancing, or END at the end."""
        if self._pos >= self._end:
            return END
        return self._source[self._pos]

    def restart(self) -> None:
        """Move back to the start of the window."""
        self._pos = self._start

    def set_position(self, pos: int) -> None:
        """Move the read position anywhere within the window.

        Args:
            pos: Any position from start_position to end_position inclusive

        Raises:
            PositionOutOfRangeError: If pos is outside the window
        """
        if not self._start <= pos <= self._end:
            logger.debug("Rejected position %d outside [%d, %d]", pos, self._start, self._end)
            raise PositionOutOfRangeError(pos, self._start, self._end)
        self._pos = pos

    def recurse(self, start: int, end: int) -> Reader:
        """Create a nested reader over ``[start, end)`` of this window.

        Raises:
            PositionOutOfRangeError: If the sub-range is not inside this window
        """
        self._check_range(start, end)
        return type(self)(self._source, start, end)

    # =========================================================================
    # String extraction
    # =========================================================================

    def substring(self, start: int, end: int) -> str:
        """Text between two absolute positions inside this window."""
        self._check_range(start, end)
        return self._source[start:end]

    def text(self) -> str:
        """The whole window, regardless of the read position."""
        return self._source[self._start : self._end]

    def left(self) -> str:
        """Text already read: from the window start to the position."""
        return self._source[self._start : self._pos]

    def right(self) -> str:
        """Text not yet read: from the position to the window end."""
        return self._source[self._pos : self._end]

    def _check_range(self, start: int, end: int) -> None:
        if not self._start <= start <= self._end:
            logger.debug("Rejected range start %d outside [%d, %d]", start, self._start, self._end)
            raise PositionOutOfRangeError(start, self._start, self._end)
        if not start <= end <= self._end:
            logger.debug("Rejected range end %d outside [%d, %d]", end, start, self._end)
            raise PositionOutOfRangeError(end, start, self._end)
