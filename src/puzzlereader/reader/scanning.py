"""Skip operations (``scan_*``).

Each method tries to match at the current position. On a match it
advances and returns the number of characters skipped (always > 0); on a
miss it leaves the position alone and returns 0. None of them raise.
"""

from __future__ import annotations

from puzzlereader.charsets import digit_value, equals_ignore_case
from puzzlereader.reader.lines import find_next_line_start


class ScanMixin:
    """Mixin providing the optional-skip operations."""

    __slots__ = ()

    # Set by Reader
    _source: str
    _pos: int
    _end: int

    def scan_spaces(self) -> int:
        """Skip any whitespace.

        Returns:
            The number of whitespace characters skipped
        """
        source = self._source
        end = self._end
        start = pos = self._pos
        while pos < end and source[pos].isspace():
            pos += 1
        self._pos = pos
        return pos - start

    def scan(self, expected: str) -> int:
        """Skip an exact (case-sensitive) string.

        A one-character ``expected`` skips a single exact character.

        Returns:
            ``len(expected)`` if it was next, else 0
        """
        if not expected or not self._source.startswith(expected, self._pos, self._end):
            return 0
        self._pos += len(expected)
        return len(expected)

    def scan_ignore_case(self, expected: str) -> int:
        """Skip a string, ignoring case.

        A match that ends exactly at the end of the range counts, the same
        as for scan().

        Returns:
            ``len(expected)`` if it was next, else 0
        """
        count = len(expected)
        pos = self._pos
        if not count or pos + count > self._end:
            return 0
        source = self._source
        for offset, char in enumerate(expected):
            if not equals_ignore_case(source[pos + offset], char):
                return 0
        self._pos = pos + count
        return count

    def scan_until(self, stops: str) -> int:
        """Skip characters until any character in ``stops`` is reached.

        Leaves the reader at that character, or at the end of the range.

        Args:
            stops: The characters NOT to skip; each one ends the scan

        Returns:
            The number of characters skipped
        """
        source = self._source
        end = self._end
        start = self._pos
        if len(stops) == 1:
            found = source.find(stops, start, end)
            pos = end if found == -1 else found
        else:
            stop_set = frozenset(stops)
            pos = start
            while pos < end and source[pos] not in stop_set:
                pos += 1
        self._pos = pos
        return pos - start

    def scan_until_digit(self, radix: int = 10) -> int:
        """Skip characters until a digit of ``radix`` is reached.

        A '-' directly before that digit is left in place, since it belongs
        to the number that follows. If no digit remains, the reader ends at
        the end of the range.

        Returns:
            The number of characters skipped
        """
        source = self._source
        end = self._end
        start = pos = self._pos
        while pos < end and digit_value(source[pos], radix) < 0:
            pos += 1
        if start < pos < end and source[pos - 1] == "-":
            pos -= 1
        self._pos = pos
        return pos - start

    def scan_until_next_line(self) -> int:
        """Skip the rest of this line and its terminator (\\r, \\n, or \\r\\n).

        Returns:
            The number of characters skipped, terminator included
        """
        start = self._pos
        self._pos = find_next_line_start(self._source, start, self._end)
        return self._pos - start
