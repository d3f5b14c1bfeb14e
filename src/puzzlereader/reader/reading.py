"""Optional-read operations (``next_*``).

Each method tries to read a value at the current position. On success it
returns the value and advances past it; on a miss it returns None and the
position is exactly what it was before the call, including any sign
character a failed number read had looked at.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from puzzlereader.charsets import SIGNS, digit_value
from puzzlereader.reader.lines import find_end_of_line, find_next_line_start

if TYPE_CHECKING:
    from puzzlereader.reader.core import Reader

# Returned by next_char() and peek_char() at the end of the range
END = ""


class ReadMixin:
    """Mixin providing the optional-read operations."""

    __slots__ = ()

    # Set by Reader
    _source: str
    _pos: int
    _end: int

    def at_end(self) -> bool:
        raise NotImplementedError

    def recurse(self, start: int, end: int) -> Reader:
        raise NotImplementedError

    def scan_until(self, stops: str) -> int:
        raise NotImplementedError

    def next_word(self) -> str | None:
        """Read a single word, made only of letters.

        Returns:
            The word, or None if a letter is not next
        """
        source = self._source
        end = self._end
        start = pos = self._pos
        while pos < end and source[pos].isalpha():
            pos += 1
        if pos == start:
            return None
        self._pos = pos
        return source[start:pos]

    def next_non_space(self) -> str | None:
        """Read a word, number or punctuation run; anything up to whitespace.

        Returns:
            The text, or None if whitespace or the end is next
        """
        source = self._source
        end = self._end
        start = pos = self._pos
        while pos < end and not source[pos].isspace():
            pos += 1
        if pos == start:
            return None
        self._pos = pos
        return source[start:pos]

    def peek_word(self) -> str | None:
        """Look at the word at the current position without moving past it."""
        prev = self._pos
        word = self.next_word()
        self._pos = prev
        return word

    def next_integer(self, radix: int = 10) -> int | None:
        """Read a signed integer of any radix.

        An optional '+' or '-' may precede the digits. If no digit
        follows, the sign is not consumed.

        Args:
            radix: Numeric base, 2 to 36

        Returns:
            The integer, or None if one was not next
        """
        source = self._source
        end = self._end
        pos = self._pos
        negative = False
        if pos < end and source[pos] in SIGNS:
            negative = source[pos] == "-"
            pos += 1
        digits_start = pos
        value = 0
        while pos < end:
            digit = digit_value(source[pos], radix)
            if digit < 0:
                break
            value = value * radix + digit
            pos += 1
        if pos == digits_start:
            return None
        self._pos = pos
        return -value if negative else value

    def next_long(self, radix: int = 10) -> int | None:
        """Same as next_integer(); Python integers do not overflow."""
        return self.next_integer(radix)

    def next_char(self) -> str:
        """Read the next character, or END if there is none."""
        if self._pos >= self._end:
            return END
        char = self._source[self._pos]
        self._pos += 1
        return char

    def next_chars(self, count: int) -> str | None:
        """Read exactly ``count`` characters.

        Returns:
            The text, or None if fewer than ``count`` remain

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            msg = f"count must be non-negative, got {count}"
            raise ValueError(msg)
        start = self._pos
        if start + count > self._end:
            return None
        self._pos = start + count
        return self._source[start : self._pos]

    def next_until(self, stops: str) -> str:
        """Read up to (not including) the first character in ``stops``.

        Reads to the end of the range if none is found. Never fails; the
        result may be empty.
        """
        start = self._pos
        self.scan_until(stops)
        return self._source[start : self._pos]

    def next_line(self) -> Reader | None:
        """Read one line into its own nested reader.

        The terminator (\\r, \\n, or \\r\\n) is consumed but not included.
        Blank lines produce an empty reader.

        Returns:
            A reader over the line text, or None if already at the end
        """
        if self.at_end():
            return None
        line_start = self._pos
        line_end = find_end_of_line(self._source, line_start, self._end)
        self._pos = find_next_line_start(self._source, line_end, self._end)
        return self.recurse(line_start, line_end)
