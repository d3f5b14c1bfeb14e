"""Line splitting over a reader's range.

A line ends at ``\\r``, ``\\n`` or ``\\r\\n``; the pair counts as one
terminator. Terminators are never part of a line's text. Every helper
takes an explicit ``end`` and never reads at or past it, so a nested
reader whose range stops right after a ``\\r`` does not peek at the
parent's following character.

Thread Safety:
LineSequence instances are single-use iterators. Create one per traversal.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from puzzlereader.charsets import LINE_TERMINATORS

if TYPE_CHECKING:
    from puzzlereader.reader.core import Reader


def find_end_of_line(source: str, pos: int, end: int) -> int:
    """Find the end of the line containing ``pos``.

    Returns:
        Position of the first ``\\r`` or ``\\n`` at or after ``pos``, or
        ``end`` if the line is unterminated.
    """
    while pos < end and source[pos] not in LINE_TERMINATORS:
        pos += 1
    return pos


def find_next_line_start(source: str, pos: int, end: int) -> int:
    """Find the start of the line after the one containing ``pos``.

    Returns:
        Position just past the next terminator, or ``end`` if ``pos`` is
        on the last line.
    """
    pos = find_end_of_line(source, pos, end)
    if pos < end:
        if source[pos] == "\r":
            pos += 1
            if pos < end and source[pos] == "\n":
                pos += 1
        else:
            pos += 1
    return pos


class LineSequence:
    """Lazy iterator of nested readers, one per line.

    Starts at the originating reader's position when created; the reader
    itself is not moved. To start over, save a position and call
    ``reader.lines()`` again.

    Usage:
            >>> for line in Reader("a\\r\\nb\\n\\nc").lines():
            ...     print(repr(line.text()))
        'a'
        'b'
        ''
        'c'

    """

    __slots__ = ("_reader", "_source", "_end", "_line_start", "_next_line_start")

    def __init__(self, reader: Reader) -> None:
        self._reader = reader
        self._source = reader.source
        self._end = reader.end_position
        self._next_line_start = reader.position
        self._line_start = reader.position

    def __iter__(self) -> Iterator[Reader]:
        return self

    def __next__(self) -> Reader:
        if self._next_line_start >= self._end:
            raise StopIteration
        self._line_start = self._next_line_start
        line_end = find_end_of_line(self._source, self._line_start, self._end)
        self._next_line_start = find_next_line_start(self._source, line_end, self._end)
        return self._reader.recurse(self._line_start, line_end)


class LineMixin:
    """Mixin providing whole-line enumeration."""

    __slots__ = ()

    _source: str
    _pos: int
    _end: int

    def lines(self) -> LineSequence:
        """An enumeration of lines from the current position onward."""
        return LineSequence(self)  # type: ignore[arg-type]

    def all_lines(self) -> list[Reader]:
        """A nested reader for every remaining line."""
        return list(self.lines())

    def all_line_strings(self) -> list[str]:
        """The text of every remaining line."""
        return [line.text() for line in self.lines()]

    def count_lines(self) -> int:
        """Count the remaining lines without moving the reader."""
        source = self._source
        end = self._end
        pos = self._pos
        count = 0
        while pos < end:
            pos = find_next_line_start(source, pos, end)
            count += 1
        return count
