"""Required-read operations (``expect_*``).

Each method delegates to the matching scan or next operation and raises
ExpectedTokenError when it misses. The error carries what was expected,
the position, and a rendered preview of what was found instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from puzzlereader.config import get_reader_config
from puzzlereader.errors import ExpectedTokenError
from puzzlereader.reader.diagnostics import render_preview
from puzzlereader.utils.logger import get_logger

if TYPE_CHECKING:
    from puzzlereader.reader.core import Reader

logger = get_logger(__name__)


class ExpectMixin:
    """Mixin providing the required-read operations."""

    __slots__ = ()

    # Set by Reader
    _source: str
    _pos: int
    _end: int

    # Provided by Reader and the other mixins
    def at_end(self) -> bool:
        raise NotImplementedError

    def scan(self, expected: str) -> int:
        raise NotImplementedError

    def scan_ignore_case(self, expected: str) -> int:
        raise NotImplementedError

    def next_integer(self, radix: int = 10) -> int | None:
        raise NotImplementedError

    def next_long(self, radix: int = 10) -> int | None:
        raise NotImplementedError

    def next_word(self) -> str | None:
        raise NotImplementedError

    def next_non_space(self) -> str | None:
        raise NotImplementedError

    def next_char(self) -> str:
        raise NotImplementedError

    def next_line(self) -> Reader | None:
        raise NotImplementedError

    def _expected(self, description: str) -> ExpectedTokenError:
        """Build the error for a missing token at the current position."""
        config = get_reader_config()
        preview = render_preview(
            self._source,
            self._pos,
            self._end,
            config.preview_length,
            visible_whitespace=config.visible_whitespace,
        )
        error = ExpectedTokenError(description, self._pos, preview)
        logger.debug("%s", error.message)
        return error

    def expect(self, expected: str) -> str:
        """Skip past an exact (case-sensitive) string.

        Returns:
            The text that was read

        Raises:
            ExpectedTokenError: If the string is not next
        """
        if self.scan(expected) == 0:
            raise self._expected(f"exactly '{expected}'")
        return self._source[self._pos - len(expected) : self._pos]

    def expect_ignore_case(self, expected: str) -> str:
        """Skip past a string, ignoring case.

        Returns:
            The text as it appears in the buffer

        Raises:
            ExpectedTokenError: If the string is not next
        """
        if self.scan_ignore_case(expected) == 0:
            raise self._expected(f"'{expected}' (case-insensitive)")
        return self._source[self._pos - len(expected) : self._pos]

    def expect_integer(self, radix: int = 10) -> int:
        """Read a required integer.

        Raises:
            ExpectedTokenError: If an integer is not next
        """
        value = self.next_integer(radix)
        if value is None:
            raise self._expected("an integer")
        return value

    def expect_long(self, radix: int = 10) -> int:
        """Same as expect_integer()."""
        value = self.next_long(radix)
        if value is None:
            raise self._expected("an integer")
        return value

    def expect_word(self) -> str:
        """Read a required word (letters only)."""
        word = self.next_word()
        if word is None:
            raise self._expected("a word")
        return word

    def expect_non_space(self) -> str:
        """Read required text up to the next whitespace."""
        text = self.next_non_space()
        if text is None:
            raise self._expected("something other than a space")
        return text

    def expect_char(self) -> str:
        """Read one required character."""
        if self.at_end():
            raise self._expected("a character")
        return self.next_char()

    def expect_line(self) -> Reader:
        """Read one required line into its own nested reader."""
        line = self.next_line()
        if line is None:
            raise self._expected("a line")
        return line

    def expect_end(self) -> None:
        """Confirm that the reader has reached the end of its range.

        Raises:
            ExpectedTokenError: If anything is left to read
        """
        if not self.at_end():
            raise self._expected("the end of buffer")
