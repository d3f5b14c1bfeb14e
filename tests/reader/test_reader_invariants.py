"""Property-based tests for reader invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from collections.abc import Callable

from hypothesis import given, settings
from hypothesis import strategies as st

from puzzlereader import Reader

# Text rich in the characters the reader treats specially
reader_text = st.text(alphabet="ab Z9-+\t\r\n:", max_size=60)

SCANS: dict[str, Callable[[Reader], int]] = {
    "scan_spaces": lambda r: r.scan_spaces(),
    "scan": lambda r: r.scan("ab"),
    "scan_ignore_case": lambda r: r.scan_ignore_case("AB"),
    "scan_until": lambda r: r.scan_until(":"),
    "scan_until_digit": lambda r: r.scan_until_digit(),
    "scan_until_next_line": lambda r: r.scan_until_next_line(),
}

NEXTS: dict[str, Callable[[Reader], object]] = {
    "next_word": lambda r: r.next_word(),
    "next_non_space": lambda r: r.next_non_space(),
    "next_integer": lambda r: r.next_integer(),
    "next_integer_hex": lambda r: r.next_integer(16),
    "next_long": lambda r: r.next_long(),
    "next_chars": lambda r: r.next_chars(3),
    "next_line": lambda r: r.next_line(),
    "peek_word": lambda r: r.peek_word(),
}


def _positioned(text: str, data: st.DataObject) -> Reader:
    reader = Reader(text)
    reader.set_position(data.draw(st.integers(min_value=0, max_value=len(text))))
    return reader


class TestScanInvariants:
    """scan*() either advances by its return value or does nothing."""

    @given(reader_text, st.sampled_from(sorted(SCANS)), st.data())
    @settings(max_examples=300)
    def test_return_value_matches_movement(
        self, text: str, name: str, data: st.DataObject
    ) -> None:
        reader = _positioned(text, data)
        before = reader.position
        skipped = SCANS[name](reader)
        assert skipped >= 0
        assert reader.position == before + skipped


class TestNextInvariants:
    """next*() returning None leaves the position exactly where it was."""

    @given(reader_text, st.sampled_from(sorted(NEXTS)), st.data())
    @settings(max_examples=300)
    def test_absent_restores_position(self, text: str, name: str, data: st.DataObject) -> None:
        reader = _positioned(text, data)
        before = reader.position
        if NEXTS[name](reader) is None:
            assert reader.position == before

    @given(reader_text, st.integers(min_value=1, max_value=5), st.data())
    @settings(max_examples=100)
    def test_peek_word_is_idempotent(self, text: str, times: int, data: st.DataObject) -> None:
        reader = _positioned(text, data)
        before = reader.position
        first = reader.peek_word()
        for _ in range(times):
            assert reader.peek_word() == first
        assert reader.position == before


class TestIntegerRoundTrip:
    """Formatting an integer and reading it back yields the same value."""

    @given(st.integers())
    @settings(max_examples=200)
    def test_decimal(self, n: int) -> None:
        reader = Reader(str(n))
        assert reader.next_integer() == n
        assert reader.at_end()

    @given(st.integers(), st.sampled_from([(2, "b"), (8, "o"), (16, "x")]))
    @settings(max_examples=200)
    def test_other_radixes(self, n: int, radix_format: tuple[int, str]) -> None:
        radix, spec = radix_format
        reader = Reader(format(n, spec))
        assert reader.next_long(radix) == n
        assert reader.at_end()


class TestNestedContainment:
    """Nested readers are windows onto the parent's text."""

    @given(st.text(max_size=80), st.data())
    @settings(max_examples=200)
    def test_nested_text_is_parent_substring(self, text: str, data: st.DataObject) -> None:
        parent = Reader(text)
        start = data.draw(st.integers(min_value=0, max_value=len(text)))
        end = data.draw(st.integers(min_value=start, max_value=len(text)))
        nested = parent.recurse(start, end)

        assert nested.text() == text[start:end]
        assert nested.source is parent.source

        while not nested.at_end():
            nested.next_char()
        assert parent.position == 0
        assert parent.at_end() == (len(text) == 0)


class TestLineInvariants:
    """Line splitting drops terminators and nothing else."""

    @given(
        st.lists(st.text(alphabet="ab 1", min_size=1, max_size=8), min_size=1, max_size=10),
        st.data(),
    )
    @settings(max_examples=200)
    def test_terminator_agnostic(self, lines: list[str], data: st.DataObject) -> None:
        terminators = data.draw(
            st.lists(st.sampled_from(["\n", "\r", "\r\n"]), min_size=len(lines), max_size=len(lines))
        )
        text = "".join(line + term for line, term in zip(lines, terminators, strict=True))
        if data.draw(st.booleans()):
            text = text[: -len(terminators[-1])]

        assert Reader(text).all_line_strings() == lines

    @given(reader_text)
    @settings(max_examples=200)
    def test_lines_never_contain_terminators(self, text: str) -> None:
        reader = Reader(text)
        for line in reader.lines():
            assert "\r" not in line.text()
            assert "\n" not in line.text()
        assert reader.count_lines() == len(reader.all_lines())

    @given(reader_text)
    @settings(max_examples=200)
    def test_next_line_agrees_with_lines(self, text: str) -> None:
        reader = Reader(text)
        expected = reader.all_line_strings()
        read = []
        while (line := reader.next_line()) is not None:
            read.append(line.text())
        assert read == expected


class TestPositionInvariant:
    """start <= position <= end after any sequence of operations."""

    @given(
        st.text(max_size=40),
        st.lists(st.sampled_from(sorted(SCANS) + sorted(NEXTS)), max_size=20),
        st.data(),
    )
    @settings(max_examples=200)
    def test_position_stays_in_window(
        self, text: str, ops: list[str], data: st.DataObject
    ) -> None:
        start = data.draw(st.integers(min_value=0, max_value=len(text)))
        end = data.draw(st.integers(min_value=start, max_value=len(text)))
        reader = Reader(text).recurse(start, end)
        for op in ops:
            (SCANS.get(op) or NEXTS[op])(reader)
            assert start <= reader.position <= end
