"""Tests for preview rendering used in ExpectedTokenError."""

import pytest

from puzzlereader.reader.diagnostics import END_MARKER, render_char, render_preview


class TestRenderChar:
    @pytest.mark.parametrize(
        ("char", "glyph"),
        [(" ", "·"), ("\t", "→"), ("\r", "¶"), ("\n", "↓")],
    )
    def test_whitespace_glyphs(self, char: str, glyph: str) -> None:
        assert render_char(char) == glyph

    def test_glyphs_are_distinct(self) -> None:
        glyphs = {render_char(c) for c in " \t\r\n"} | {END_MARKER}
        assert len(glyphs) == 5

    def test_control_characters_use_control_pictures(self) -> None:
        assert render_char("\x00") == "␀"
        assert render_char("\x1b") == "␛"
        assert render_char("\x7f") == "␡"

    def test_ordinary_characters_unchanged(self) -> None:
        assert render_char("a") == "a"
        assert render_char("é") == "é"


class TestRenderPreview:
    def test_short_text_gets_end_marker(self) -> None:
        assert render_preview("ab", 0, 2) == "ab§"

    def test_exactly_limit_has_no_end_marker(self) -> None:
        assert render_preview("0123456789", 0, 10) == "0123456789"

    def test_longer_text_is_truncated(self) -> None:
        assert render_preview("0123456789abc", 0, 13) == "0123456789"

    def test_at_end(self) -> None:
        assert render_preview("abc", 3, 3) == "§"

    def test_respects_window_end(self) -> None:
        assert render_preview("abcdef", 1, 3) == "bc§"

    def test_custom_limit(self) -> None:
        assert render_preview("abcdef", 0, 6, 3) == "abc"

    def test_raw_whitespace(self) -> None:
        assert render_preview("a b\n", 0, 4, visible_whitespace=False) == "a b\n§"
