"""Preview rendering for required-read failures.

Puzzle input is full of characters that vanish when printed: trailing
spaces, tabs, Windows line endings. The preview swaps each of those for a
visible glyph so an error message shows exactly what the reader saw.

    >>> render_preview("12 \\r\\nx", 2, 6)
    '·¶↓x§'
"""

from __future__ import annotations

GLYPHS: dict[str, str] = {
    " ": "·",  # middle dot
    "\t": "→",  # right arrow
    "\r": "¶",  # pilcrow
    "\n": "↓",  # down arrow
}

# Appended when the preview reaches the end of the reader's range
END_MARKER = "§"

_CONTROL_PICTURES_BASE = 0x2400
_DELETE_PICTURE = "␡"


def render_char(char: str) -> str:
    """Return a visible stand-in for ``char``.

    Whitespace gets the glyphs above; any other C0 control character or
    DEL maps to its Unicode control picture. Everything else is unchanged.
    """
    glyph = GLYPHS.get(char)
    if glyph is not None:
        return glyph
    code = ord(char)
    if code < 0x20:
        return chr(_CONTROL_PICTURES_BASE + code)
    if code == 0x7F:
        return _DELETE_PICTURE
    return char


def render_preview(
    source: str,
    pos: int,
    end: int,
    limit: int = 10,
    *,
    visible_whitespace: bool = True,
) -> str:
    """Render up to ``limit`` characters of ``source[pos:end]``.

    Args:
        source: The shared buffer
        pos: First position to render
        end: End of the reader's range (never read past)
        limit: Maximum number of characters to render
        visible_whitespace: Substitute glyphs for invisible characters

    Returns:
        The rendered text, followed by END_MARKER if the range ended
        before ``limit`` characters were shown.
    """
    stop = min(pos + limit, end)
    text = source[pos:stop]
    if visible_whitespace:
        text = "".join(render_char(char) for char in text)
    if pos + limit > end:
        text += END_MARKER
    return text
