"""Character classification for the reader.

Whitespace and letters follow Python's own ``str.isspace()`` and
``str.isalpha()``. Digits use a radix-aware mapping so ``next_integer(16)``
and friends work for any base from 2 to 36.

Usage:
    from puzzlereader.charsets import digit_value

    if digit_value(char, 16) >= 0:
        ...
"""

import unicodedata

MIN_RADIX = 2
MAX_RADIX = 36

# Both characters that may start a line terminator (\r, \n, or \r\n)
LINE_TERMINATORS: frozenset[str] = frozenset("\r\n")

SIGNS: frozenset[str] = frozenset("+-")

# (first, last, value of first) for letter digits; ASCII and full-width Latin
_LETTER_DIGITS: tuple[tuple[str, str, int], ...] = (
    ("a", "z", 10),
    ("A", "Z", 10),
    ("ａ", "ｚ", 10),
    ("Ａ", "Ｚ", 10),
)


def digit_value(char: str, radix: int = 10) -> int:
    """Return the numeric value of ``char`` as a digit in ``radix``.

    Accepts any Unicode decimal digit (e.g. Arabic-Indic or full-width
    digits) plus Latin letters for values 10-35.

    Returns:
        The digit value, or -1 if ``char`` is not a digit of ``radix`` or
        ``radix`` is outside 2..36.

    Examples:
        >>> digit_value("7")
        7
        >>> digit_value("f", 16)
        15
        >>> digit_value("8", 8)
        -1
    """
    if len(char) != 1 or not MIN_RADIX <= radix <= MAX_RADIX:
        return -1
    value = unicodedata.decimal(char, -1)
    if value < 0:
        for first, last, base in _LETTER_DIGITS:
            if first <= char <= last:
                value = ord(char) - ord(first) + base
                break
        else:
            return -1
    return value if value < radix else -1


def equals_ignore_case(a: str, b: str) -> bool:
    """Compare two characters, ignoring case.

    Checks both upper- and lower-case forms, since some characters only
    fold together in one direction.
    """
    return a == b or a.upper() == b.upper() or a.lower() == b.lower()
