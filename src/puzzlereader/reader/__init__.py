"""Reader cursor for structured puzzle input.

reader/
├── __init__.py          # Re-exports Reader, LineSequence, END
├── core.py              # Reader class (mixin composition + positional queries)
├── scanning.py          # scan*() optional skips
├── reading.py           # next*() optional reads
├── expecting.py         # expect*() required reads
├── lines.py             # Line splitting and LineSequence
└── diagnostics.py       # Error preview rendering

Usage:
    >>> from puzzlereader.reader import Reader
    >>> reader = Reader("move 3 from 1 to 2")
    >>> reader.expect("move ")
    'move '
    >>> reader.expect_integer()
    3

"""

from puzzlereader.reader.core import Reader
from puzzlereader.reader.lines import LineSequence
from puzzlereader.reader.reading import END

__all__ = ["END", "LineSequence", "Reader"]
