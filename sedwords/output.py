"""Column-aligned output of matches"""

import sys
from typing import Iterable, Optional, Sequence, TextIO

from sedwords.types.sed_match import SedMatch

COLUMN_WIDTH = 21
COLUMN_GAP = "  "


def format_row(fields: Sequence[str], width: int = COLUMN_WIDTH) -> str:
    """Left-justify each field to width. Longer values are not cut."""
    return COLUMN_GAP.join(f.ljust(width) for f in fields).rstrip()


def format_match(match: SedMatch, width: int = COLUMN_WIDTH) -> str:
    return format_row(match.as_tuple(), width)


def write_matches(
    matches: Iterable[SedMatch],
    stream: Optional[TextIO] = None,
    width: int = COLUMN_WIDTH,
) -> int:
    """Write one line per match and return the number written."""
    stream = stream or sys.stdout
    count = 0
    for match in matches:
        stream.write(format_match(match, width) + "\n")
        count += 1
    return count
