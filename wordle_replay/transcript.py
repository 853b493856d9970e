"""
Transcript reader.

A transcript is a share header such as ``Wordle 232 6/6`` followed by one
feedback row per line. A single-line share may carry the first row on the
header line itself, after the score:

    Wordle 232 6/6:black_large_square::large_yellow_square:...
"""

import re
from typing import Iterable, Iterator, Optional, Tuple

from .errors import MalformedTranscriptHeaderError


SHARE_MARKER = "Wordle"

_DAY_RE = re.compile(r'^\d{1,3}(,\d{3})*$|^\d+$')


def parse_header(line: str) -> Tuple[int, Optional[str]]:
    """
    Parse a share header.

    Returns:
        (puzzle number, first feedback row if embedded in the header)

    Raises:
        MalformedTranscriptHeaderError: wrong marker word or bad puzzle number
    """
    parts = line.strip().split(' ')
    if len(parts) < 2 or parts[0] != SHARE_MARKER:
        raise MalformedTranscriptHeaderError(line)

    day = parts[1]
    if ':' in day:
        day = day[:day.index(':')]
    if not _DAY_RE.match(day):
        raise MalformedTranscriptHeaderError(line)

    embedded = None
    if ':' in line:
        embedded = line[line.index(':'):].strip()
    return int(day.replace(',', '')), embedded


def feedback_rows(lines: Iterable[str]) -> Iterator[str]:
    """Stripped, non-empty lines."""
    for line in lines:
        line = line.strip()
        if line:
            yield line


def read_transcript(lines: Iterable[str]) -> Tuple[int, Iterator[str]]:
    """
    Split a transcript into its puzzle number and a lazy iterator of rows.

    Raises:
        MalformedTranscriptHeaderError: if there is no header line at all
    """
    lines = iter(lines)
    header = next(lines, None)
    if header is None:
        raise MalformedTranscriptHeaderError("")

    day, embedded = parse_header(header)

    def rows() -> Iterator[str]:
        if embedded:
            yield embedded
        yield from feedback_rows(lines)

    return day, rows()
