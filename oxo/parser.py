"""Cell identifier parsing: "<letter><digit>" to a zero-based coordinate."""

from __future__ import annotations

import re
import string
from typing import NamedTuple

from oxo.errors import MalformedIdentifierError

ALPHABET = string.ascii_lowercase

# Largest board every cell of which can be named
MAX_ROWS = len(ALPHABET)
MAX_COLUMNS = 9

_IDENTIFIER = re.compile(r"([A-Za-z])([0-9])")


class Coordinate(NamedTuple):
    row: int
    col: int


def parse_cell_identifier(text: str) -> Coordinate:
    """Parse e.g. "a1" or "C4". Row is the letter (a=0), column the digit minus one."""
    match = _IDENTIFIER.fullmatch(text)
    if match is None:
        raise MalformedIdentifierError(text)

    row = ALPHABET.index(match.group(1).lower())
    col = int(match.group(2)) - 1
    return Coordinate(row, col)


def format_cell_identifier(row: int, col: int) -> str:
    """Inverse of parse_cell_identifier for cells inside MAX_ROWS x MAX_COLUMNS."""
    if not (0 <= row < MAX_ROWS and 0 <= col < MAX_COLUMNS):
        raise ValueError(f"Cell ({row}, {col}) has no identifier")
    return f"{ALPHABET[row]}{col + 1}"
