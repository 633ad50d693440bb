"""Square type alias and coordinate helpers.

The board is 5 columns wide and 12 rows tall.  Coordinates start from
the bottom-left corner, White's side::

    a1=0,  b1=1,  ..., e1=4
    a2=5,  b2=6,  ..., e2=9
    ...
    a12=55, ...,       e12=59
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–59

COLUMNS = 5
ROWS = 12
SQUARE_COUNT = COLUMNS * ROWS

_COLUMN_LETTERS = "abcde"


def is_on_board(column: int, row: int) -> bool:
    """Whether (*column*, *row*) lies inside the grid."""
    return 0 <= column < COLUMNS and 0 <= row < ROWS


def make_square(column: int, row: int) -> Square:
    """Create square from column (0–4) and row (0–11)."""
    if not is_on_board(column, row):
        raise ValueError(f"Coordinates off board: ({column}, {row})")
    return row * COLUMNS + column


def column_of(sq: Square) -> int:
    """Column index 0–4 (a–e)."""
    return sq % COLUMNS


def row_of(sq: Square) -> int:
    """Row index 0–11 (1–12)."""
    return sq // COLUMNS


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < SQUARE_COUNT


def check_square(sq: int) -> Square:
    """Return *sq* unchanged, raising ``ValueError`` if it is off the board."""
    if not is_valid_square(sq):
        raise ValueError(f"Square off board: {sq!r}")
    return sq


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 59 → 'e12'."""
    return _COLUMN_LETTERS[column_of(sq)] + str(row_of(sq) + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'c2' → 7."""
    if len(name) < 2 or name[0] not in _COLUMN_LETTERS or not name[1:].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    row = int(name[1:]) - 1
    if not 0 <= row < ROWS:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(_COLUMN_LETTERS.index(name[0]), row)
