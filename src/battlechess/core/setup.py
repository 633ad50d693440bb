"""Randomised starting layout for the battle grid.

Every square in :data:`SETUP_SQUARES` receives an independently chosen
piece kind.  Nothing limits the number of kings a side gets: a side may
start with several kings, or none.
"""

from __future__ import annotations

import random

from battlechess.core.board import Board
from battlechess.core.enums import Color, PieceType
from battlechess.core.piece import Piece
from battlechess.core.resolver import IconSet
from battlechess.core.types import COLUMNS, ROWS, Square, make_square, row_of

RANDOM_KINDS: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.PAWN,
)

_FULL_ROWS = (0, 1, 5, 6, 10, 11)
_CENTRE_GAP_ROWS = (3, 8)  # column c left empty
_SPARSE_ROWS = (2, 4, 7, 9)  # columns b and d left empty


def _build_setup_squares() -> tuple[Square, ...]:
    squares: list[Square] = []
    for row in range(ROWS):
        for column in range(COLUMNS):
            if row in _FULL_ROWS:
                squares.append(make_square(column, row))
            elif row in _CENTRE_GAP_ROWS and column != 2:
                squares.append(make_square(column, row))
            elif row in _SPARSE_ROWS and column not in (1, 3):
                squares.append(make_square(column, row))
    return tuple(squares)


SETUP_SQUARES: tuple[Square, ...] = _build_setup_squares()


def side_of(sq: Square) -> Color:
    """White owns the lower half of the grid, Black the upper half."""
    return Color.WHITE if row_of(sq) < ROWS // 2 else Color.BLACK


def icon_for(icon_set: IconSet | None, color: Color, piece_type: PieceType) -> object:
    if icon_set is None:
        return None
    try:
        return icon_set[(color, piece_type)]
    except KeyError:
        raise ValueError(
            f"Icon set has no image for {color} {piece_type.name.lower()}"
        ) from None


def random_piece(
    color: Color,
    rng: random.Random,
    icon_set: IconSet | None = None,
) -> Piece:
    piece_type = rng.choice(RANDOM_KINDS)
    return Piece(color, piece_type, icon_for(icon_set, color, piece_type))


def populate_board(
    board: Board,
    icon_set: IconSet | None = None,
    rng: random.Random | None = None,
) -> Board:
    """Clear *board* and fill the setup squares with random pieces."""
    rng = rng if rng is not None else random.Random()
    board.clear()
    for sq in SETUP_SQUARES:
        board[sq] = random_piece(side_of(sq), rng, icon_set)
    return board


def random_board(
    icon_set: IconSet | None = None,
    seed: int | None = None,
) -> Board:
    return populate_board(Board(), icon_set, random.Random(seed))
