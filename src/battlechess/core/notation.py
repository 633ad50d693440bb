"""Plain-text board diagrams.

One line per row, top line is row 12.  Letters follow FEN conventions
(uppercase = white, lowercase = black) plus ``M``/``m`` for the miner;
``.`` marks an empty square.  Spaces inside a line are ignored::

    . . k . .
    ...
    . . K . .
"""

from __future__ import annotations

from battlechess.core.board import Board
from battlechess.core.piece import Piece
from battlechess.core.resolver import IconSet
from battlechess.core.setup import icon_for
from battlechess.core.types import COLUMNS, ROWS, make_square


def board_to_text(board: Board) -> str:
    lines: list[str] = []
    for row in range(ROWS - 1, -1, -1):
        cells = []
        for column in range(COLUMNS):
            piece = board[make_square(column, row)]
            cells.append(str(piece) if piece else ".")
        lines.append(" ".join(cells))
    return "\n".join(lines)


def board_from_text(text: str, icon_set: IconSet | None = None) -> Board:
    """Parse a diagram produced by :func:`board_to_text`."""
    lines = [line.replace(" ", "") for line in text.strip().splitlines()]
    lines = [line for line in lines if line]
    if len(lines) != ROWS:
        raise ValueError(f"Expected {ROWS} rows, got {len(lines)}")

    board = Board()
    for index, line in enumerate(lines):
        if len(line) != COLUMNS:
            raise ValueError(f"Row {ROWS - index} must have {COLUMNS} squares: {line!r}")
        row = ROWS - 1 - index
        for column, char in enumerate(line):
            if char == ".":
                continue
            piece = Piece.from_char(char)
            piece.image = icon_for(icon_set, piece.color, piece.piece_type)
            board[make_square(column, row)] = piece
    return board
