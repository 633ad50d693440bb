"""Board - piece placement on the 5x12 battle grid."""

from __future__ import annotations

from collections.abc import Sequence

from battlechess.core.enums import Color
from battlechess.core.piece import Piece
from battlechess.core.types import (
    COLUMNS,
    ROWS,
    SQUARE_COUNT,
    Square,
    check_square,
    make_square,
)


class BoardView:
    """Read-only snapshot of square occupancy handed to legality checks."""

    __slots__ = ("_squares",)

    def __init__(self, squares: Sequence[Piece | None]) -> None:
        self._squares: tuple[Piece | None, ...] = tuple(squares)

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[check_square(sq)]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def is_enemy(self, sq: Square, color: Color) -> bool:
        """Whether *sq* holds a piece of the side opposing *color*."""
        piece = self[sq]
        return piece is not None and piece.color != color


class Board:
    """Mutable 60-square grid; each square holds at most one piece."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * SQUARE_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[check_square(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[check_square(sq)] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    def piece_count(self) -> int:
        return sum(1 for piece in self._squares if piece is not None)

    def view(self) -> BoardView:
        return BoardView(self._squares)

    # -- Mutation / copying -------------------------------------------------

    def remove(self, sq: Square) -> Piece | None:
        """Clear *sq* and return its former occupant."""
        piece = self[sq]
        self._squares[sq] = None
        return piece

    def move(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Move the occupant of *from_sq* onto *to_sq*.

        Returns the piece that was displaced from *to_sq*, if any.
        """
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")
        displaced = self.remove(to_sq)
        self._squares[to_sq] = piece
        self._squares[from_sq] = None
        return displaced

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * SQUARE_COUNT

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(ROWS - 1, -1, -1):
            cells = []
            for column in range(COLUMNS):
                p = self._squares[make_square(column, row)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1:>2} {' '.join(cells)}")
        rows.append("   a b c d e")
        return "\n".join(rows)
