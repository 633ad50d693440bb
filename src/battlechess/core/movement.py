"""Movement legality — one predicate per piece kind over a read-only board.

Every check here is pure: it reads a :class:`BoardView` and returns a
:class:`MoveKind` (or ``None`` for an illegal move).  State changes that
follow from a move (pawn flags, en passant removal, promotion) are worked
out by :mod:`battlechess.core.resolver`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from battlechess.core.board import BoardView
from battlechess.core.enums import Color, MoveKind, PieceType
from battlechess.core.piece import Piece
from battlechess.core.types import (
    SQUARE_COUNT,
    Square,
    column_of,
    make_square,
    row_of,
)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# Row a pawn must stand on to capture en passant.
EN_PASSANT_ROWS: dict[Color, int] = {Color.WHITE: 4, Color.BLACK: 3}

# Row on which a pawn is promoted to a queen.
PROMOTION_ROWS: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}

GeometryCheck = Callable[[Square, Square, BoardView], bool]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def squares_between(from_sq: Square, to_sq: Square) -> Iterator[Square]:
    """Squares strictly between two squares on a shared line or diagonal."""
    dc = column_of(to_sq) - column_of(from_sq)
    dr = row_of(to_sq) - row_of(from_sq)
    step_c, step_r = _sign(dc), _sign(dr)
    column, row = column_of(from_sq) + step_c, row_of(from_sq) + step_r
    for _ in range(max(abs(dc), abs(dr)) - 1):
        yield make_square(column, row)
        column += step_c
        row += step_r


def _path_is_clear(from_sq: Square, to_sq: Square, board: BoardView) -> bool:
    return all(board.is_empty(sq) for sq in squares_between(from_sq, to_sq))


# -- Shared geometry ---------------------------------------------------------


def diagonal_scan(from_sq: Square, to_sq: Square, board: BoardView) -> bool:
    """Bishop-style move: equal column and row change, nothing in between."""
    dc = abs(column_of(to_sq) - column_of(from_sq))
    dr = abs(row_of(to_sq) - row_of(from_sq))
    return dc == dr != 0 and _path_is_clear(from_sq, to_sq, board)


def straight_scan(from_sq: Square, to_sq: Square, board: BoardView) -> bool:
    """Rook-style move: along one row or column, nothing in between."""
    dc = column_of(to_sq) - column_of(from_sq)
    dr = row_of(to_sq) - row_of(from_sq)
    return (dc == 0) != (dr == 0) and _path_is_clear(from_sq, to_sq, board)


def _queen_scan(from_sq: Square, to_sq: Square, board: BoardView) -> bool:
    return diagonal_scan(from_sq, to_sq, board) or straight_scan(from_sq, to_sq, board)


def _offset_check(offsets: tuple[tuple[int, int], ...]) -> GeometryCheck:
    def check(from_sq: Square, to_sq: Square, _board: BoardView) -> bool:
        delta = (
            column_of(to_sq) - column_of(from_sq),
            row_of(to_sq) - row_of(from_sq),
        )
        return delta in offsets

    return check


_GEOMETRY: dict[PieceType, GeometryCheck] = {
    PieceType.KNIGHT: _offset_check(KNIGHT_OFFSETS),
    PieceType.BISHOP: diagonal_scan,
    PieceType.ROOK: straight_scan,
    PieceType.QUEEN: _queen_scan,
    PieceType.KING: _offset_check(KING_OFFSETS),
    PieceType.MINER: straight_scan,
}


# -- Pawns -------------------------------------------------------------------


def en_passant_victim(
    pawn: Piece, from_sq: Square, to_sq: Square, board: BoardView
) -> Square | None:
    """Square of the enemy pawn *pawn* would take en passant, if any.

    The victim stands beside the mover, directly behind the (empty)
    destination, and must have double-stepped on the previous ply.
    """
    if row_of(from_sq) != EN_PASSANT_ROWS[pawn.color]:
        return None
    if not board.is_empty(to_sq):
        return None
    victim_sq = make_square(column_of(to_sq), row_of(from_sq))
    victim = board[victim_sq]
    if (
        victim is not None
        and victim.is_pawn
        and victim.color != pawn.color
        and victim.just_made_double_step
    ):
        return victim_sq
    return None


def pawn_move_kind(
    pawn: Piece, from_sq: Square, to_sq: Square, board: BoardView
) -> MoveKind | None:
    forward = pawn.color.forward
    dc = column_of(to_sq) - column_of(from_sq)
    dr = (row_of(to_sq) - row_of(from_sq)) * forward
    target = board[to_sq]

    if dc == 0:
        if target is not None:
            return None  # pawns never capture straight ahead
        if dr == 1:
            return MoveKind.NORMAL
        if dr == 2 and pawn.first_move:
            step_sq = make_square(column_of(from_sq), row_of(from_sq) + forward)
            if board.is_empty(step_sq):
                return MoveKind.DOUBLE_STEP
        return None

    if abs(dc) == 1 and dr == 1:
        if target is not None:
            return MoveKind.CAPTURE
        if en_passant_victim(pawn, from_sq, to_sq, board) is not None:
            return MoveKind.EN_PASSANT
    return None


# -- Public API --------------------------------------------------------------


def classify_move(from_sq: Square, to_sq: Square, board: BoardView) -> MoveKind | None:
    """Kind of move the piece on *from_sq* makes by going to *to_sq*.

    Returns ``None`` when the move is illegal, including when *from_sq* is
    empty or *to_sq* holds an ally.
    """
    piece = board[from_sq]
    if piece is None or from_sq == to_sq:
        return None
    target = board[to_sq]
    if target is not None and not board.is_enemy(to_sq, piece.color):
        return None

    if piece.is_pawn:
        return pawn_move_kind(piece, from_sq, to_sq, board)

    geometry = _GEOMETRY.get(piece.piece_type)
    if geometry is None or not geometry(from_sq, to_sq, board):
        return None
    return MoveKind.NORMAL if target is None else MoveKind.CAPTURE


def is_valid_move(from_sq: Square, to_sq: Square, board: BoardView) -> bool:
    return classify_move(from_sq, to_sq, board) is not None


def legal_targets(from_sq: Square, board: BoardView) -> list[Square]:
    """Every square the piece on *from_sq* may move to."""
    return [
        to_sq
        for to_sq in range(SQUARE_COUNT)
        if classify_move(from_sq, to_sq, board) is not None
    ]


def reaches_promotion_row(piece: Piece, to_sq: Square) -> bool:
    return piece.is_pawn and row_of(to_sq) == PROMOTION_ROWS[piece.color]

