"""Move resolution — turns a legal move into an ordered list of effects.

:func:`resolve_move` never touches the board.  It reads a
:class:`BoardView`, decides what the move does, and describes every state
change as an effect value.  :class:`battlechess.game.state.GameState` applies
them in order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from battlechess.core.board import BoardView
from battlechess.core.enums import Color, MoveKind, PieceType
from battlechess.core.movement import (
    classify_move,
    en_passant_victim,
    reaches_promotion_row,
)
from battlechess.core.piece import Piece
from battlechess.core.types import Square

IconSet: TypeAlias = Mapping[tuple[Color, PieceType], Any]

# ── Effects ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class CapturePiece:
    """Remove *piece* from *square*; it leaves play."""

    square: Square
    piece: Piece


@dataclass(frozen=True, slots=True)
class MovePiece:
    from_sq: Square
    to_sq: Square


@dataclass(frozen=True, slots=True)
class ClearFirstMove:
    piece: Piece


@dataclass(frozen=True, slots=True)
class MarkDoubleStep:
    piece: Piece


@dataclass(frozen=True, slots=True)
class MarkMoved:
    piece: Piece


@dataclass(frozen=True, slots=True)
class PromotePawn:
    """Replace the pawn on *square* with *queen*."""

    square: Square
    queen: Piece


@dataclass(frozen=True, slots=True)
class ClearDoubleStep:
    """Previous mover loses en passant eligibility."""

    piece: Piece


@dataclass(frozen=True, slots=True)
class RecordLastMoved:
    piece: Piece


@dataclass(frozen=True, slots=True)
class SwitchTurn:
    to_color: Color


@dataclass(frozen=True, slots=True)
class EndGame:
    winner: Color


Effect: TypeAlias = (
    CapturePiece
    | MovePiece
    | ClearFirstMove
    | MarkDoubleStep
    | MarkMoved
    | PromotePawn
    | ClearDoubleStep
    | RecordLastMoved
    | SwitchTurn
    | EndGame
)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Everything a committed move does, in application order."""

    from_sq: Square
    to_sq: Square
    kind: MoveKind
    effects: tuple[Effect, ...]
    captured: Piece | None = None
    captured_square: Square | None = None
    promoted: Piece | None = None
    winner: Color | None = None

    @property
    def ends_game(self) -> bool:
        return self.winner is not None


# ── Resolution ──────────────────────────────────────────────────────────────


def make_queen(pawn: Piece, icon_set: IconSet | None = None) -> Piece:
    """Queen replacing *pawn* on promotion; remembers the pawn's image."""
    image = None if icon_set is None else icon_set.get((pawn.color, PieceType.QUEEN))
    return Piece(pawn.color, PieceType.QUEEN, image, pawn_image=pawn.image)


def resolve_move(
    board: BoardView,
    from_sq: Square,
    to_sq: Square,
    last_piece_moved: Piece | None = None,
    icon_set: IconSet | None = None,
) -> MoveOutcome | None:
    """Resolve the move *from_sq* → *to_sq*, or return ``None`` if illegal."""
    kind = classify_move(from_sq, to_sq, board)
    if kind is None:
        return None

    piece = board[from_sq]
    assert piece is not None  # classify_move rejects empty origins
    effects: list[Effect] = []

    captured: Piece | None = None
    captured_sq: Square | None = None
    if kind == MoveKind.CAPTURE:
        captured, captured_sq = board[to_sq], to_sq
    elif kind == MoveKind.EN_PASSANT:
        captured_sq = en_passant_victim(piece, from_sq, to_sq, board)
        assert captured_sq is not None
        captured = board[captured_sq]
    if captured is not None and captured_sq is not None:
        effects.append(CapturePiece(captured_sq, captured))

    effects.append(MovePiece(from_sq, to_sq))
    if piece.is_pawn:
        effects.append(ClearFirstMove(piece))
        if kind == MoveKind.DOUBLE_STEP:
            effects.append(MarkDoubleStep(piece))
    elif piece.piece_type == PieceType.MINER:
        effects.append(MarkMoved(piece))

    # A captured king ends the game on the spot: no promotion, no flag
    # reset, no turn switch.
    if captured is not None and captured.is_king:
        effects.append(EndGame(piece.color))
        return MoveOutcome(
            from_sq,
            to_sq,
            kind,
            tuple(effects),
            captured=captured,
            captured_square=captured_sq,
            winner=piece.color,
        )

    promoted: Piece | None = None
    if reaches_promotion_row(piece, to_sq):
        promoted = make_queen(piece, icon_set)
        effects.append(PromotePawn(to_sq, promoted))

    if (
        last_piece_moved is not None
        and last_piece_moved is not piece
        and last_piece_moved.is_pawn
    ):
        effects.append(ClearDoubleStep(last_piece_moved))
    effects.append(RecordLastMoved(promoted if promoted is not None else piece))
    effects.append(SwitchTurn(piece.color.opposite))

    return MoveOutcome(
        from_sq,
        to_sq,
        kind,
        tuple(effects),
        captured=captured,
        captured_square=captured_sq,
        promoted=promoted,
    )
