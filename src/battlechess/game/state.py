"""Game state — board, turn, selection and the terminal win state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from battlechess.core.board import Board
from battlechess.core.enums import Color
from battlechess.core.piece import Piece
from battlechess.core.resolver import (
    CapturePiece,
    ClearDoubleStep,
    ClearFirstMove,
    Effect,
    EndGame,
    IconSet,
    MarkDoubleStep,
    MarkMoved,
    MoveOutcome,
    MovePiece,
    PromotePawn,
    RecordLastMoved,
    SwitchTurn,
    resolve_move,
)
from battlechess.core.setup import random_board
from battlechess.core.types import Square, check_square, square_name
from battlechess.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Mutable state of one game session.

    This is a pure data/logic class with no events and no UI.  Moves are applied
    by replaying the effects of a :class:`MoveOutcome`.
    """

    board: Board = field(default_factory=Board, init=False)
    player_turn: Color = field(default=Color.WHITE, init=False)
    last_piece_moved: Piece | None = field(default=None, init=False)
    winner: Color | None = field(default=None, init=False)
    selected: Square | None = field(default=None, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    icon_set: IconSet | None = field(default=None, init=False)
    ply_count: int = field(default=0, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        board: Board | None = None,
        icon_set: IconSet | None = None,
        seed: int | None = None,
    ) -> None:
        """Initialise (or reset) the game, randomly populating the board
        unless *board* is given."""
        self.icon_set = icon_set
        self.board = board if board is not None else random_board(icon_set, seed)
        self.player_turn = Color.WHITE
        self.last_piece_moved = None
        self.winner = None
        self.selected = None
        self.phase = GamePhase.IDLE
        self.ply_count = 0

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, square: Square) -> None:
        self.selected = check_square(square)
        self.phase = GamePhase.SELECTED

    def clear_selection(self) -> None:
        self.selected = None
        if self.phase == GamePhase.SELECTED:
            self.phase = GamePhase.IDLE

    # ── Moves ────────────────────────────────────────────────────────────

    def resolve(self, from_sq: Square, to_sq: Square) -> MoveOutcome | None:
        """Work out the move *from_sq* → *to_sq* without applying it."""
        return resolve_move(
            self.board.view(),
            from_sq,
            to_sq,
            last_piece_moved=self.last_piece_moved,
            icon_set=self.icon_set,
        )

    def commit(self, outcome: MoveOutcome) -> None:
        """Apply a resolved move.

        Caller is responsible for resolving against the current board.
        """
        if self.is_game_over:
            raise RuntimeError("Game is over; no further moves are accepted")
        if self.board.is_empty(outcome.from_sq):
            raise ValueError(f"No piece on {square_name(outcome.from_sq)}")

        for effect in outcome.effects:
            self._apply(effect)
        self.ply_count += 1
        _LOGGER.debug(
            "Ply %d: %s %s -> %s",
            self.ply_count,
            outcome.kind.name.lower(),
            square_name(outcome.from_sq),
            square_name(outcome.to_sq),
        )

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    # ── Internal ─────────────────────────────────────────────────────────

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, CapturePiece):
            self.board.remove(effect.square)
        elif isinstance(effect, MovePiece):
            self.board.move(effect.from_sq, effect.to_sq)
        elif isinstance(effect, ClearFirstMove):
            effect.piece.first_move = False
        elif isinstance(effect, MarkDoubleStep):
            effect.piece.just_made_double_step = True
        elif isinstance(effect, MarkMoved):
            effect.piece.moved = True
        elif isinstance(effect, PromotePawn):
            self.board[effect.square] = effect.queen
            _LOGGER.debug("Pawn promoted on %s", square_name(effect.square))
        elif isinstance(effect, ClearDoubleStep):
            effect.piece.just_made_double_step = False
        elif isinstance(effect, RecordLastMoved):
            self.last_piece_moved = effect.piece
        elif isinstance(effect, SwitchTurn):
            self.player_turn = effect.to_color
        elif isinstance(effect, EndGame):
            self.winner = effect.winner
            self.selected = None
            self.phase = GamePhase.GAME_OVER
        else:
            raise TypeError(f"Unknown effect: {effect!r}")
