"""GameController — the click-driven orchestrator of a battle chess game.

Coordinates: Players, GameState, move resolution.
Emits events via simple callbacks so the display layer / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from battlechess.core.board import Board
from battlechess.core.enums import Color
from battlechess.core.movement import legal_targets
from battlechess.core.piece import Piece
from battlechess.core.resolver import IconSet, MoveOutcome
from battlechess.core.types import Square, check_square, square_name
from battlechess.game.interfaces import ClickResult, GamePhase, IGameController, IPlayer
from battlechess.game.player import HumanPlayer
from battlechess.game.settings import GameSettings
from battlechess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SquareCallback = Callable[[Square], None]
ClearedCallback = Callable[[], None]
PieceMovedCallback = Callable[[Square, Square], None]  # from, to
CapturedCallback = Callable[[Piece], None]
GameOverCallback = Callable[[Color, str], None]  # winner, winner name
TurnCallback = Callable[[Color], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_piece_highlighted: list[SquareCallback] = field(default_factory=list)
    on_highlight_cleared: list[ClearedCallback] = field(default_factory=list)
    on_piece_moved: list[PieceMovedCallback] = field(default_factory=list)
    on_piece_captured: list[CapturedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Turns square clicks into selections and moves, notifies listeners.

    Thread-safety: every method is meant to be called from a single thread
    (the display's event loop); a click is handled to completion before
    the next one is accepted.
    """

    __slots__ = ("_state", "_players", "_settings", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.player_turn)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer | None = None,
        black: IPlayer | None = None,
        icon_set: IconSet | None = None,
        board: Board | None = None,
        settings: GameSettings | None = None,
    ) -> None:
        if settings is not None:
            self._settings = settings
        s = self._settings
        self._players = {
            Color.WHITE: white or HumanPlayer(Color.WHITE, s.white_name),
            Color.BLACK: black or HumanPlayer(Color.BLACK, s.black_name),
        }
        self._state = GameState()
        self._state.setup(board, icon_set, s.seed)
        board_now = self._state.board
        _LOGGER.info(
            "New game: %d white and %d black pieces, %s",
            len(board_now.pieces(Color.WHITE)),
            len(board_now.pieces(Color.BLACK)),
            "fixed layout" if board is not None else f"random layout (seed={s.seed})",
        )
        self._emit_turn_changed(self._state.player_turn)

    def populate_board(self, icon_set: IconSet) -> None:
        """Restart on a fresh random layout drawn with *icon_set*, keeping
        the current players."""
        self.new_game(
            self._players.get(Color.WHITE),
            self._players.get(Color.BLACK),
            icon_set=icon_set,
        )

    def handle_space_clicked(self, square: Square) -> ClickResult:
        square = check_square(square)
        state = self._state
        if state.phase in (GamePhase.NOT_STARTED, GamePhase.GAME_OVER):
            return ClickResult.IGNORED

        occupant = state.board[square]
        is_ally = occupant is not None and occupant.color == state.player_turn
        selected = state.selected

        if selected is None:
            if not is_ally:
                return ClickResult.IGNORED
            self._select(square)
            return ClickResult.SELECTION_CHANGED

        if square == selected:
            self._clear_selection()
            return ClickResult.SELECTION_CHANGED

        if is_ally:
            self._clear_selection()
            self._select(square)
            return ClickResult.SELECTION_CHANGED

        outcome = state.resolve(selected, square)
        if outcome is None:
            if self._settings.keep_selection_on_illegal_target:
                return ClickResult.IGNORED
            self._clear_selection()
            return ClickResult.SELECTION_CHANGED

        return self._commit(outcome)

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_targets(self, square: Square) -> list[Square]:
        """Squares the piece on *square* may move to (empty if none)."""
        return legal_targets(check_square(square), self._state.board.view())

    # ── Internal helpers ─────────────────────────────────────────────────

    def _select(self, square: Square) -> None:
        self._state.select(square)
        _LOGGER.debug("Selected %s", square_name(square))
        for cb in self.events.on_piece_highlighted:
            cb(square)

    def _clear_selection(self) -> None:
        self._state.clear_selection()
        for cb in self.events.on_highlight_cleared:
            cb()

    def _commit(self, outcome: MoveOutcome) -> ClickResult:
        state = self._state
        state.commit(outcome)
        self._clear_selection()

        for cb in self.events.on_piece_moved:
            cb(outcome.from_sq, outcome.to_sq)
        if outcome.captured is not None:
            self._emit_captured(outcome.captured.captured_form())

        if outcome.winner is not None:
            winner = outcome.winner
            player = self.player(winner)
            name = player.name if player is not None else str(winner)
            _LOGGER.info("Game over: %s (%s) wins", name, winner)
            for game_over_cb in self.events.on_game_over:
                game_over_cb(winner, name)
            return ClickResult.GAME_ENDED

        self._emit_turn_changed(state.player_turn)
        return ClickResult.MOVE_COMMITTED

    def _emit_captured(self, piece: Piece) -> None:
        for cb in self.events.on_piece_captured:
            cb(piece)

    def _emit_turn_changed(self, color: Color) -> None:
        for cb in self.events.on_turn_changed:
            cb(color)
