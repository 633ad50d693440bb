"""Abstract interfaces and state enums for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from battlechess.core.enums import Color

if TYPE_CHECKING:
    from battlechess.core.board import Board
    from battlechess.core.resolver import IconSet
    from battlechess.core.types import Square
    from battlechess.game.settings import GameSettings


# ── Interaction FSM ─────────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for click-driven play."""

    NOT_STARTED = auto()
    IDLE = auto()  # nothing selected
    SELECTED = auto()  # a friendly piece's square is selected
    GAME_OVER = auto()


class ClickResult(IntEnum):
    """What a single click on a square did."""

    IGNORED = auto()
    SELECTION_CHANGED = auto()
    MOVE_COMMITTED = auto()
    GAME_ENDED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        white: IPlayer | None = None,
        black: IPlayer | None = None,
        icon_set: IconSet | None = None,
        board: Board | None = None,
        settings: GameSettings | None = None,
    ) -> None:
        """Set up a new game; missing players get default human players."""

    @abstractmethod
    def handle_space_clicked(self, square: Square) -> ClickResult:
        """Feed one click on *square* into the interaction state machine."""
