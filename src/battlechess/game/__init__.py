"""Game management layer — controller, players, settings, state machine.

Quick start::

    from battlechess.game import GameController, GameSettings, HumanPlayer

    ctrl = GameController(GameSettings(seed=42))
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
    )
    ctrl.handle_space_clicked(make_square(2, 1))
"""

from battlechess.game.controller import GameController, GameEvents
from battlechess.game.interfaces import (
    ClickResult,
    GamePhase,
    IGameController,
    IPlayer,
)
from battlechess.game.player import HumanPlayer
from battlechess.game.settings import GameSettings
from battlechess.game.state import GameState

__all__ = [
    # Interfaces
    "ClickResult",
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
    "GameState",
    "HumanPlayer",
]
