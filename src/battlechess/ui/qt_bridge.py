"""Qt bridge relaying controller events to the display as signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from battlechess.core.enums import Color
from battlechess.core.piece import Piece
from battlechess.game.controller import GameController
from battlechess.game.interfaces import ClickResult


class GameSignals(QObject):
    """Signal hub between a :class:`GameController` and Qt widgets.

    Signals:
        piece_highlighted(int): A square was selected.
        highlight_cleared(): The selection was dropped.
        piece_moved(int, int): A piece moved from one square to another.
        piece_captured(object): A :class:`Piece` left play.
        game_over(object, str): Winner color and winner name.
        turn_changed(object): Color of the side now to move.
    """

    piece_highlighted = pyqtSignal(int)
    highlight_cleared = pyqtSignal()
    piece_moved = pyqtSignal(int, int)
    piece_captured = pyqtSignal(object)
    game_over = pyqtSignal(object, str)
    turn_changed = pyqtSignal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._controller: GameController | None = None

    def attach(self, controller: GameController) -> None:
        """Subscribe to *controller*'s events and forward clicks to it."""
        events = controller.events
        events.on_piece_highlighted.append(self.piece_highlighted.emit)
        events.on_highlight_cleared.append(self.highlight_cleared.emit)
        events.on_piece_moved.append(self.piece_moved.emit)
        events.on_piece_captured.append(self._emit_captured)
        events.on_game_over.append(self._emit_game_over)
        events.on_turn_changed.append(self._emit_turn_changed)
        self._controller = controller

    @pyqtSlot(int)
    def space_clicked(self, square: int) -> None:
        """Feed a click from the board widget into the attached controller."""
        self.click(square)

    def click(self, square: int) -> ClickResult:
        if self._controller is None:
            raise RuntimeError("No controller attached")
        return self._controller.handle_space_clicked(square)

    def _emit_captured(self, piece: Piece) -> None:
        self.piece_captured.emit(piece)

    def _emit_game_over(self, winner: Color, name: str) -> None:
        self.game_over.emit(winner, name)

    def _emit_turn_changed(self, color: Color) -> None:
        self.turn_changed.emit(color)
