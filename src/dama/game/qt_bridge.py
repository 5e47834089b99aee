"""Qt bridge exposing a :class:`GameController` through signals and slots."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from dama.core.enums import RejectionReason
from dama.core.move import Move
from dama.core.types import Coord, OutOfBoundsError
from dama.game.controller import GameController
from dama.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class GameBridge(QObject):
    """Main-thread adapter between a Qt front end and the rules engine.

    The front end only forwards square presses; everything it needs to redraw
    arrives through the signals below.
    """

    state_changed = pyqtSignal(object)  # GameState
    selection_changed = pyqtSignal(object)  # Coord | None
    move_made = pyqtSignal(object)  # Move
    move_rejected = pyqtSignal(int, int, int, int, str)
    input_error = pyqtSignal(str)

    def __init__(
        self,
        controller: GameController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller if controller is not None else GameController()
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_rejected.append(self._on_rejected)
        events.on_selection_changed.append(self.selection_changed.emit)
        events.on_reset.append(self.state_changed.emit)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()

    @pyqtSlot(str)
    def load_layout(self, layout: str) -> None:
        """Start a game from ``<layout> <side>`` text."""
        try:
            self._controller.new_game(layout)
        except ValueError as exc:
            _LOGGER.warning("Rejected layout %r: %s", layout, exc)
            self.input_error.emit(str(exc))

    @pyqtSlot(int, int)
    def press(self, row: int, col: int) -> None:
        """Forward a square press to the controller."""
        try:
            self._controller.press(Coord(row, col))
        except OutOfBoundsError as exc:
            _LOGGER.warning("Ignoring press outside the board: %s", exc)
            self.input_error.emit(str(exc))

    def highlighted_squares(self) -> list[Coord]:
        """Destinations reachable by the currently selected piece."""
        return [move.to_sq for move in self._controller.selected_moves()]

    def _on_move(self, move: Move, state: GameState) -> None:
        self.move_made.emit(move)
        self.state_changed.emit(state)

    def _on_rejected(
        self, from_sq: Coord, to_sq: Coord, reason: RejectionReason
    ) -> None:
        self.move_rejected.emit(
            from_sq.row, from_sq.col, to_sq.row, to_sq.col, str(reason)
        )
