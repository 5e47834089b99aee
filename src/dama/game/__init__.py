"""Game session layer — state values, selection protocol, controller.

Quick start::

    from dama.core import Coord
    from dama.game import GameController

    ctrl = GameController()
    ctrl.press(Coord(5, 2))  # select
    ctrl.press(Coord(4, 3))  # move
"""

from dama.game.controller import GameController, GameEvents
from dama.game.state import (
    GameState,
    SelectionResult,
    create_initial_state,
    reset_game,
    select_or_move,
)

__all__ = [
    "GameController",
    "GameEvents",
    "GameState",
    "SelectionResult",
    "create_initial_state",
    "reset_game",
    "select_or_move",
]
