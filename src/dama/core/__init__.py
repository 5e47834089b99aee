"""Core domain layer — pure draughts rules with zero external dependencies.

Quick start::

    from dama.core import Board, Color, Coord, Rules

    result = Rules.try_move(Board.initial(), Color.WHITE, Coord(5, 2), Coord(4, 3))
    if result:
        print(result.board)
"""

from dama.core.board import Board
from dama.core.enums import Cell, Color, MoveKind, RejectionReason
from dama.core.move import Accepted, Move, Rejected
from dama.core.notation import (
    STARTING_LAYOUT,
    board_from_text,
    board_to_text,
    state_from_text,
    state_to_text,
)
from dama.core.rules import Rules
from dama.core.types import (
    BOARD_SIZE,
    Coord,
    OutOfBoundsError,
    check_coord,
    dark_squares,
    is_dark,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Cell",
    "Color",
    "MoveKind",
    "RejectionReason",
    # Types / helpers
    "BOARD_SIZE",
    "Coord",
    "OutOfBoundsError",
    "check_coord",
    "dark_squares",
    "is_dark",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Accepted",
    "Board",
    "Move",
    "Rejected",
    "Rules",
    # Notation
    "STARTING_LAYOUT",
    "board_from_text",
    "board_to_text",
    "state_from_text",
    "state_to_text",
]
