"""Game state values and the press-to-select/move protocol.

Everything here is a pure function of its arguments: the caller stores the
returned values and threads them into the next call.
"""

from __future__ import annotations

from dataclasses import dataclass

from dama.core.board import Board
from dama.core.enums import Color
from dama.core.move import Accepted, Move, Rejected
from dama.core.rules import Rules
from dama.core.types import Coord, check_coord


@dataclass(frozen=True, slots=True)
class GameState:
    """Board plus side to move. Replaced wholesale, never mutated."""

    board: Board
    turn: Color = Color.WHITE

    def try_move(self, from_sq: Coord, to_sq: Coord) -> GameState | Rejected:
        result = Rules.try_move(self.board, self.turn, from_sq, to_sq)
        if isinstance(result, Rejected):
            return result
        return GameState(result.board, result.turn)

    def legal_moves(self, from_sq: Coord) -> list[Move]:
        """Legal moves of the piece on *from_sq* for the side to move."""
        return Rules.legal_moves(self.board, self.turn, from_sq)


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Outcome of one press.

    ``move`` is set when the press executed a move, ``rejection`` when it
    attempted one that was refused.
    """

    state: GameState
    selection: Coord | None
    move: Move | None = None
    rejection: Rejected | None = None


def create_initial_state() -> GameState:
    return GameState(Board.initial(), Color.WHITE)


def reset_game() -> tuple[GameState, Coord | None]:
    """Fresh starting state with nothing selected."""
    return create_initial_state(), None


def select_or_move(
    state: GameState, selection: Coord | None, pressed: Coord
) -> SelectionResult:
    """Apply a press on *pressed* to ``(state, selection)``.

    - Pressing one of the mover's own pieces (re)selects it.
    - Otherwise, with a piece selected, the move ``selection -> pressed`` is
      attempted; either way the selection is cleared.
    - Otherwise nothing happens.
    """
    check_coord(pressed)

    if Rules.is_owned_by(state.board[pressed], state.turn):
        return SelectionResult(state, pressed)

    if selection is None:
        return SelectionResult(state, None)

    result = Rules.try_move(state.board, state.turn, selection, pressed)
    if isinstance(result, Accepted):
        return SelectionResult(
            GameState(result.board, result.turn), None, move=result.move
        )
    return SelectionResult(state, None, rejection=result)
