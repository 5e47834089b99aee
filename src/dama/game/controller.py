"""GameController — holds the current game state for a front end.

Threads the pure state functions from :mod:`dama.game.state`, keeps the one
current ``(state, selection)`` pair and notifies listeners via simple
callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from dama.core.enums import RejectionReason
from dama.core.move import Move, Rejected
from dama.core.notation import state_from_text, state_to_text
from dama.core.rules import Rules
from dama.core.types import Coord
from dama.game.state import (
    GameState,
    SelectionResult,
    create_initial_state,
    select_or_move,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]
RejectedCallback = Callable[[Coord, Coord, RejectionReason], None]
SelectionCallback = Callable[[Coord | None], None]
ResetCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns the single current state reference of one game session.

    The reference is swapped for a new :class:`GameState` on every accepted
    move and never mutated in place, so states handed to listeners remain
    valid snapshots. Methods are meant to be called from one thread.
    """

    __slots__ = ("_state", "_selection", "events")

    def __init__(self) -> None:
        self._state = create_initial_state()
        self._selection: Coord | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selection(self) -> Coord | None:
        return self._selection

    def selected_moves(self) -> list[Move]:
        """Legal moves of the selected piece, for destination highlighting."""
        if self._selection is None:
            return []
        return self._state.legal_moves(self._selection)

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, layout: str | None = None) -> None:
        """Start over from the initial position or a ``<layout> <side>`` text."""
        if layout is None:
            self._state = create_initial_state()
        else:
            board, turn = state_from_text(layout)
            self._state = GameState(board, turn)
        _LOGGER.debug(
            "New game: %s", state_to_text(self._state.board, self._state.turn)
        )
        self._set_selection(None)
        for cb in self.events.on_reset:
            cb(self._state)

    def press(self, coord: Coord) -> bool:
        """Feed one square press through the selection protocol.

        Returns True if the press executed a move.
        """
        selection = self._selection
        result = select_or_move(self._state, selection, coord)
        self._adopt(result, selection, coord)
        return result.move is not None

    def submit_move(self, from_sq: Coord, to_sq: Coord) -> bool:
        """Attempt ``from_sq -> to_sq`` directly. Returns True if applied."""
        result = Rules.try_move(self._state.board, self._state.turn, from_sq, to_sq)
        if isinstance(result, Rejected):
            self._emit_rejected(from_sq, to_sq, result.reason)
            return False
        self._state = GameState(result.board, result.turn)
        self._set_selection(None)
        self._emit_move(result.move)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _adopt(
        self, result: SelectionResult, selection: Coord | None, pressed: Coord
    ) -> None:
        self._state = result.state
        if result.rejection is not None and selection is not None:
            self._emit_rejected(selection, pressed, result.rejection.reason)
        self._set_selection(result.selection)
        if result.move is not None:
            self._emit_move(result.move)

    def _set_selection(self, selection: Coord | None) -> None:
        if selection == self._selection:
            return
        self._selection = selection
        for cb in self.events.on_selection_changed:
            cb(selection)

    def _emit_move(self, move: Move) -> None:
        _LOGGER.debug("Move %s accepted, %s to move", move, self._state.turn)
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_rejected(
        self, from_sq: Coord, to_sq: Coord, reason: RejectionReason
    ) -> None:
        _LOGGER.debug("Move %s-%s rejected: %s", from_sq, to_sq, reason)
        for cb in self.events.on_rejected:
            cb(from_sq, to_sq, reason)
