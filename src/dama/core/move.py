"""Move value object and the two outcomes of a move attempt."""

from __future__ import annotations

from dataclasses import dataclass

from dama.core.board import Board
from dama.core.enums import Color, MoveKind, RejectionReason
from dama.core.types import Coord


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single validated move."""

    from_sq: Coord
    to_sq: Coord
    kind: MoveKind = MoveKind.SIMPLE
    captured: Coord | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.kind == MoveKind.JUMP else "-"
        return f"{self.from_sq}{sep}{self.to_sq}"

    @property
    def is_jump(self) -> bool:
        return self.kind == MoveKind.JUMP


@dataclass(frozen=True, slots=True)
class Accepted:
    """A move was executed: the resulting board and the side now to move."""

    board: Board
    turn: Color
    move: Move
    promoted: bool = False

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Rejected:
    """A move was refused; nothing changed."""

    reason: RejectionReason

    def __bool__(self) -> bool:
        return False
