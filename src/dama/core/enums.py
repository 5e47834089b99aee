"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row step of a man of this color (White moves towards row 0)."""
        return -1 if self == Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class Cell(IntEnum):
    """Content of a single board square."""

    EMPTY = 0
    WHITE_MAN = 1
    BLACK_MAN = 2
    WHITE_KING = 3
    BLACK_KING = 4

    @property
    def is_empty(self) -> bool:
        return self == Cell.EMPTY

    @property
    def is_king(self) -> bool:
        return self in (Cell.WHITE_KING, Cell.BLACK_KING)

    @property
    def color(self) -> Color | None:
        """Owning side, ``None`` for an empty square."""
        if self in (Cell.WHITE_MAN, Cell.WHITE_KING):
            return Color.WHITE
        if self in (Cell.BLACK_MAN, Cell.BLACK_KING):
            return Color.BLACK
        return None

    def promoted(self) -> Cell:
        """King of the same color; kings and empty squares map to themselves."""
        if self == Cell.WHITE_MAN:
            return Cell.WHITE_KING
        if self == Cell.BLACK_MAN:
            return Cell.BLACK_KING
        return self

    @classmethod
    def man(cls, color: Color) -> Cell:
        return cls.WHITE_MAN if color == Color.WHITE else cls.BLACK_MAN

    @classmethod
    def king(cls, color: Color) -> Cell:
        return cls.WHITE_KING if color == Color.WHITE else cls.BLACK_KING


class MoveKind(IntEnum):
    """Move classification."""

    SIMPLE = 0
    JUMP = 1


class RejectionReason(IntEnum):
    """Why a proposed move was refused."""

    NOT_YOUR_PIECE = 1
    WRONG_COLOR_SQUARE = 2
    DESTINATION_OCCUPIED = 3
    ILLEGAL_GEOMETRY = 4
    INVALID_CAPTURE_TARGET = 5

    def __str__(self) -> str:
        return self.name.lower()
