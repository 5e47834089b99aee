"""Board coordinates and geometry helpers.

Board layout (row-major, row 0 at Black's home edge)::

    row 0: a8 b8 ... h8
    ...
    row 7: a1 b1 ... h1

Only dark squares, where ``(row + col) % 2 == 1``, ever hold a piece.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class OutOfBoundsError(ValueError):
    """A coordinate lies outside the 8x8 grid."""


class Coord(NamedTuple):
    """Zero-based ``(row, col)`` square address."""

    row: int
    col: int

    def __str__(self) -> str:
        return square_name(self)


def is_on_board(row: int, col: int) -> bool:
    """Check whether ``(row, col)`` lies within the grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def check_coord(coord: Coord) -> Coord:
    """Return *coord* unchanged, or raise :class:`OutOfBoundsError`."""
    if not is_on_board(coord.row, coord.col):
        raise OutOfBoundsError(f"Coordinate off the board: {tuple(coord)!r}")
    return coord


def is_dark(coord: Coord) -> bool:
    return (coord.row + coord.col) % 2 == 1


def dark_squares() -> list[Coord]:
    """All 32 playable squares in row-major order."""
    return [
        Coord(r, c)
        for r in range(BOARD_SIZE)
        for c in range(BOARD_SIZE)
        if (r + c) % 2 == 1
    ]


def square_name(coord: Coord) -> str:
    """Human-readable name, e.g. ``Coord(7, 0)`` -> ``'a1'``."""
    return chr(ord("a") + coord.col) + str(BOARD_SIZE - coord.row)


def parse_square(name: str) -> Coord:
    """Parse square name, e.g. ``'b6'`` -> ``Coord(2, 1)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Coord(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))
