"""Plain-text board layout parsing and serialization.

A layout lists the eight rows from row 0 to row 7 separated by ``/``::

    .b.b.b.b/b.b.b.b./.b.b.b.b/......../......../w.w.w.w./.w.w.w.w/w.w.w.w.

``.`` is an empty square, ``w``/``b`` are men and ``W``/``B`` are kings.
A state appends the side to move: ``<layout> w``.
"""

from __future__ import annotations

from dama.core.board import Board
from dama.core.enums import Cell, Color
from dama.core.types import BOARD_SIZE, Coord, is_dark

_CHAR_MAP: dict[str, Cell] = {
    ".": Cell.EMPTY,
    "w": Cell.WHITE_MAN,
    "b": Cell.BLACK_MAN,
    "W": Cell.WHITE_KING,
    "B": Cell.BLACK_KING,
}
_CELL_CHARS: dict[Cell, str] = {v: k for k, v in _CHAR_MAP.items()}
_SIDE_CHARS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def board_to_text(board: Board) -> str:
    return "/".join("".join(_CELL_CHARS[c] for c in row) for row in board.rows())


def board_from_text(text: str) -> Board:
    """Parse a layout string into a :class:`Board`."""
    rows = text.strip().split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid layout (must contain {BOARD_SIZE} rows): {text!r}")

    changes: dict[Coord, Cell] = {}
    for r, row_text in enumerate(rows):
        if len(row_text) != BOARD_SIZE:
            raise ValueError(f"Invalid layout row width: {row_text!r}")
        for c, ch in enumerate(row_text):
            try:
                cell = _CHAR_MAP[ch]
            except KeyError:
                raise ValueError(f"Invalid layout character: {ch!r}") from None
            if cell == Cell.EMPTY:
                continue
            coord = Coord(r, c)
            if not is_dark(coord):
                raise ValueError(f"Piece on a light square at {coord}: {text!r}")
            changes[coord] = cell
    return Board().with_cells(changes)


def state_to_text(board: Board, turn: Color) -> str:
    return f"{board_to_text(board)} {'w' if turn == Color.WHITE else 'b'}"


def state_from_text(text: str) -> tuple[Board, Color]:
    """Parse ``<layout> <side>`` into a board and the side to move."""
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"Invalid state (need layout and side fields): {text!r}")
    layout, side = parts
    try:
        turn = _SIDE_CHARS[side]
    except KeyError:
        raise ValueError(f"Invalid side-to-move field: {side!r}") from None
    return board_from_text(layout), turn


STARTING_LAYOUT = board_to_text(Board.initial())
