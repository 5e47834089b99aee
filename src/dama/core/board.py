"""Board - immutable piece placement on an 8x8 draughts board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from dama.core.enums import Cell, Color
from dama.core.types import BOARD_SIZE, Coord, check_coord, dark_squares

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

_REPR_CHARS: dict[Cell, str] = {
    Cell.EMPTY: ".",
    Cell.WHITE_MAN: "w",
    Cell.BLACK_MAN: "b",
    Cell.WHITE_KING: "W",
    Cell.BLACK_KING: "B",
}


def _index(coord: Coord) -> int:
    check_coord(coord)
    return coord.row * BOARD_SIZE + coord.col


class Board:
    """Immutable 64-square grid of :class:`Cell` values.

    Every change goes through :meth:`with_cells`, which returns a new board,
    so any board handed out stays a valid snapshot.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: tuple[Cell, ...] | None = None) -> None:
        if cells is None:
            cells = (Cell.EMPTY,) * _SQUARE_COUNT
        if len(cells) != _SQUARE_COUNT:
            raise ValueError(f"Board needs {_SQUARE_COUNT} cells, got {len(cells)}")
        self._cells: tuple[Cell, ...] = tuple(cells)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coord) -> Cell:
        return self._cells[_index(coord)]

    def is_empty(self, coord: Coord) -> bool:
        return self[coord] == Cell.EMPTY

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Coord]:
        """Squares occupied by *color*'s men and kings."""
        return [sq for sq in dark_squares() if self[sq].color == color]

    def count(self, color: Color) -> int:
        return len(self.pieces(color))

    def rows(self) -> Iterator[tuple[Cell, ...]]:
        """Yield the grid one row at a time, row 0 first."""
        for r in range(BOARD_SIZE):
            yield self._cells[r * BOARD_SIZE : (r + 1) * BOARD_SIZE]

    # -- Copy-on-write ------------------------------------------------------

    def with_cells(self, changes: Mapping[Coord, Cell]) -> Board:
        """Return a new board with *changes* applied; ``self`` is untouched."""
        cells = list(self._cells)
        for coord, cell in changes.items():
            cells[_index(coord)] = cell
        return Board(tuple(cells))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: Black on rows 0-2, White on rows 5-7."""
        changes: dict[Coord, Cell] = {}
        for sq in dark_squares():
            if sq.row < 3:
                changes[sq] = Cell.BLACK_MAN
            elif sq.row > 4:
                changes[sq] = Cell.WHITE_MAN
        return cls().with_cells(changes)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        lines = [
            f"{BOARD_SIZE - r} {' '.join(_REPR_CHARS[c] for c in row)}"
            for r, row in enumerate(self.rows())
        ]
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
