"""Move rules: ownership, validation, execution and promotion."""

from __future__ import annotations

from dama.core.board import Board
from dama.core.enums import Cell, Color, MoveKind, RejectionReason
from dama.core.move import Accepted, Move, Rejected
from dama.core.types import BOARD_SIZE, Coord, check_coord, is_dark, is_on_board

_STEPS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class Rules:
    """Static rule-checker that operates on a :class:`Board` and a turn.

    Rule set: one-step diagonal moves (men forward only, kings any way) and
    single jumps over an adjacent enemy onto the empty square beyond.
    Men may jump backwards. Capturing is never mandatory and a turn never
    chains more than one jump.
    """

    @staticmethod
    def is_owned_by(cell: Cell, turn: Color) -> bool:
        return cell.color is not None and cell.color == turn

    @staticmethod
    def promotion_row(color: Color) -> int:
        return 0 if color == Color.WHITE else BOARD_SIZE - 1

    # ── Validation ───────────────────────────────────────────────────────

    @staticmethod
    def validate_move(
        board: Board, turn: Color, from_sq: Coord, to_sq: Coord
    ) -> Move | Rejected:
        """Classify ``from_sq -> to_sq`` as a legal move or a rejection.

        Raises :class:`~dama.core.types.OutOfBoundsError` for coordinates
        off the grid.
        """
        check_coord(from_sq)
        check_coord(to_sq)

        piece = board[from_sq]
        if not Rules.is_owned_by(piece, turn):
            return Rejected(RejectionReason.NOT_YOUR_PIECE)
        if not is_dark(to_sq):
            return Rejected(RejectionReason.WRONG_COLOR_SQUARE)
        if not board.is_empty(to_sq):
            return Rejected(RejectionReason.DESTINATION_OCCUPIED)

        row_delta = to_sq.row - from_sq.row
        col_delta = abs(to_sq.col - from_sq.col)

        if col_delta == 1 and abs(row_delta) == 1:
            if piece.is_king or row_delta == turn.forward:
                return Move(from_sq, to_sq)
            return Rejected(RejectionReason.ILLEGAL_GEOMETRY)

        if col_delta == 2 and abs(row_delta) == 2:
            mid = Coord(
                (from_sq.row + to_sq.row) // 2, (from_sq.col + to_sq.col) // 2
            )
            if not Rules.is_owned_by(board[mid], turn.opposite):
                return Rejected(RejectionReason.INVALID_CAPTURE_TARGET)
            return Move(from_sq, to_sq, MoveKind.JUMP, captured=mid)

        return Rejected(RejectionReason.ILLEGAL_GEOMETRY)

    # ── Execution ────────────────────────────────────────────────────────

    @staticmethod
    def execute_move(board: Board, move: Move) -> Board:
        """Apply an already validated *move* and return the new board."""
        piece = board[move.from_sq]
        color = piece.color
        if color is not None and move.to_sq.row == Rules.promotion_row(color):
            piece = piece.promoted()

        changes = {move.from_sq: Cell.EMPTY}
        if move.captured is not None:
            changes[move.captured] = Cell.EMPTY
        changes[move.to_sq] = piece
        return board.with_cells(changes)

    @staticmethod
    def try_move(
        board: Board, turn: Color, from_sq: Coord, to_sq: Coord
    ) -> Accepted | Rejected:
        """Validate and execute in one step; the turn flips only on success."""
        result = Rules.validate_move(board, turn, from_sq, to_sq)
        if isinstance(result, Rejected):
            return result
        new_board = Rules.execute_move(board, result)
        promoted = new_board[result.to_sq] != board[result.from_sq]
        return Accepted(new_board, turn.opposite, result, promoted)

    # ── Generation ───────────────────────────────────────────────────────

    @staticmethod
    def legal_moves(board: Board, turn: Color, from_sq: Coord) -> list[Move]:
        """Every move the validator accepts for the piece on *from_sq*."""
        check_coord(from_sq)
        if not Rules.is_owned_by(board[from_sq], turn):
            return []

        moves: list[Move] = []
        for distance in (1, 2):
            for dr, dc in _STEPS:
                row = from_sq.row + dr * distance
                col = from_sq.col + dc * distance
                if not is_on_board(row, col):
                    continue
                result = Rules.validate_move(board, turn, from_sq, Coord(row, col))
                if isinstance(result, Move):
                    moves.append(result)
        return moves

    @staticmethod
    def has_any_move(board: Board, turn: Color) -> bool:
        return any(Rules.legal_moves(board, turn, sq) for sq in board.pieces(turn))
