from __future__ import annotations

from typing import List, Optional, Tuple

from gamecore.components.game_state import GameStatus
from gamecore.components.move import CellMove
from gamecore.components.side import Mark
from gamecore.components.tictactoe_board import CELL_COUNT, TicTacToeBoard
from gamecore.rules.verdict import LEGAL, Verdict, illegal

WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def winning_line(board: TicTacToeBoard) -> Optional[Tuple[int, int, int]]:
    cells = board.cells
    for a, b, c in WIN_LINES:
        if cells[a] is not None and cells[a] is cells[b] is cells[c]:
            return (a, b, c)
    return None


def winner(board: TicTacToeBoard) -> Optional[Mark]:
    line = winning_line(board)
    if line is None:
        return None
    return board.cells[line[0]]


def legal_moves(board: TicTacToeBoard, side: Mark | None = None) -> List[CellMove]:
    """Every empty cell, or nothing once the game is decided."""
    if winner(board) is not None:
        return []
    return [CellMove(cell) for cell in board.empty_cells()]


def validate_move(board: TicTacToeBoard, move: CellMove) -> Verdict:
    if not 0 <= move.cell < CELL_COUNT:
        return illegal("position out of bounds")
    if winner(board) is not None:
        return illegal("the game is already decided")
    if board.cells[move.cell] is not None:
        return illegal("cell is already occupied")
    return LEGAL


def game_status(board: TicTacToeBoard) -> Tuple[GameStatus, Optional[Mark]]:
    mark = winner(board)
    if mark is not None:
        return GameStatus.WIN, mark
    if board.is_full():
        return GameStatus.DRAW, None
    return GameStatus.IN_PROGRESS, None
