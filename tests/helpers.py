from __future__ import annotations

from typing import Dict, List, Tuple

from gamecore.components.chess_board import ChessBoard
from gamecore.components.piece import Piece, PieceKind
from gamecore.components.side import Side
from gamecore.events.bus import EVENT_TICK

_LETTERS = {
    "p": PieceKind.PAWN,
    "n": PieceKind.KNIGHT,
    "b": PieceKind.BISHOP,
    "r": PieceKind.ROOK,
    "q": PieceKind.QUEEN,
    "k": PieceKind.KING,
}


def board_from(placements: Dict[Tuple[int, int], str], side_to_move: Side = Side.WHITE) -> ChessBoard:
    """Build a position from ``{(row, col): letter}``; upper case is White."""

    board = ChessBoard(side_to_move=side_to_move)
    for pos, letter in placements.items():
        side = Side.WHITE if letter.isupper() else Side.BLACK
        board.set(pos, Piece(_LETTERS[letter.lower()], side))
    return board


def drive_ticks(bus, count=10, dt=0.1):
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def solved_sudoku() -> List[List[int]]:
    """A fixed valid solution built from the shifted-row pattern."""

    return [[(row * 3 + row // 3 + col) % 9 + 1 for col in range(9)] for row in range(9)]
