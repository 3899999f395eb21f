from __future__ import annotations

from typing import Dict, Tuple

from gamecore.components.chess_board import ChessBoard
from gamecore.components.piece import PieceKind
from gamecore.components.side import Side
from gamecore.constants import CHESS_SIZE

# ---------------------------------------------------------------------------
# Material and positional weights
# ---------------------------------------------------------------------------
PIECE_VALUES: Dict[PieceKind, int] = {
    PieceKind.PAWN: 100,
    PieceKind.KNIGHT: 320,
    PieceKind.BISHOP: 330,
    PieceKind.ROOK: 500,
    PieceKind.QUEEN: 900,
    PieceKind.KING: 20000,
}

# Row 0 is the rank the piece is heading for (the promotion rank for pawns).
PAWN_TABLE: Tuple[Tuple[int, ...], ...] = (
    (0, 0, 0, 0, 0, 0, 0, 0),
    (50, 50, 50, 50, 50, 50, 50, 50),
    (10, 10, 20, 30, 30, 20, 10, 10),
    (5, 5, 10, 25, 25, 10, 5, 5),
    (0, 0, 0, 20, 20, 0, 0, 0),
    (5, -5, -10, 0, 0, -10, -5, 5),
    (5, 10, 10, -20, -20, 10, 10, 5),
    (0, 0, 0, 0, 0, 0, 0, 0),
)

KNIGHT_TABLE: Tuple[Tuple[int, ...], ...] = (
    (-50, -40, -30, -30, -30, -30, -40, -50),
    (-40, -20, 0, 0, 0, 0, -20, -40),
    (-30, 0, 10, 15, 15, 10, 0, -30),
    (-30, 5, 15, 20, 20, 15, 5, -30),
    (-30, 0, 15, 20, 20, 15, 0, -30),
    (-30, 5, 10, 15, 15, 10, 5, -30),
    (-40, -20, 0, 5, 5, 0, -20, -40),
    (-50, -40, -30, -30, -30, -30, -40, -50),
)

SQUARE_TABLES = {
    PieceKind.PAWN: PAWN_TABLE,
    PieceKind.KNIGHT: KNIGHT_TABLE,
}

CENTER = (CHESS_SIZE - 1) / 2
CENTRALIZATION_WEIGHT = 5
# Largest Manhattan distance from the centre is 7 (a corner).
CENTRALIZATION_REACH = 7


def table_row(side: Side, row: int) -> int:
    return row if side is Side.WHITE else CHESS_SIZE - 1 - row


def piece_square_value(kind: PieceKind, side: Side, row: int, col: int) -> float:
    value: float = PIECE_VALUES[kind]
    table = SQUARE_TABLES.get(kind)
    if table is not None:
        value += table[table_row(side, row)][col]
    if kind is not PieceKind.PAWN and kind is not PieceKind.KING:
        center_distance = abs(CENTER - row) + abs(CENTER - col)
        value += (CENTRALIZATION_REACH - center_distance) * CENTRALIZATION_WEIGHT
    return value


def evaluate(board: ChessBoard, perspective: Side) -> float:
    """Own total minus opposing total for ``perspective``."""
    score = 0.0
    for (row, col), piece in board.pieces():
        value = piece_square_value(piece.kind, piece.side, row, col)
        score += value if piece.side is perspective else -value
    return score
