from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gamecore.components.side import Side


class PieceKind(Enum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


_SYMBOLS = {
    Side.WHITE: {
        PieceKind.KING: "♔",
        PieceKind.QUEEN: "♕",
        PieceKind.ROOK: "♖",
        PieceKind.BISHOP: "♗",
        PieceKind.KNIGHT: "♘",
        PieceKind.PAWN: "♙",
    },
    Side.BLACK: {
        PieceKind.KING: "♚",
        PieceKind.QUEEN: "♛",
        PieceKind.ROOK: "♜",
        PieceKind.BISHOP: "♝",
        PieceKind.KNIGHT: "♞",
        PieceKind.PAWN: "♟",
    },
}


@dataclass(frozen=True, slots=True)
class Piece:
    """An occupied chess square: what stands there and whose it is."""
    kind: PieceKind
    side: Side

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self.side][self.kind]
