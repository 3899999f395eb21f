from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from gamecore.components.move import ChessMove, Position
from gamecore.components.piece import Piece, PieceKind
from gamecore.components.side import Side
from gamecore.constants import CHESS_SIZE
from gamecore.errors import OutOfBounds

Cell = Optional[Piece]

BACK_RANK = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


def _empty_grid() -> List[List[Cell]]:
    return [[None] * CHESS_SIZE for _ in range(CHESS_SIZE)]


def promotion_row(side: Side) -> int:
    """Row on which a pawn of ``side`` promotes."""
    return 0 if side is Side.WHITE else CHESS_SIZE - 1


@dataclass(slots=True)
class ChessBoard:
    """8x8 chess position plus the side to move.

    Row 0 is Black's back rank and row 7 is White's, so White pawns advance
    toward row 0. ``apply`` never mutates: every move yields a fresh board,
    which lets the search engine branch freely.
    """

    grid: List[List[Cell]] = field(default_factory=_empty_grid)
    side_to_move: Side = Side.WHITE

    @classmethod
    def initial(cls) -> "ChessBoard":
        board = cls()
        for col, kind in enumerate(BACK_RANK):
            board.grid[0][col] = Piece(kind, Side.BLACK)
            board.grid[1][col] = Piece(PieceKind.PAWN, Side.BLACK)
            board.grid[CHESS_SIZE - 2][col] = Piece(PieceKind.PAWN, Side.WHITE)
            board.grid[CHESS_SIZE - 1][col] = Piece(kind, Side.WHITE)
        return board

    @staticmethod
    def in_bounds(pos: Position) -> bool:
        row, col = pos
        return 0 <= row < CHESS_SIZE and 0 <= col < CHESS_SIZE

    def _check(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise OutOfBounds(pos, (CHESS_SIZE, CHESS_SIZE))

    def get(self, pos: Position) -> Cell:
        self._check(pos)
        return self.grid[pos[0]][pos[1]]

    def set(self, pos: Position, cell: Cell) -> None:
        self._check(pos)
        self.grid[pos[0]][pos[1]] = cell

    def copy(self) -> "ChessBoard":
        return ChessBoard(grid=[row[:] for row in self.grid], side_to_move=self.side_to_move)

    def with_side_to_move(self, side: Side) -> "ChessBoard":
        if side is self.side_to_move:
            return self
        board = self.copy()
        board.side_to_move = side
        return board

    def apply(self, move: ChessMove) -> "ChessBoard":
        """Return the board after relocating one piece.

        Legality is the move generator's concern; this only enforces the
        structural rules: the origin empties, whatever stood on the target is
        removed, a pawn reaching the last rank becomes a queen, and the turn
        passes to the other side.
        """
        self._check(move.source)
        self._check(move.target)
        piece = self.grid[move.source[0]][move.source[1]]
        if piece is None:
            raise ValueError(f"No piece on {move.source!r}")
        board = self.copy()
        if piece.kind is PieceKind.PAWN and move.target[0] == promotion_row(piece.side):
            piece = Piece(PieceKind.QUEEN, piece.side)
        board.grid[move.target[0]][move.target[1]] = piece
        board.grid[move.source[0]][move.source[1]] = None
        board.side_to_move = self.side_to_move.opponent
        return board

    def pieces(self, side: Side | None = None) -> Iterator[Tuple[Position, Piece]]:
        for row in range(CHESS_SIZE):
            for col in range(CHESS_SIZE):
                piece = self.grid[row][col]
                if piece is not None and (side is None or piece.side is side):
                    yield (row, col), piece

    def piece_count(self) -> int:
        return sum(1 for _ in self.pieces())

    def king_square(self, side: Side) -> Position | None:
        for pos, piece in self.pieces(side):
            if piece.kind is PieceKind.KING:
                return pos
        return None

    def render(self) -> str:
        """Plain-text diagram, rank 8 first."""
        lines = []
        for row in self.grid:
            lines.append(" ".join(piece.symbol if piece else "." for piece in row))
        return "\n".join(lines)
