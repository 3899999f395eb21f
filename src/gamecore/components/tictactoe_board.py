from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from gamecore.components.move import CellMove
from gamecore.components.side import Mark
from gamecore.constants import TICTACTOE_SIZE
from gamecore.errors import OutOfBounds

CELL_COUNT = TICTACTOE_SIZE * TICTACTOE_SIZE
Cell = Optional[Mark]


@dataclass(slots=True)
class TicTacToeBoard:
    """Nine cells indexed 0..8 in row-major order, plus the mark to move."""

    cells: List[Cell] = field(default_factory=lambda: [None] * CELL_COUNT)
    side_to_move: Mark = Mark.X

    @classmethod
    def from_string(cls, layout: str, side_to_move: Mark | None = None) -> "TicTacToeBoard":
        """Build a board from nine characters of ``X``, ``O`` and ``.``.

        When ``side_to_move`` is omitted it is inferred from the mark counts.
        """
        chars = [ch for ch in layout if not ch.isspace()]
        if len(chars) != CELL_COUNT:
            raise ValueError(f"Expected {CELL_COUNT} cells, got {len(chars)}")
        cells: List[Cell] = [Mark(ch) if ch in ("X", "O") else None for ch in chars]
        if side_to_move is None:
            x_count = cells.count(Mark.X)
            o_count = cells.count(Mark.O)
            side_to_move = Mark.X if x_count <= o_count else Mark.O
        return cls(cells=cells, side_to_move=side_to_move)

    def _check(self, cell: int) -> None:
        if not 0 <= cell < CELL_COUNT:
            raise OutOfBounds(cell, CELL_COUNT)

    def get(self, cell: int) -> Cell:
        self._check(cell)
        return self.cells[cell]

    def set(self, cell: int, mark: Cell) -> None:
        self._check(cell)
        self.cells[cell] = mark

    def copy(self) -> "TicTacToeBoard":
        return TicTacToeBoard(cells=self.cells[:], side_to_move=self.side_to_move)

    def with_side_to_move(self, mark: Mark) -> "TicTacToeBoard":
        if mark is self.side_to_move:
            return self
        board = self.copy()
        board.side_to_move = mark
        return board

    def apply(self, move: CellMove) -> "TicTacToeBoard":
        """Place the side-to-move's mark and pass the turn. Does not check legality."""
        self._check(move.cell)
        board = self.copy()
        board.cells[move.cell] = self.side_to_move
        board.side_to_move = self.side_to_move.opponent
        return board

    def empty_cells(self) -> List[int]:
        return [index for index, mark in enumerate(self.cells) if mark is None]

    def is_full(self) -> bool:
        return all(mark is not None for mark in self.cells)

    def render(self) -> str:
        rows = []
        for start in range(0, CELL_COUNT, TICTACTOE_SIZE):
            rows.append("".join(mark.value if mark else "." for mark in self.cells[start:start + TICTACTOE_SIZE]))
        return "\n".join(rows)
