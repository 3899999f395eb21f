from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from gamecore.constants import SUDOKU_SIZE
from gamecore.errors import IllegalMove, OutOfBounds

Digits = List[List[int]]


def empty_digits() -> Digits:
    return [[0] * SUDOKU_SIZE for _ in range(SUDOKU_SIZE)]


def _empty_mask() -> List[List[bool]]:
    return [[False] * SUDOKU_SIZE for _ in range(SUDOKU_SIZE)]


@dataclass(slots=True)
class SudokuGrid:
    """9x9 digits (0 = empty) and the mask of clue cells fixed at generation."""

    cells: Digits = field(default_factory=empty_digits)
    fixed: List[List[bool]] = field(default_factory=_empty_mask)

    @classmethod
    def from_puzzle(cls, puzzle: Sequence[Sequence[int]]) -> "SudokuGrid":
        """Wrap a puzzle grid, marking every non-zero cell as a fixed clue."""
        cells = [list(row) for row in puzzle]
        if len(cells) != SUDOKU_SIZE or any(len(row) != SUDOKU_SIZE for row in cells):
            raise ValueError(f"Sudoku grids are {SUDOKU_SIZE}x{SUDOKU_SIZE}")
        fixed = [[digit != 0 for digit in row] for row in cells]
        return cls(cells=cells, fixed=fixed)

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < SUDOKU_SIZE and 0 <= col < SUDOKU_SIZE

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBounds((row, col), (SUDOKU_SIZE, SUDOKU_SIZE))

    def get(self, row: int, col: int) -> int:
        self._check(row, col)
        return self.cells[row][col]

    def is_fixed(self, row: int, col: int) -> bool:
        self._check(row, col)
        return self.fixed[row][col]

    def set(self, row: int, col: int, digit: int) -> None:
        self._check(row, col)
        if self.fixed[row][col]:
            raise IllegalMove(f"cell ({row}, {col}) is a fixed clue")
        if not 0 <= digit <= SUDOKU_SIZE:
            raise IllegalMove(f"digit {digit} is outside 0..{SUDOKU_SIZE}")
        self.cells[row][col] = digit

    def copy(self) -> "SudokuGrid":
        return SudokuGrid(
            cells=[row[:] for row in self.cells],
            fixed=[row[:] for row in self.fixed],
        )

    def filled_count(self) -> int:
        return sum(1 for row in self.cells for digit in row if digit != 0)

    def fixed_positions(self) -> List[Tuple[int, int]]:
        return [
            (row, col)
            for row in range(SUDOKU_SIZE)
            for col in range(SUDOKU_SIZE)
            if self.fixed[row][col]
        ]
