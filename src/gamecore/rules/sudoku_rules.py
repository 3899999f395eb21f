"""Sudoku generation and backtracking solver.

Generation seeds the three diagonal boxes (they share no row, column or box,
so any permutations are mutually consistent), completes the grid by
backtracking, keeps that grid as the solution and then blanks random cells.
No uniqueness check is made after blanking, so hard puzzles may admit more
than one completion; the stored solution is the reference for correctness.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple, Union

from gamecore.components.sudoku_grid import Digits, SudokuGrid, empty_digits
from gamecore.constants import (
    DEFAULT_DIFFICULTY,
    GENERATION_ATTEMPTS,
    SUDOKU_BOX,
    SUDOKU_CELLS_TO_REMOVE,
    SUDOKU_SIZE,
)
from gamecore.errors import GenerationFailed

logger = logging.getLogger(__name__)

DIGITS = range(1, SUDOKU_SIZE + 1)
GridLike = Union[SudokuGrid, Sequence[Sequence[int]]]


@dataclass(slots=True)
class SolveStats:
    """Counts recursive solver calls."""
    calls: int = 0


def _digits(grid: GridLike) -> Sequence[Sequence[int]]:
    return grid.cells if isinstance(grid, SudokuGrid) else grid


def is_safe(cells: Sequence[Sequence[int]], row: int, col: int, digit: int) -> bool:
    """Whether ``digit`` may go on (row, col) without repeating in row, column or box."""
    for x in range(SUDOKU_SIZE):
        if cells[row][x] == digit or cells[x][col] == digit:
            return False
    start_row = row - row % SUDOKU_BOX
    start_col = col - col % SUDOKU_BOX
    for r in range(start_row, start_row + SUDOKU_BOX):
        for c in range(start_col, start_col + SUDOKU_BOX):
            if cells[r][c] == digit:
                return False
    return True


def candidates(cells: Sequence[Sequence[int]], row: int, col: int) -> Set[int]:
    if cells[row][col] != 0:
        return set()
    return {digit for digit in DIGITS if is_safe(cells, row, col, digit)}


def find_empty(cells: Sequence[Sequence[int]]) -> Optional[Tuple[int, int]]:
    """First empty cell in row-major order."""
    for row in range(SUDOKU_SIZE):
        for col in range(SUDOKU_SIZE):
            if cells[row][col] == 0:
                return row, col
    return None


def solve(cells: Digits, stats: SolveStats | None = None) -> bool:
    """Fill ``cells`` in place by backtracking; False when no completion exists.

    The filled cells must already be consistent. Each call fills one more cell
    or undoes its choice, so the search always terminates.
    """
    if stats is not None:
        stats.calls += 1
    empty = find_empty(cells)
    if empty is None:
        return True
    row, col = empty
    for digit in DIGITS:
        if is_safe(cells, row, col, digit):
            cells[row][col] = digit
            if solve(cells, stats):
                return True
            cells[row][col] = 0
    return False


def fill_box(cells: Digits, row: int, col: int, rng: random.Random) -> None:
    digits = list(DIGITS)
    rng.shuffle(digits)
    index = 0
    for r in range(row, row + SUDOKU_BOX):
        for c in range(col, col + SUDOKU_BOX):
            cells[r][c] = digits[index]
            index += 1


def fill_diagonal_boxes(cells: Digits, rng: random.Random) -> None:
    for start in range(0, SUDOKU_SIZE, SUDOKU_BOX):
        fill_box(cells, start, start, rng)


def cells_to_remove(difficulty: str) -> int:
    try:
        return SUDOKU_CELLS_TO_REMOVE[difficulty]
    except KeyError as exc:
        raise ValueError(f"Unknown difficulty '{difficulty}'") from exc


def remove_cells(cells: Digits, count: int, rng: random.Random) -> None:
    """Zero ``count`` distinct filled cells picked uniformly at random."""
    filled = sum(1 for row in cells for digit in row if digit != 0)
    if count > filled:
        raise ValueError(f"Cannot remove {count} cells from a grid with {filled} digits")
    removed = 0
    while removed < count:
        row = rng.randrange(SUDOKU_SIZE)
        col = rng.randrange(SUDOKU_SIZE)
        if cells[row][col] != 0:
            cells[row][col] = 0
            removed += 1


def generate_solution(rng: random.Random, stats: SolveStats | None = None) -> Digits:
    for attempt in range(1, GENERATION_ATTEMPTS + 1):
        cells = empty_digits()
        fill_diagonal_boxes(cells, rng)
        if solve(cells, stats):
            return cells
        logger.warning("Sudoku seed %d could not be completed; reseeding", attempt)
    raise GenerationFailed(f"No completed grid after {GENERATION_ATTEMPTS} seeds")


def generate(
    difficulty: str = DEFAULT_DIFFICULTY,
    rng: random.Random | None = None,
) -> Tuple[SudokuGrid, List[List[int]]]:
    """Build a ``(puzzle, solution)`` pair for ``difficulty``.

    The puzzle's fixed mask marks exactly the clues left after blanking.
    """
    rng = rng or random.Random()
    count = cells_to_remove(difficulty)
    stats = SolveStats()
    cells = generate_solution(rng, stats)
    solution = [row[:] for row in cells]
    remove_cells(cells, count, rng)
    logger.debug("Generated %s sudoku in %d solver calls", difficulty, stats.calls)
    return SudokuGrid.from_puzzle(cells), solution


def is_valid_solution(grid: GridLike) -> bool:
    """True when every row, column and box is a permutation of 1..9."""
    cells = _digits(grid)
    expected = set(DIGITS)
    for index in range(SUDOKU_SIZE):
        if set(cells[index]) != expected:
            return False
        if {cells[r][index] for r in range(SUDOKU_SIZE)} != expected:
            return False
    for box_row in range(0, SUDOKU_SIZE, SUDOKU_BOX):
        for box_col in range(0, SUDOKU_SIZE, SUDOKU_BOX):
            box = {
                cells[r][c]
                for r in range(box_row, box_row + SUDOKU_BOX)
                for c in range(box_col, box_col + SUDOKU_BOX)
            }
            if box != expected:
                return False
    return True


def is_complete_and_valid(grid: GridLike, solution: Sequence[Sequence[int]]) -> Tuple[bool, bool]:
    """``complete``: no zero cell; ``valid``: every filled cell matches the solution."""
    cells = _digits(grid)
    complete = True
    valid = True
    for row in range(SUDOKU_SIZE):
        for col in range(SUDOKU_SIZE):
            digit = cells[row][col]
            if digit == 0:
                complete = False
            elif digit != solution[row][col]:
                valid = False
    return complete, valid
