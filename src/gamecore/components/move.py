from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class ChessMove:
    """Relocate the piece on ``source`` to ``target`` (both ``(row, col)``)."""
    source: Position
    target: Position


@dataclass(frozen=True, slots=True)
class CellMove:
    """Place the side-to-move's mark on a tic-tac-toe cell (0..8, row-major)."""
    cell: int


@dataclass(frozen=True, slots=True)
class CellEdit:
    """Write ``digit`` into a Sudoku cell; 0 clears it."""
    row: int
    col: int
    digit: int
