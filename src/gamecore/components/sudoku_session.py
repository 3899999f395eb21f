from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from gamecore.constants import SUDOKU_HINTS_PER_GAME


@dataclass(slots=True)
class SudokuSession:
    """Per-puzzle bookkeeping that sits next to the SudokuGrid."""

    difficulty: str
    solution: List[List[int]]
    hints_remaining: int = SUDOKU_HINTS_PER_GAME
    mistakes: int = 0
    elapsed: float = 0.0
    timer_running: bool = True
    note_mode: bool = False
    notes: Dict[Tuple[int, int], Set[int]] = field(default_factory=dict)
    complete: bool = False
    valid: bool = True
