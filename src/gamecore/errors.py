"""Typed failures raised by the game rules and search engine."""
from __future__ import annotations

from typing import Any


class OutOfBounds(IndexError):
    """A position reference outside the grid."""

    def __init__(self, position: Any, size: Any) -> None:
        super().__init__(f"Position {position!r} is outside a grid of size {size!r}")
        self.position = position
        self.size = size


class IllegalMove(ValueError):
    """A structurally valid move or edit that breaks the game rules."""

    def __init__(self, reason: str, move: Any = None) -> None:
        super().__init__(reason if move is None else f"Illegal move {move!r}: {reason}")
        self.reason = reason
        self.move = move


class NoLegalMoves(RuntimeError):
    """Search was invoked on a position where the side to move cannot move."""


class GenerationFailed(RuntimeError):
    """The Sudoku solver could not complete a seeded grid."""
