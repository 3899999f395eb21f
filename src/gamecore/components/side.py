from __future__ import annotations

from enum import Enum


class Side(Enum):
    """Chess colours. White moves first."""
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE


class Mark(Enum):
    """Tic-tac-toe marks. X moves first."""
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X
