"""Game state resource describing which game runs and where it stands."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from gamecore.components.side import Mark, Side


class GameKind(Enum):
    CHESS = auto()
    TIC_TAC_TOE = auto()
    SUDOKU = auto()


class PlayMode(Enum):
    """Who sits on the other side of the board."""
    LOCAL = auto()
    COMPUTER = auto()


class GameStatus(Enum):
    """Terminal-state signal published to collaborators."""
    IN_PROGRESS = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()
    DRAW = auto()
    WIN = auto()
    SOLVED = auto()

    @property
    def is_terminal(self) -> bool:
        return self not in (GameStatus.IN_PROGRESS, GameStatus.CHECK)


@dataclass
class GameState:
    """Singleton component for the game hosted by a world."""
    kind: GameKind
    mode: PlayMode = PlayMode.COMPUTER
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Union[Side, Mark]] = None
