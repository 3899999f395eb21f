from dataclasses import dataclass
from typing import Union

from gamecore.components.side import Mark, Side


@dataclass(slots=True)
class MinimaxAgent:
    """Computer opponent searching ``depth`` plies after ``decision_delay`` seconds."""

    side: Union[Side, Mark]
    depth: int
    decision_delay: float = 0.0
