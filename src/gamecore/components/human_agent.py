from dataclasses import dataclass
from typing import Union

from gamecore.components.side import Mark, Side


@dataclass(slots=True)
class HumanAgent:
    """Marks the player entity whose moves arrive from the user."""

    side: Union[Side, Mark]
