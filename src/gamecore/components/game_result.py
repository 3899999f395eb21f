from dataclasses import dataclass


@dataclass(slots=True)
class GameResult:
    """Outcome shown to the player once a game ends.

    outcome: ``"win"``, ``"lose"`` or ``"draw"`` from the human's point of view.
    """
    outcome: str
    message: str
