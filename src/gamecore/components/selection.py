from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(slots=True)
class Selection:
    """Currently highlighted cell awaiting a follow-up click, if any."""

    position: Optional[Tuple[int, int]] = None
