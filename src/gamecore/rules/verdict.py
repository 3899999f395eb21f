from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Verdict:
    """Legality answer for a candidate move: ``Legal`` or ``Illegal(reason)``."""

    legal: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.legal


LEGAL = Verdict(True)


def illegal(reason: str) -> Verdict:
    return Verdict(False, reason)
