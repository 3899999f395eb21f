from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple


@dataclass(slots=True)
class MoveHistory:
    """Append-only record of applied moves, kept for display and replay."""

    _entries: List[Any] = field(default_factory=list)

    def record(self, move: Any) -> None:
        self._entries.append(move)

    @property
    def moves(self) -> Tuple[Any, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
