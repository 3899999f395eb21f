from __future__ import annotations

from typing import Type, TypeVar

from esper import World

from gamecore.components.game_state import GameStatus, GameState
from gamecore.events.bus import EVENT_GAME_OVER, EVENT_STATUS_CHANGED, EventBus

T = TypeVar("T")


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState resource not found")


def find_singleton(world: World, component_type: Type[T]) -> tuple[int, T] | None:
    """Return the first ``(entity, component)`` of ``component_type``, if any."""
    for entity, component in world.get_component(component_type):
        return entity, component
    return None


def set_status(
    world: World,
    event_bus: EventBus,
    status: GameStatus,
    winner=None,
) -> None:
    """Update the game status and emit change / game-over events when it differs."""

    state = get_game_state(world)
    previous = state.status
    if previous == status and state.winner == winner:
        return
    state.status = status
    state.winner = winner
    event_bus.emit(EVENT_STATUS_CHANGED, previous=previous, status=status, winner=winner)
    if status.is_terminal and not previous.is_terminal:
        event_bus.emit(EVENT_GAME_OVER, status=status, winner=winner)
