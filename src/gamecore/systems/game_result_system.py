from __future__ import annotations

from typing import Any, Tuple

from esper import World

from gamecore.components.game_result import GameResult
from gamecore.components.game_state import GameKind, GameState, GameStatus, PlayMode
from gamecore.components.sudoku_session import SudokuSession
from gamecore.events.bus import (
    EventBus,
    EVENT_GAME_OVER,
    EVENT_GAME_RESULT,
    EVENT_GAME_STARTED,
)
from gamecore.utils.game_state import find_singleton


def format_elapsed(seconds: float) -> str:
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def describe_result(state: GameState, session: SudokuSession | None = None) -> Tuple[str, str]:
    """Return ``(outcome, message)`` for a finished game."""
    if state.status is GameStatus.SOLVED:
        difficulty = session.difficulty if session is not None else "sudoku"
        elapsed = format_elapsed(session.elapsed if session is not None else 0.0)
        return "win", f"Congratulations! You solved the {difficulty} puzzle in {elapsed}!"
    winner: Any = state.winner
    if winner is None:
        return "draw", "It's a draw!"
    vs_computer = state.mode is PlayMode.COMPUTER
    if state.kind is GameKind.CHESS:
        if not vs_computer:
            return "win", f"{winner.value.capitalize()} wins!"
        if winner.value == "white":
            return "win", "Incredible! You defeated the master!"
        return "lose", "Computer wins! Try again!"
    if not vs_computer:
        return "win", f"Player {winner.value} wins!"
    if winner.value == "X":
        return "win", "You won! (Incredible!)"
    return "lose", "Computer wins!"


class GameResultSystem:
    """Attaches a GameResult to the game-state entity when a game ends."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        event_bus.subscribe(EVENT_GAME_STARTED, self.on_game_started)

    def on_game_over(self, sender, **payload) -> None:
        entry = find_singleton(self.world, GameState)
        if entry is None:
            return
        entity, state = entry
        session_entry = find_singleton(self.world, SudokuSession)
        session = session_entry[1] if session_entry is not None else None
        outcome, message = describe_result(state, session)
        self.world.add_component(entity, GameResult(outcome=outcome, message=message))
        self.event_bus.emit(EVENT_GAME_RESULT, outcome=outcome, message=message)

    def on_game_started(self, sender, **payload) -> None:
        entry = find_singleton(self.world, GameState)
        if entry is None:
            return
        entity, _ = entry
        if self.world.has_component(entity, GameResult):
            self.world.remove_component(entity, GameResult)
