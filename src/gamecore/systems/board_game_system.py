from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, Type

from esper import World

from gamecore.components.game_state import GameStatus
from gamecore.components.minimax_agent import MinimaxAgent
from gamecore.components.move_history import MoveHistory
from gamecore.events.bus import (
    EventBus,
    EVENT_GAME_STARTED,
    EVENT_MOVE_APPLIED,
    EVENT_MOVE_REJECTED,
    EVENT_MOVE_REQUEST,
    EVENT_NEW_GAME_REQUEST,
    EVENT_TURN_ADVANCED,
)
from gamecore.rules.verdict import Verdict
from gamecore.utils.game_state import find_singleton, get_game_state, set_status

logger = logging.getLogger(__name__)


class BoardGameSystem(ABC):
    """Turn controller shared by the two-player board games.

    Owns the only write path to the board component: a move request is
    validated, applied (replacing the board with the new value), recorded in
    the history, and followed by a status update and a turn hand-over.
    """

    board_type: Type
    move_type: Type

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)
        event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)

    # --- Game hooks -----------------------------------------------------
    @abstractmethod
    def validate(self, board: Any, move: Any) -> Verdict:
        ...

    @abstractmethod
    def evaluate_status(self, board: Any) -> Tuple[GameStatus, Any]:
        ...

    @abstractmethod
    def fresh_components(self) -> tuple:
        ...

    def captured(self, board: Any, move: Any) -> Any:
        return None

    # --- Queries --------------------------------------------------------
    def board_entry(self) -> Optional[Tuple[int, Any]]:
        return find_singleton(self.world, self.board_type)

    def current_board(self) -> Any:
        entry = self.board_entry()
        return entry[1] if entry is not None else None

    def is_computer_side(self, side: Any) -> bool:
        return any(agent.side == side for _, agent in self.world.get_component(MinimaxAgent))

    # --- Event handlers -------------------------------------------------
    def on_move_request(self, sender, **payload) -> None:
        move = payload.get("move")
        if not isinstance(move, self.move_type):
            return
        entry = self.board_entry()
        if entry is None:
            return
        entity, board = entry
        if get_game_state(self.world).status.is_terminal:
            self._reject(move, "the game is over")
            return
        from_engine = payload.get("agent") == "ai"
        if self.is_computer_side(board.side_to_move) and not from_engine:
            self._reject(move, "waiting for the computer to move")
            return
        verdict = self.validate(board, move)
        if not verdict:
            self._reject(move, verdict.reason or "illegal move")
            return
        self.apply_move(entity, board, move)

    def on_new_game_request(self, sender, **payload) -> None:
        entry = self.board_entry()
        if entry is None:
            return
        entity, _ = entry
        for component in self.fresh_components():
            self.world.add_component(entity, component)
        set_status(self.world, self.event_bus, GameStatus.IN_PROGRESS)
        board = self.current_board()
        self.event_bus.emit(EVENT_GAME_STARTED, kind=get_game_state(self.world).kind)
        self.event_bus.emit(EVENT_TURN_ADVANCED, previous_side=None, new_side=board.side_to_move)

    # --- Core flow ------------------------------------------------------
    def apply_move(self, entity: int, board: Any, move: Any) -> None:
        mover = board.side_to_move
        captured = self.captured(board, move)
        new_board = board.apply(move)
        self.world.add_component(entity, new_board)
        self.world.component_for_entity(entity, MoveHistory).record(move)
        self.after_move(entity)
        self.event_bus.emit(EVENT_MOVE_APPLIED, move=move, side=mover, captured=captured)
        status, winner = self.evaluate_status(new_board)
        set_status(self.world, self.event_bus, status, winner)
        if not status.is_terminal:
            self.event_bus.emit(EVENT_TURN_ADVANCED, previous_side=mover, new_side=new_board.side_to_move)

    def after_move(self, entity: int) -> None:
        """Hook for per-game cleanup once a move lands."""

    def _reject(self, move: Any, reason: str) -> None:
        logger.debug("Rejected %r: %s", move, reason)
        self.event_bus.emit(EVENT_MOVE_REJECTED, move=move, reason=reason)
