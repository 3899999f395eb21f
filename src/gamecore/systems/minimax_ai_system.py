from __future__ import annotations

import logging
from typing import Any, Optional

from esper import World

from gamecore.ai.engine import search_move
from gamecore.components.chess_board import ChessBoard
from gamecore.components.minimax_agent import MinimaxAgent
from gamecore.components.tictactoe_board import TicTacToeBoard
from gamecore.events.bus import (
    EventBus,
    EVENT_AI_MOVE_CHOSEN,
    EVENT_GAME_OVER,
    EVENT_MOVE_REQUEST,
    EVENT_TICK,
    EVENT_TURN_ADVANCED,
)
from gamecore.utils.game_state import get_game_state

logger = logging.getLogger(__name__)

BOARD_TYPES = (ChessBoard, TicTacToeBoard)


class MinimaxAISystem:
    """Plays the computer side: waits out its decision delay, then searches and moves.

    The delay is counted down from tick events, so the search itself never
    sleeps and stays a plain synchronous call.
    """

    def __init__(self, world: World, event_bus: EventBus, *, strict: bool | None = None) -> None:
        self.world = world
        self.event_bus = event_bus
        self.strict = strict
        self.pending_side: Optional[Any] = None
        self.delay_remaining: float = 0.0
        self.has_dispatched_action = False
        event_bus.subscribe(EVENT_TURN_ADVANCED, self.on_turn_advanced)
        event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        self._prime_initial_side()

    # --- Event handlers -------------------------------------------------
    def on_turn_advanced(self, sender, **payload) -> None:
        self._schedule(payload.get("new_side"))

    def on_game_over(self, sender, **payload) -> None:
        self._schedule(None)

    def on_tick(self, sender, **payload) -> None:
        if self.pending_side is None or self.has_dispatched_action:
            return
        dt = float(payload.get("dt", 0.0))
        if self.delay_remaining > 0.0:
            self.delay_remaining = max(0.0, self.delay_remaining - dt)
            if self.delay_remaining > 0.0:
                return
        self.take_turn()

    # --- Core flow ------------------------------------------------------
    def take_turn(self) -> None:
        side = self.pending_side
        agent = self._agent_for(side)
        board = self._board()
        self.has_dispatched_action = True
        if agent is None or board is None or board.side_to_move != side:
            return
        if get_game_state(self.world).status.is_terminal:
            return
        result = search_move(board, side, agent.depth, strict=self.strict)
        logger.debug("%s plays %r (score=%s, nodes=%d)", side, result.move, result.score, result.nodes)
        self.event_bus.emit(
            EVENT_AI_MOVE_CHOSEN,
            side=side,
            move=result.move,
            score=result.score,
            nodes=result.nodes,
        )
        self.event_bus.emit(EVENT_MOVE_REQUEST, move=result.move, agent="ai")

    def _schedule(self, side: Any) -> None:
        agent = self._agent_for(side)
        if agent is None:
            self.pending_side = None
            self.delay_remaining = 0.0
        else:
            self.pending_side = side
            self.delay_remaining = agent.decision_delay
        self.has_dispatched_action = False

    def _prime_initial_side(self) -> None:
        board = self._board()
        if board is not None and not get_game_state(self.world).status.is_terminal:
            self._schedule(board.side_to_move)

    def _agent_for(self, side: Any) -> Optional[MinimaxAgent]:
        if side is None:
            return None
        for _, agent in self.world.get_component(MinimaxAgent):
            if agent.side == side:
                return agent
        return None

    def _board(self):
        for board_type in BOARD_TYPES:
            for _, board in self.world.get_component(board_type):
                return board
        return None
