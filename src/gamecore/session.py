"""One playable game: event bus, ECS world and the systems that drive it.

Hosts (a UI, tests, a script) call the input methods below and advance time
with ``tick``; everything else flows through the bus.
"""
from __future__ import annotations

import random
from typing import Any, Optional

from gamecore.components.chess_board import ChessBoard
from gamecore.components.game_result import GameResult
from gamecore.components.game_state import GameKind, GameState, PlayMode
from gamecore.components.move_history import MoveHistory
from gamecore.components.selection import Selection
from gamecore.components.sudoku_grid import SudokuGrid
from gamecore.components.sudoku_session import SudokuSession
from gamecore.components.tictactoe_board import TicTacToeBoard
from gamecore.constants import DEFAULT_DIFFICULTY
from gamecore.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_CELL_EDIT,
    EVENT_CELL_SELECT,
    EVENT_HINT_REQUEST,
    EVENT_MOVE_REQUEST,
    EVENT_NEW_GAME_REQUEST,
    EVENT_NOTE_MODE_TOGGLE,
    EVENT_TICK,
)
from gamecore.systems.chess_system import ChessSystem
from gamecore.systems.game_result_system import GameResultSystem
from gamecore.systems.minimax_ai_system import MinimaxAISystem
from gamecore.systems.sudoku_system import SudokuSystem
from gamecore.systems.tictactoe_system import TicTacToeSystem
from gamecore.utils.game_state import find_singleton, get_game_state
from gamecore.world import create_world


class GameSession:
    def __init__(
        self,
        kind: GameKind,
        mode: PlayMode = PlayMode.COMPUTER,
        *,
        difficulty: str = DEFAULT_DIFFICULTY,
        search_depth: int | None = None,
        decision_delay: float | None = None,
        strict: bool | None = None,
        rng: random.Random | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.world = create_world(
            self.event_bus,
            kind,
            mode,
            difficulty=difficulty,
            search_depth=search_depth,
            decision_delay=decision_delay,
            rng=rng,
        )
        self.kind = kind

        # Result system subscribes first.
        self.game_result_system = GameResultSystem(self.world, self.event_bus)

        # Game systems
        self.chess_system: Optional[ChessSystem] = None
        self.tictactoe_system: Optional[TicTacToeSystem] = None
        self.sudoku_system: Optional[SudokuSystem] = None
        if kind is GameKind.CHESS:
            self.chess_system = ChessSystem(self.world, self.event_bus, strict=strict)
        elif kind is GameKind.TIC_TAC_TOE:
            self.tictactoe_system = TicTacToeSystem(self.world, self.event_bus)
        else:
            self.sudoku_system = SudokuSystem(self.world, self.event_bus)

        # AI systems
        self.ai_system: Optional[MinimaxAISystem] = None
        if kind is not GameKind.SUDOKU:
            self.ai_system = MinimaxAISystem(self.world, self.event_bus, strict=strict)

    # --- Input ----------------------------------------------------------
    def tick(self, dt: float) -> None:
        self.event_bus.emit(EVENT_TICK, dt=dt)

    def click(self, row: int, col: int) -> None:
        if self.kind is GameKind.SUDOKU:
            self.event_bus.emit(EVENT_CELL_SELECT, row=row, col=col)
        else:
            self.event_bus.emit(EVENT_CELL_CLICK, row=row, col=col)

    def request_move(self, move: Any) -> None:
        self.event_bus.emit(EVENT_MOVE_REQUEST, move=move)

    def edit_cell(self, digit: int, row: int | None = None, col: int | None = None) -> None:
        self.event_bus.emit(EVENT_CELL_EDIT, row=row, col=col, digit=digit)

    def toggle_note_mode(self) -> None:
        self.event_bus.emit(EVENT_NOTE_MODE_TOGGLE)

    def request_hint(self) -> None:
        self.event_bus.emit(EVENT_HINT_REQUEST)

    def new_game(self, difficulty: str | None = None) -> None:
        self.event_bus.emit(EVENT_NEW_GAME_REQUEST, difficulty=difficulty)

    # --- Views ----------------------------------------------------------
    @property
    def state(self) -> GameState:
        return get_game_state(self.world)

    @property
    def board(self) -> Any:
        for board_type in (ChessBoard, TicTacToeBoard, SudokuGrid):
            entry = find_singleton(self.world, board_type)
            if entry is not None:
                return entry[1]
        return None

    @property
    def history(self) -> tuple:
        entry = find_singleton(self.world, MoveHistory)
        return entry[1].moves if entry is not None else ()

    @property
    def selection(self) -> Optional[tuple]:
        entry = find_singleton(self.world, Selection)
        return entry[1].position if entry is not None else None

    @property
    def sudoku(self) -> Optional[SudokuSession]:
        entry = find_singleton(self.world, SudokuSession)
        return entry[1] if entry is not None else None

    @property
    def result(self) -> Optional[GameResult]:
        entry = find_singleton(self.world, GameResult)
        return entry[1] if entry is not None else None
