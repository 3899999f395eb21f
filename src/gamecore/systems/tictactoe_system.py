from __future__ import annotations

from typing import Optional, Tuple

from esper import World

from gamecore.components.game_state import GameStatus
from gamecore.components.move import CellMove
from gamecore.components.move_history import MoveHistory
from gamecore.components.side import Mark
from gamecore.components.tictactoe_board import TicTacToeBoard
from gamecore.constants import TICTACTOE_SIZE
from gamecore.events.bus import EventBus, EVENT_CELL_CLICK, EVENT_MOVE_REQUEST
from gamecore.rules import tictactoe_rules
from gamecore.rules.verdict import Verdict
from gamecore.systems.board_game_system import BoardGameSystem


class TicTacToeSystem(BoardGameSystem):
    board_type = TicTacToeBoard
    move_type = CellMove

    def __init__(self, world: World, event_bus: EventBus) -> None:
        super().__init__(world, event_bus)
        event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)

    def validate(self, board: TicTacToeBoard, move: CellMove) -> Verdict:
        return tictactoe_rules.validate_move(board, move)

    def evaluate_status(self, board: TicTacToeBoard) -> Tuple[GameStatus, Optional[Mark]]:
        return tictactoe_rules.game_status(board)

    def fresh_components(self) -> tuple:
        return TicTacToeBoard(), MoveHistory()

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        board = self.current_board()
        return tictactoe_rules.winning_line(board) if board is not None else None

    def on_cell_click(self, sender, **payload) -> None:
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None or self.board_entry() is None:
            return
        if not (0 <= row < TICTACTOE_SIZE and 0 <= col < TICTACTOE_SIZE):
            return
        self.event_bus.emit(EVENT_MOVE_REQUEST, move=CellMove(row * TICTACTOE_SIZE + col))
