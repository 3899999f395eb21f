from __future__ import annotations

from typing import Optional, Tuple

from esper import World

from gamecore.components.chess_board import ChessBoard
from gamecore.components.game_state import GameStatus
from gamecore.components.move import ChessMove
from gamecore.components.move_history import MoveHistory
from gamecore.components.piece import Piece
from gamecore.components.selection import Selection
from gamecore.components.side import Side
from gamecore.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_MOVE_REQUEST,
    EVENT_PIECE_DESELECTED,
    EVENT_PIECE_SELECTED,
)
from gamecore.rules import chess_rules
from gamecore.rules.verdict import Verdict
from gamecore.systems.board_game_system import BoardGameSystem
from gamecore.utils.game_state import get_game_state


class ChessSystem(BoardGameSystem):
    """Chess turns, plus the click-to-select, click-to-move input flow."""

    board_type = ChessBoard
    move_type = ChessMove

    def __init__(self, world: World, event_bus: EventBus, *, strict: bool | None = None) -> None:
        super().__init__(world, event_bus)
        self.strict = strict
        event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)

    def validate(self, board: ChessBoard, move: ChessMove) -> Verdict:
        return chess_rules.validate_move(board, move, strict=self.strict)

    def evaluate_status(self, board: ChessBoard) -> Tuple[GameStatus, Optional[Side]]:
        return chess_rules.game_status(board, strict=self.strict)

    def captured(self, board: ChessBoard, move: ChessMove) -> Optional[Piece]:
        return board.get(move.target)

    def fresh_components(self) -> tuple:
        return ChessBoard.initial(), MoveHistory(), Selection()

    def after_move(self, entity: int) -> None:
        selection = self.world.component_for_entity(entity, Selection)
        selection.position = None

    def on_cell_click(self, sender, **payload) -> None:
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None:
            return
        entry = self.board_entry()
        if entry is None:
            return
        entity, board = entry
        target = (row, col)
        if not board.in_bounds(target):
            return
        if get_game_state(self.world).status.is_terminal or self.is_computer_side(board.side_to_move):
            return
        selection: Selection = self.world.component_for_entity(entity, Selection)
        piece = board.get(target)
        own_piece = piece is not None and piece.side is board.side_to_move
        if selection.position is None:
            if own_piece:
                selection.position = target
                self.event_bus.emit(EVENT_PIECE_SELECTED, row=row, col=col)
            return
        if selection.position == target:
            selection.position = None
            self.event_bus.emit(EVENT_PIECE_DESELECTED, row=row, col=col, reason="same_cell")
            return
        if own_piece:
            selection.position = target
            self.event_bus.emit(EVENT_PIECE_SELECTED, row=row, col=col)
            return
        # Selection survives a rejected move.
        self.event_bus.emit(EVENT_MOVE_REQUEST, move=ChessMove(selection.position, target))
