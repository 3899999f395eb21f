from __future__ import annotations

from typing import List, Optional

from gamecore.ai import chess_eval
from gamecore.ai.search import SearchProblem
from gamecore.components.chess_board import ChessBoard
from gamecore.components.move import CellMove, ChessMove
from gamecore.components.side import Mark, Side
from gamecore.components.tictactoe_board import TicTacToeBoard
from gamecore import constants
from gamecore.constants import CHESS_MATE_SCORE, TICTACTOE_WIN_SCORE
from gamecore.rules import chess_rules, tictactoe_rules


class ChessProblem(SearchProblem[ChessBoard, ChessMove]):
    """Chess adapter: captures searched first, mates scored by remaining depth."""

    def __init__(self, root_side: Side, *, strict: bool | None = None) -> None:
        super().__init__(root_side)
        self.strict = constants.FILTER_SELF_CHECK if strict is None else strict

    def side_to_move(self, state: ChessBoard) -> Side:
        return state.side_to_move

    def legal_moves(self, state: ChessBoard) -> List[ChessMove]:
        return chess_rules.legal_moves(state, strict=self.strict)

    def apply(self, state: ChessBoard, move: ChessMove) -> ChessBoard:
        return state.apply(move)

    def order_moves(self, state: ChessBoard, moves: List[ChessMove]) -> List[ChessMove]:
        return chess_rules.captures_first(state, moves)

    def evaluate(self, state: ChessBoard) -> float:
        return chess_eval.evaluate(state, self.root_side)

    def _mate(self, loser: Side, depth: int) -> float:
        # More depth left means the mate came sooner.
        score = CHESS_MATE_SCORE + depth
        return -score if loser == self.root_side else score

    def terminal_score(self, state: ChessBoard, depth: int, ply: int) -> Optional[float]:
        if self.strict:
            return None
        side = state.side_to_move
        if state.king_square(side) is None:
            return self._mate(side, depth)
        return None

    def no_moves_score(self, state: ChessBoard, depth: int, ply: int) -> float:
        side = state.side_to_move
        if chess_rules.is_in_check(state, side):
            return self._mate(side, depth)
        return 0.0


class TicTacToeProblem(SearchProblem[TicTacToeBoard, CellMove]):
    """Exact tic-tac-toe search; wins are worth less the further away they are."""

    def side_to_move(self, state: TicTacToeBoard) -> Mark:
        return state.side_to_move

    def legal_moves(self, state: TicTacToeBoard) -> List[CellMove]:
        return tictactoe_rules.legal_moves(state)

    def apply(self, state: TicTacToeBoard, move: CellMove) -> TicTacToeBoard:
        return state.apply(move)

    def evaluate(self, state: TicTacToeBoard) -> float:
        return 0.0

    def terminal_score(self, state: TicTacToeBoard, depth: int, ply: int) -> Optional[float]:
        mark = tictactoe_rules.winner(state)
        if mark is not None:
            return TICTACTOE_WIN_SCORE - ply if mark == self.root_side else ply - TICTACTOE_WIN_SCORE
        if state.is_full():
            return 0.0
        return None

    def no_moves_score(self, state: TicTacToeBoard, depth: int, ply: int) -> float:
        return 0.0
