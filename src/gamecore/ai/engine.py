"""Entry points for picking the computer's move on any supported board."""
from __future__ import annotations

from typing import Any, Union

from gamecore.ai.problems import ChessProblem, TicTacToeProblem
from gamecore.ai.search import AlphaBetaSearch, SearchResult
from gamecore.components.chess_board import ChessBoard
from gamecore.components.move import CellMove, ChessMove
from gamecore.components.tictactoe_board import TicTacToeBoard
from gamecore.constants import CHESS_SEARCH_DEPTH, TICTACTOE_SEARCH_DEPTH

Board = Union[ChessBoard, TicTacToeBoard]


def search_move(
    board: Board,
    side_to_move: Any = None,
    depth_limit: int | None = None,
    *,
    strict: bool | None = None,
) -> SearchResult:
    """Run alpha-beta for ``side_to_move`` and return move, score and node count.

    ``side_to_move`` defaults to the board's own flag; ``depth_limit`` to the
    game's reference depth (4 plies for chess, the whole game for tic-tac-toe).
    Raises ``NoLegalMoves`` on a finished position.
    """
    if isinstance(board, ChessBoard):
        side = board.side_to_move if side_to_move is None else side_to_move
        state = board.with_side_to_move(side)
        search = AlphaBetaSearch(ChessProblem(side, strict=strict))
        return search.search(state, CHESS_SEARCH_DEPTH if depth_limit is None else depth_limit)
    if isinstance(board, TicTacToeBoard):
        side = board.side_to_move if side_to_move is None else side_to_move
        state = board.with_side_to_move(side)
        search = AlphaBetaSearch(TicTacToeProblem(side))
        return search.search(state, TICTACTOE_SEARCH_DEPTH if depth_limit is None else depth_limit)
    raise TypeError(f"No search available for {type(board).__name__}")


def choose_move(
    board: Board,
    side_to_move: Any = None,
    depth_limit: int | None = None,
    *,
    strict: bool | None = None,
) -> Union[ChessMove, CellMove]:
    return search_move(board, side_to_move, depth_limit, strict=strict).move
