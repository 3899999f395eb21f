import pytest

from gamecore.ai import chess_eval
from gamecore.ai.engine import choose_move, search_move
from gamecore.ai.search import AlphaBetaSearch
from gamecore.ai.problems import ChessProblem
from gamecore.components.chess_board import ChessBoard
from gamecore.components.move import ChessMove
from gamecore.components.piece import PieceKind
from gamecore.components.side import Side
from gamecore.components.tictactoe_board import TicTacToeBoard
from gamecore.constants import CHESS_MATE_SCORE
from gamecore.errors import NoLegalMoves
from gamecore.rules import chess_rules
from tests.helpers import board_from


def test_initial_position_is_balanced():
    board = ChessBoard.initial()
    assert chess_eval.evaluate(board, Side.WHITE) == 0
    assert chess_eval.evaluate(board, Side.BLACK) == 0


def test_advanced_pawn_scores_higher():
    home = chess_eval.piece_square_value(PieceKind.PAWN, Side.WHITE, 6, 3)
    advanced = chess_eval.piece_square_value(PieceKind.PAWN, Side.WHITE, 1, 3)
    assert advanced > home
    mirrored = chess_eval.piece_square_value(PieceKind.PAWN, Side.BLACK, 6, 3)
    assert mirrored == advanced


def test_centralized_knight_scores_higher():
    corner = chess_eval.piece_square_value(PieceKind.KNIGHT, Side.WHITE, 7, 0)
    center = chess_eval.piece_square_value(PieceKind.KNIGHT, Side.WHITE, 4, 3)
    assert center > corner


def test_finds_back_rank_mate_in_one():
    board = board_from({(7, 0): "R", (7, 6): "K", (0, 7): "k", (1, 6): "p", (1, 7): "p"})
    result = search_move(board, Side.WHITE, 2)
    assert result.move == ChessMove((7, 0), (0, 0))
    assert result.score == CHESS_MATE_SCORE + 1
    assert result.nodes > 1


def test_takes_hanging_queen():
    board = board_from({(7, 4): "K", (7, 0): "R", (0, 4): "k", (2, 0): "q"})
    assert choose_move(board, Side.WHITE, 1) == ChessMove((7, 0), (2, 0))
    assert choose_move(board, Side.WHITE, 2) == ChessMove((7, 0), (2, 0))


def test_black_side_search_from_initial_position():
    board = ChessBoard.initial().apply(ChessMove((6, 4), (4, 4)))
    move = choose_move(board, Side.BLACK, 2)
    assert move in chess_rules.legal_moves(board)


def test_no_legal_moves_raises():
    board = board_from({(0, 0): "k", (2, 1): "Q", (7, 7): "K"}, side_to_move=Side.BLACK)
    with pytest.raises(NoLegalMoves):
        search_move(board, Side.BLACK, 2)


def test_depth_must_be_positive():
    with pytest.raises(ValueError):
        AlphaBetaSearch(ChessProblem(Side.WHITE)).search(ChessBoard.initial(), 0)


def test_unsupported_board_type():
    with pytest.raises(TypeError):
        search_move(object())


def test_prefers_immediate_mate_over_slower_mates():
    board = board_from({(7, 0): "R", (1, 1): "R", (7, 6): "K", (0, 7): "k"})
    result = search_move(board, Side.WHITE, 4)
    assert result.move == ChessMove((7, 0), (0, 0))
    # Mate found with three plies of depth left.
    assert result.score == CHESS_MATE_SCORE + 3


def test_mated_side_scores_negative_mate():
    # Black's only move walks into a rook mate on the back rank.
    board = board_from({(0, 0): "k", (2, 1): "K", (7, 7): "R"}, side_to_move=Side.BLACK)
    assert chess_rules.legal_moves(board) == [ChessMove((0, 0), (0, 1))]
    result = search_move(board, Side.BLACK, 3)
    assert result.move == ChessMove((0, 0), (0, 1))
    assert result.score == -(CHESS_MATE_SCORE + 1)


@pytest.mark.parametrize("board", [ChessBoard.initial(), TicTacToeBoard()])
def test_zero_depth_limit_is_rejected(board):
    with pytest.raises(ValueError):
        search_move(board, depth_limit=0)
