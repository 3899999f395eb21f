import random

import pytest

from gamecore.components.chess_board import ChessBoard
from gamecore.components.game_state import GameStatus
from gamecore.components.move import ChessMove
from gamecore.components.side import Side
from gamecore.rules import chess_rules
from tests.helpers import board_from


def targets(board, source):
    return {move.target for move in chess_rules.piece_moves(board, source)}


def test_initial_position_has_twenty_moves():
    board = ChessBoard.initial()
    assert len(chess_rules.legal_moves(board)) == 20
    assert len(chess_rules.legal_moves(board, Side.BLACK)) == 20


def test_pawn_single_double_and_captures():
    board = board_from({(7, 4): "K", (0, 4): "k", (6, 3): "P", (5, 2): "n", (5, 4): "b"})
    assert targets(board, (6, 3)) == {(5, 3), (4, 3), (5, 2), (5, 4)}


def test_pawn_blocked_cannot_advance_or_jump():
    board = board_from({(7, 4): "K", (0, 4): "k", (6, 3): "P", (5, 3): "p"})
    assert targets(board, (6, 3)) == set()


def test_pawn_double_step_only_from_start_row():
    board = board_from({(7, 4): "K", (0, 4): "k", (5, 3): "P"})
    assert targets(board, (5, 3)) == {(4, 3)}


def test_black_pawn_moves_down_the_board():
    board = board_from({(7, 4): "K", (0, 4): "k", (1, 0): "p"}, side_to_move=Side.BLACK)
    assert targets(board, (1, 0)) == {(2, 0), (3, 0)}


def test_sliders_stop_at_blockers():
    board = board_from({(7, 4): "K", (0, 4): "k", (4, 4): "R", (4, 6): "P", (2, 4): "n"})
    reached = targets(board, (4, 4))
    assert (4, 5) in reached and (4, 6) not in reached and (4, 7) not in reached
    assert (2, 4) in reached and (1, 4) not in reached
    assert (7, 4) not in reached


def test_knight_jumps_over_pieces():
    board = ChessBoard.initial()
    assert targets(board, (7, 1)) == {(5, 0), (5, 2)}


def test_move_into_check_is_filtered():
    board = board_from({(7, 4): "K", (0, 3): "r", (0, 7): "k"})
    moves = chess_rules.legal_moves(board)
    assert all(move.target[1] != 3 for move in moves)
    pseudo = chess_rules.legal_moves(board, strict=False)
    assert any(move.target == (7, 3) for move in pseudo)


def test_pinned_piece_cannot_expose_king():
    board = board_from({(7, 4): "K", (5, 4): "B", (0, 4): "r", (0, 0): "k"})
    assert all(move.source != (5, 4) for move in chess_rules.legal_moves(board))


def test_validate_move_reasons():
    board = ChessBoard.initial()
    assert chess_rules.validate_move(board, ChessMove((6, 4), (4, 4)))
    cases = {
        ChessMove((6, 4), (9, 4)): "position out of bounds",
        ChessMove((4, 4), (3, 4)): "no piece on source square",
        ChessMove((1, 4), (3, 4)): "it is white's turn",
        ChessMove((7, 0), (6, 0)): "destination is occupied by an own piece",
        ChessMove((7, 2), (5, 2)): "a bishop cannot move that way",
    }
    for move, reason in cases.items():
        verdict = chess_rules.validate_move(board, move)
        assert not verdict
        assert verdict.reason == reason


def test_validate_rejects_self_check():
    board = board_from({(7, 4): "K", (5, 4): "B", (0, 4): "r", (0, 0): "k"})
    verdict = chess_rules.validate_move(board, ChessMove((5, 4), (4, 3)))
    assert not verdict
    assert verdict.reason == "move leaves the king in check"
    assert chess_rules.validate_move(board, ChessMove((5, 4), (4, 3)), strict=False)


def test_back_rank_mate_is_checkmate():
    board = board_from(
        {(0, 0): "R", (7, 6): "K", (0, 7): "k", (1, 6): "p", (1, 7): "p"},
        side_to_move=Side.BLACK,
    )
    assert chess_rules.is_in_check(board, Side.BLACK)
    assert chess_rules.game_status(board) == (GameStatus.CHECKMATE, Side.WHITE)


def test_stalemate():
    board = board_from({(0, 0): "k", (2, 1): "Q", (7, 7): "K"}, side_to_move=Side.BLACK)
    assert not chess_rules.is_in_check(board, Side.BLACK)
    assert chess_rules.game_status(board) == (GameStatus.STALEMATE, None)


def test_check_status():
    board = board_from({(0, 4): "k", (4, 4): "R", (7, 0): "K"}, side_to_move=Side.BLACK)
    assert chess_rules.game_status(board) == (GameStatus.CHECK, None)


def test_missing_king_is_a_loss():
    board = board_from({(7, 4): "K", (3, 3): "p"}, side_to_move=Side.BLACK)
    assert chess_rules.game_status(board, strict=False) == (GameStatus.CHECKMATE, Side.WHITE)


def test_captures_first_keeps_relative_order():
    board = board_from({(7, 4): "K", (0, 4): "k", (4, 4): "R", (4, 6): "n", (2, 4): "p"})
    moves = chess_rules.captures_first(board, chess_rules.legal_moves(board))
    capture_count = sum(1 for move in moves if chess_rules.is_capture(board, move))
    assert capture_count == 2
    assert all(chess_rules.is_capture(board, move) for move in moves[:capture_count])
    assert not any(chess_rules.is_capture(board, move) for move in moves[capture_count:])


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_random_playout_legal_moves_are_sound(seed):
    rng = random.Random(seed)
    board = ChessBoard.initial()
    for _ in range(60):
        moves = chess_rules.legal_moves(board)
        if not moves:
            break
        count = board.piece_count()
        for move in moves:
            after = board.apply(move)
            assert after.piece_count() in (count, count - 1)
            assert after.get(move.source) is None
            assert not chess_rules.is_in_check(after, board.side_to_move)
        mover = board.side_to_move
        board = board.apply(rng.choice(moves))
        assert not chess_rules.is_in_check(board, mover)
        assert board.king_square(Side.WHITE) is not None
        assert board.king_square(Side.BLACK) is not None
