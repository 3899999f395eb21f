from gamecore.components.chess_board import ChessBoard
from gamecore.components.game_state import GameKind, GameStatus, PlayMode
from gamecore.components.move import ChessMove
from gamecore.components.piece import Piece, PieceKind
from gamecore.components.side import Side
from gamecore.events.bus import (
    EVENT_MOVE_APPLIED,
    EVENT_MOVE_REJECTED,
    EVENT_PIECE_DESELECTED,
    EVENT_STATUS_CHANGED,
)
from gamecore.session import GameSession


def record(session, event):
    seen = []
    session.event_bus.subscribe(event, lambda sender, **payload: seen.append(payload))
    return seen


def play(session, *moves):
    for source, target in moves:
        session.click(*source)
        session.click(*target)


def test_click_selects_and_deselects_same_cell():
    session = GameSession(GameKind.CHESS, PlayMode.LOCAL)
    deselected = record(session, EVENT_PIECE_DESELECTED)
    session.click(6, 4)
    assert session.selection == (6, 4)
    session.click(6, 4)
    assert session.selection is None
    assert deselected[0]["reason"] == "same_cell"


def test_clicking_empty_or_enemy_square_without_selection_does_nothing():
    session = GameSession(GameKind.CHESS, PlayMode.LOCAL)
    session.click(4, 4)
    session.click(1, 4)
    assert session.selection is None


def test_clicking_another_own_piece_switches_selection():
    session = GameSession(GameKind.CHESS, PlayMode.LOCAL)
    session.click(6, 4)
    session.click(7, 6)
    assert session.selection == (7, 6)


def test_second_click_moves_selected_piece():
    session = GameSession(GameKind.CHESS, PlayMode.LOCAL)
    applied = record(session, EVENT_MOVE_APPLIED)
    play(session, ((6, 4), (4, 4)))
    board = session.board
    assert board.get((4, 4)) == Piece(PieceKind.PAWN, Side.WHITE)
    assert board.side_to_move is Side.BLACK
    assert session.selection is None
    assert session.history == (ChessMove((6, 4), (4, 4)),)
    assert applied[0]["side"] is Side.WHITE
    assert applied[0]["captured"] is None


def test_illegal_target_keeps_selection():
    session = GameSession(GameKind.CHESS, PlayMode.LOCAL)
    rejected = record(session, EVENT_MOVE_REJECTED)
    session.click(6, 4)
    session.click(3, 4)
    assert session.selection == (6, 4)
    assert rejected[0]["reason"] == "a pawn cannot move that way"
    assert session.board.get((6, 4)) is not None


def test_capture_is_reported():
    session = GameSession(GameKind.CHESS, PlayMode.LOCAL)
    applied = record(session, EVENT_MOVE_APPLIED)
    play(session, ((6, 4), (4, 4)), ((1, 3), (3, 3)), ((4, 4), (3, 3)))
    assert applied[-1]["captured"] == Piece(PieceKind.PAWN, Side.BLACK)
    assert session.board.piece_count() == 31


def test_fools_mate_ends_local_game():
    session = GameSession(GameKind.CHESS, PlayMode.LOCAL)
    statuses = record(session, EVENT_STATUS_CHANGED)
    rejected = record(session, EVENT_MOVE_REJECTED)
    play(
        session,
        ((6, 5), (5, 5)),
        ((1, 4), (3, 4)),
        ((6, 6), (4, 6)),
        ((0, 3), (4, 7)),
    )
    assert session.state.status is GameStatus.CHECKMATE
    assert session.state.winner is Side.BLACK
    assert statuses[-1]["status"] is GameStatus.CHECKMATE
    assert session.result.outcome == "win"
    assert session.result.message == "Black wins!"

    session.request_move(ChessMove((6, 0), (5, 0)))
    assert rejected[-1]["reason"] == "the game is over"
    session.click(6, 0)
    assert session.selection is None


def test_check_status_is_published():
    session = GameSession(GameKind.CHESS, PlayMode.LOCAL)
    play(session, ((6, 5), (5, 5)), ((1, 4), (3, 4)), ((6, 0), (5, 0)), ((0, 3), (4, 7)))
    assert session.state.status is GameStatus.CHECK


def test_new_game_restores_initial_position():
    session = GameSession(GameKind.CHESS, PlayMode.LOCAL)
    play(session, ((6, 4), (4, 4)))
    session.new_game()
    assert session.board == ChessBoard.initial()
    assert session.history == ()
    assert session.state.status is GameStatus.IN_PROGRESS


def test_human_cannot_move_for_the_computer():
    session = GameSession(GameKind.CHESS, search_depth=1, decision_delay=0.0)
    rejected = record(session, EVENT_MOVE_REJECTED)
    play(session, ((6, 4), (4, 4)))
    session.click(1, 4)
    assert session.selection is None
    session.request_move(ChessMove((1, 4), (3, 4)))
    assert rejected[-1]["reason"] == "waiting for the computer to move"
