from gamecore.components.game_state import GameKind, GameStatus, PlayMode
from gamecore.components.side import Mark
from gamecore.events.bus import EVENT_GAME_RESULT, EVENT_MOVE_REJECTED, EVENT_STATUS_CHANGED
from gamecore.session import GameSession


def record(session, event):
    seen = []
    session.event_bus.subscribe(event, lambda sender, **payload: seen.append(payload))
    return seen


def test_local_game_x_wins_top_row():
    session = GameSession(GameKind.TIC_TAC_TOE, PlayMode.LOCAL)
    results = record(session, EVENT_GAME_RESULT)
    for row, col in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        session.click(row, col)
    assert session.state.status is GameStatus.WIN
    assert session.state.winner is Mark.X
    assert session.tictactoe_system.winning_line() == (0, 1, 2)
    assert results == [{"outcome": "win", "message": "Player X wins!"}]


def test_occupied_cell_is_rejected():
    session = GameSession(GameKind.TIC_TAC_TOE, PlayMode.LOCAL)
    rejected = record(session, EVENT_MOVE_REJECTED)
    session.click(1, 1)
    session.click(1, 1)
    assert rejected[0]["reason"] == "cell is already occupied"
    assert session.board.side_to_move is Mark.O


def test_local_draw():
    session = GameSession(GameKind.TIC_TAC_TOE, PlayMode.LOCAL)
    # X O X / X O O / O X X
    for cell in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
        session.click(*divmod(cell, 3))
    assert session.state.status is GameStatus.DRAW
    assert session.result.message == "It's a draw!"
    assert session.result.outcome == "draw"


def test_new_game_clears_board_and_result():
    session = GameSession(GameKind.TIC_TAC_TOE, PlayMode.LOCAL)
    for row, col in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        session.click(row, col)
    session.new_game()
    assert session.board.empty_cells() == list(range(9))
    assert session.result is None
    assert session.state.winner is None


def test_restart_after_win_publishes_status_change():
    session = GameSession(GameKind.TIC_TAC_TOE, PlayMode.LOCAL)
    for row, col in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        session.click(row, col)
    statuses = record(session, EVENT_STATUS_CHANGED)
    session.new_game()
    assert statuses == [
        {"previous": GameStatus.WIN, "status": GameStatus.IN_PROGRESS, "winner": None}
    ]
    assert session.state.status is GameStatus.IN_PROGRESS
