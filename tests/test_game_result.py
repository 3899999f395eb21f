import pytest

from gamecore.components.game_state import GameKind, GameState, GameStatus, PlayMode
from gamecore.components.side import Mark, Side
from gamecore.components.sudoku_session import SudokuSession
from gamecore.systems.game_result_system import describe_result, format_elapsed


@pytest.mark.parametrize(
    "kind, mode, status, winner, expected",
    [
        (GameKind.CHESS, PlayMode.COMPUTER, GameStatus.CHECKMATE, Side.WHITE,
         ("win", "Incredible! You defeated the master!")),
        (GameKind.CHESS, PlayMode.COMPUTER, GameStatus.CHECKMATE, Side.BLACK,
         ("lose", "Computer wins! Try again!")),
        (GameKind.CHESS, PlayMode.LOCAL, GameStatus.CHECKMATE, Side.WHITE, ("win", "White wins!")),
        (GameKind.CHESS, PlayMode.COMPUTER, GameStatus.STALEMATE, None, ("draw", "It's a draw!")),
        (GameKind.TIC_TAC_TOE, PlayMode.COMPUTER, GameStatus.WIN, Mark.X, ("win", "You won! (Incredible!)")),
        (GameKind.TIC_TAC_TOE, PlayMode.COMPUTER, GameStatus.WIN, Mark.O, ("lose", "Computer wins!")),
        (GameKind.TIC_TAC_TOE, PlayMode.LOCAL, GameStatus.WIN, Mark.O, ("win", "Player O wins!")),
        (GameKind.TIC_TAC_TOE, PlayMode.LOCAL, GameStatus.DRAW, None, ("draw", "It's a draw!")),
    ],
)
def test_describe_board_game_results(kind, mode, status, winner, expected):
    state = GameState(kind=kind, mode=mode, status=status, winner=winner)
    assert describe_result(state) == expected


def test_describe_solved_sudoku():
    state = GameState(kind=GameKind.SUDOKU, status=GameStatus.SOLVED)
    session = SudokuSession(difficulty="hard", solution=[], elapsed=754.9)
    assert describe_result(state, session) == (
        "win",
        "Congratulations! You solved the hard puzzle in 12:34!",
    )


def test_format_elapsed():
    assert format_elapsed(0) == "00:00"
    assert format_elapsed(61.7) == "01:01"
