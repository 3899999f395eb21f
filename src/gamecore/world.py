import random

from esper import World

from gamecore.components.chess_board import ChessBoard
from gamecore.components.game_state import GameKind, GameState, PlayMode
from gamecore.components.human_agent import HumanAgent
from gamecore.components.minimax_agent import MinimaxAgent
from gamecore.components.move_history import MoveHistory
from gamecore.components.selection import Selection
from gamecore.components.side import Mark, Side
from gamecore.components.sudoku_session import SudokuSession
from gamecore.components.tictactoe_board import TicTacToeBoard
from gamecore.constants import (
    CHESS_DECISION_DELAY,
    CHESS_SEARCH_DEPTH,
    DEFAULT_DIFFICULTY,
    TICTACTOE_DECISION_DELAY,
    TICTACTOE_SEARCH_DEPTH,
)
from gamecore.events.bus import EVENT_GAME_STARTED, EventBus
from gamecore.rules.sudoku_rules import generate


def board_components(world: World, kind: GameKind, difficulty: str = DEFAULT_DIFFICULTY) -> tuple:
    """Fresh components for the board entity of ``kind``."""
    if kind is GameKind.CHESS:
        return ChessBoard.initial(), MoveHistory(), Selection()
    if kind is GameKind.TIC_TAC_TOE:
        return TicTacToeBoard(), MoveHistory()
    puzzle, solution = generate(difficulty, getattr(world, "random", None))
    return puzzle, SudokuSession(difficulty=difficulty, solution=solution), Selection()


def create_world(
    event_bus: EventBus,
    kind: GameKind = GameKind.TIC_TAC_TOE,
    mode: PlayMode = PlayMode.COMPUTER,
    *,
    difficulty: str = DEFAULT_DIFFICULTY,
    search_depth: int | None = None,
    decision_delay: float | None = None,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register the global game state resource.
    world.create_entity(GameState(kind=kind, mode=mode))
    world.create_entity(*board_components(world, kind, difficulty))

    if kind is GameKind.CHESS:
        human_side, computer_side = Side.WHITE, Side.BLACK
        depth = CHESS_SEARCH_DEPTH if search_depth is None else search_depth
        delay = CHESS_DECISION_DELAY if decision_delay is None else decision_delay
    elif kind is GameKind.TIC_TAC_TOE:
        human_side, computer_side = Mark.X, Mark.O
        depth = TICTACTOE_SEARCH_DEPTH if search_depth is None else search_depth
        delay = TICTACTOE_DECISION_DELAY if decision_delay is None else decision_delay
    else:
        # Sudoku is single-player.
        event_bus.emit(EVENT_GAME_STARTED, kind=kind)
        return world

    world.create_entity(HumanAgent(side=human_side))
    if mode is PlayMode.COMPUTER:
        world.create_entity(MinimaxAgent(side=computer_side, depth=depth, decision_delay=delay))
    else:
        world.create_entity(HumanAgent(side=computer_side))
    event_bus.emit(EVENT_GAME_STARTED, kind=kind)
    return world
