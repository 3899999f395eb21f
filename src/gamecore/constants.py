# Board geometry
CHESS_SIZE = 8
TICTACTOE_SIZE = 3
SUDOKU_SIZE = 9
SUDOKU_BOX = 3

# Search depths (plies). Tic-tac-toe is solved exactly, so its limit covers every empty cell.
CHESS_SEARCH_DEPTH = 4
TICTACTOE_SEARCH_DEPTH = TICTACTOE_SIZE * TICTACTOE_SIZE

# Terminal scores must dominate every heuristic value the evaluators can produce.
CHESS_MATE_SCORE = 1_000_000
TICTACTOE_WIN_SCORE = 10

# Chess move generation drops moves that leave the mover's own king attacked.
# Set False for the pseudo-legal generator, where a king may be left attacked.
FILTER_SELF_CHECK = True

# Seconds the computer opponent "thinks" before moving (consumed from tick events).
CHESS_DECISION_DELAY = 1.5
TICTACTOE_DECISION_DELAY = 0.8

# Sudoku puzzle generation: number of clues removed from the solved grid.
SUDOKU_CELLS_TO_REMOVE = {
    "easy": 35,
    "medium": 45,
    "hard": 55,
}
DEFAULT_DIFFICULTY = "medium"
# Fresh reseeds attempted before generation gives up.
GENERATION_ATTEMPTS = 3
SUDOKU_HINTS_PER_GAME = 3
