from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep systems alive even when the caller drops them.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# GAME LIFECYCLE
# ============================================================================
EVENT_NEW_GAME_REQUEST = "new_game_request"        # payload: difficulty=str|None (sudoku only)
EVENT_GAME_STARTED = "game_started"                # payload: kind=GameKind
EVENT_STATUS_CHANGED = "status_changed"            # payload: previous=GameStatus, status=GameStatus, winner=Side|Mark|None
EVENT_GAME_OVER = "game_over"                      # payload: status=GameStatus, winner=Side|Mark|None
EVENT_GAME_RESULT = "game_result"                  # payload: outcome=str, message=str


# ============================================================================
# BOARD GAMES (CHESS / TIC-TAC-TOE)
# ============================================================================
EVENT_CELL_CLICK = "cell_click"                    # payload: row, col
EVENT_PIECE_SELECTED = "piece_selected"            # payload: row, col
EVENT_PIECE_DESELECTED = "piece_deselected"        # payload: row, col, reason=str
EVENT_MOVE_REQUEST = "move_request"                # payload: move=ChessMove|CellMove
EVENT_MOVE_APPLIED = "move_applied"                # payload: move, side, captured=Piece|None
EVENT_MOVE_REJECTED = "move_rejected"              # payload: move, reason=str
EVENT_TURN_ADVANCED = "turn_advanced"              # payload: previous_side, new_side
EVENT_AI_MOVE_CHOSEN = "ai_move_chosen"            # payload: side, move, score=float, nodes=int


# ============================================================================
# SUDOKU
# ============================================================================
EVENT_CELL_SELECT = "cell_select"                  # payload: row, col
EVENT_CELL_EDIT = "cell_edit"                      # payload: row, col, digit=int
EVENT_CELL_EDITED = "cell_edited"                  # payload: row, col, digit, complete=bool, valid=bool
EVENT_NOTE_MODE_TOGGLE = "note_mode_toggle"        # payload: (none)
EVENT_NOTES_CHANGED = "notes_changed"              # payload: row, col, notes=tuple[int,...]
EVENT_HINT_REQUEST = "hint_request"                # payload: (none), uses selected cell
EVENT_HINT_USED = "hint_used"                      # payload: row, col, digit, hints_remaining=int
EVENT_MISTAKE_MADE = "mistake_made"                # payload: row, col, digit, mistakes=int
EVENT_PUZZLE_SOLVED = "puzzle_solved"              # payload: difficulty=str, elapsed=float, mistakes=int
