from __future__ import annotations

import logging
from typing import Optional, Tuple

from esper import World

from gamecore.components.game_state import GameStatus
from gamecore.components.move import CellEdit
from gamecore.components.selection import Selection
from gamecore.components.sudoku_grid import SudokuGrid
from gamecore.components.sudoku_session import SudokuSession
from gamecore.constants import SUDOKU_HINTS_PER_GAME, SUDOKU_SIZE
from gamecore.errors import GenerationFailed, IllegalMove, OutOfBounds
from gamecore.events.bus import (
    EventBus,
    EVENT_CELL_EDIT,
    EVENT_CELL_EDITED,
    EVENT_CELL_SELECT,
    EVENT_GAME_STARTED,
    EVENT_HINT_REQUEST,
    EVENT_HINT_USED,
    EVENT_MISTAKE_MADE,
    EVENT_MOVE_REJECTED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_NOTE_MODE_TOGGLE,
    EVENT_NOTES_CHANGED,
    EVENT_PIECE_SELECTED,
    EVENT_PUZZLE_SOLVED,
    EVENT_TICK,
)
from gamecore.rules.sudoku_rules import generate, is_complete_and_valid
from gamecore.utils.game_state import find_singleton, get_game_state, set_status

logger = logging.getLogger(__name__)


class SudokuSystem:
    """Single-player Sudoku flow: selection, edits, notes, hints and the timer."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        event_bus.subscribe(EVENT_CELL_SELECT, self.on_cell_select)
        event_bus.subscribe(EVENT_CELL_EDIT, self.on_cell_edit)
        event_bus.subscribe(EVENT_NOTE_MODE_TOGGLE, self.on_note_mode_toggle)
        event_bus.subscribe(EVENT_HINT_REQUEST, self.on_hint_request)
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    # --- Queries --------------------------------------------------------
    def _entry(self) -> Optional[Tuple[int, SudokuGrid]]:
        return find_singleton(self.world, SudokuGrid)

    def _session(self, entity: int) -> SudokuSession:
        return self.world.component_for_entity(entity, SudokuSession)

    def _selection(self, entity: int) -> Selection:
        return self.world.component_for_entity(entity, Selection)

    def _accepting_input(self) -> bool:
        return not get_game_state(self.world).status.is_terminal

    # --- Event handlers -------------------------------------------------
    def on_new_game_request(self, sender, **payload) -> None:
        entry = self._entry()
        if entry is None:
            return
        entity, _ = entry
        difficulty = payload.get("difficulty") or self._session(entity).difficulty
        try:
            puzzle, solution = generate(difficulty, getattr(self.world, "random", None))
        except (ValueError, GenerationFailed) as exc:
            self._reject(None, str(exc))
            return
        self.world.add_component(entity, puzzle)
        self.world.add_component(
            entity,
            SudokuSession(difficulty=difficulty, solution=solution, hints_remaining=SUDOKU_HINTS_PER_GAME),
        )
        self.world.add_component(entity, Selection())
        set_status(self.world, self.event_bus, GameStatus.IN_PROGRESS)
        self.event_bus.emit(EVENT_GAME_STARTED, kind=get_game_state(self.world).kind)

    def on_tick(self, sender, **payload) -> None:
        entry = self._entry()
        if entry is None:
            return
        session = self._session(entry[0])
        if session.timer_running:
            session.elapsed += float(payload.get("dt", 0.0))

    def on_cell_select(self, sender, **payload) -> None:
        entry = self._entry()
        row = payload.get("row")
        col = payload.get("col")
        if entry is None or row is None or col is None or not self._accepting_input():
            return
        entity, grid = entry
        if not grid.in_bounds(row, col) or grid.is_fixed(row, col):
            return
        self._selection(entity).position = (row, col)
        self.event_bus.emit(EVENT_PIECE_SELECTED, row=row, col=col)

    def on_note_mode_toggle(self, sender, **payload) -> None:
        entry = self._entry()
        if entry is None:
            return
        session = self._session(entry[0])
        session.note_mode = not session.note_mode

    def on_cell_edit(self, sender, **payload) -> None:
        entry = self._entry()
        if entry is None:
            return
        entity, grid = entry
        session = self._session(entity)
        row, col = payload.get("row"), payload.get("col")
        if row is None or col is None:
            selected = self._selection(entity).position
            if selected is None:
                return
            row, col = selected
        digit = int(payload.get("digit", 0))
        edit = CellEdit(row, col, digit)
        if not self._accepting_input():
            self._reject(edit, "the game is over")
            return

        if session.note_mode and digit != 0:
            self._toggle_note(grid, session, edit)
            return

        try:
            grid.set(row, col, digit)
        except (OutOfBounds, IllegalMove) as exc:
            self._reject(edit, str(exc))
            return

        if session.notes.pop((row, col), None):
            self.event_bus.emit(EVENT_NOTES_CHANGED, row=row, col=col, notes=())
        if digit != 0 and digit != session.solution[row][col]:
            session.mistakes += 1
            self.event_bus.emit(EVENT_MISTAKE_MADE, row=row, col=col, digit=digit, mistakes=session.mistakes)
        self._after_edit(grid, session, edit)

    def on_hint_request(self, sender, **payload) -> None:
        entry = self._entry()
        if entry is None or not self._accepting_input():
            return
        entity, grid = entry
        session = self._session(entity)
        selected = self._selection(entity).position
        if session.hints_remaining <= 0:
            self._reject(None, "no hints remaining")
            return
        if selected is None:
            self._reject(None, "no cell selected")
            return
        row, col = selected
        if grid.is_fixed(row, col) or grid.get(row, col) != 0:
            self._reject(CellEdit(row, col, grid.get(row, col)), "cell is already filled")
            return
        digit = session.solution[row][col]
        grid.set(row, col, digit)
        session.hints_remaining -= 1
        session.notes.pop((row, col), None)
        self.event_bus.emit(
            EVENT_HINT_USED, row=row, col=col, digit=digit, hints_remaining=session.hints_remaining
        )
        self._after_edit(grid, session, CellEdit(row, col, digit))

    # --- Core flow ------------------------------------------------------
    def _toggle_note(self, grid: SudokuGrid, session: SudokuSession, edit: CellEdit) -> None:
        if not grid.in_bounds(edit.row, edit.col):
            self._reject(edit, f"position ({edit.row}, {edit.col}) is out of bounds")
            return
        if grid.is_fixed(edit.row, edit.col):
            self._reject(edit, "notes cannot go on a fixed clue")
            return
        if not 1 <= edit.digit <= SUDOKU_SIZE:
            self._reject(edit, f"digit {edit.digit} is outside 1..{SUDOKU_SIZE}")
            return
        notes = session.notes.setdefault((edit.row, edit.col), set())
        notes.symmetric_difference_update({edit.digit})
        if not notes:
            del session.notes[(edit.row, edit.col)]
        self.event_bus.emit(
            EVENT_NOTES_CHANGED, row=edit.row, col=edit.col, notes=tuple(sorted(notes))
        )

    def _after_edit(self, grid: SudokuGrid, session: SudokuSession, edit: CellEdit) -> None:
        complete, valid = is_complete_and_valid(grid, session.solution)
        session.complete = complete
        session.valid = valid
        self.event_bus.emit(
            EVENT_CELL_EDITED,
            row=edit.row,
            col=edit.col,
            digit=edit.digit,
            complete=complete,
            valid=valid,
        )
        if complete and valid:
            session.timer_running = False
            logger.debug("Solved %s puzzle in %.1fs", session.difficulty, session.elapsed)
            set_status(self.world, self.event_bus, GameStatus.SOLVED)
            self.event_bus.emit(
                EVENT_PUZZLE_SOLVED,
                difficulty=session.difficulty,
                elapsed=session.elapsed,
                mistakes=session.mistakes,
            )

    def _reject(self, edit: Optional[CellEdit], reason: str) -> None:
        logger.debug("Rejected %r: %s", edit, reason)
        self.event_bus.emit(EVENT_MOVE_REJECTED, move=edit, reason=reason)
