"""Inline cell editing state machine.

States:
    VIEWING  no cell is being edited
    EDITING  one cell holds a draft value

Transitions:
    VIEWING -> EDITING   begin() on an editable, non-synthetic cell
    EDITING -> VIEWING   commit() with a valid draft, cancel(), stale row
    EDITING -> EDITING   commit() with an invalid draft (error is kept)

Validation failures are reported through CommitResult, never raised.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..data.history import HistoryManager
from ..data.lifecycle import RowLifecycleTracker
from ..data.row_store import RowStore
from ..debug_trace import logger
from ..models.column import Column
from ..models.coords import CellCoord
from ..models.row import Row, get_row_key
from ..models.validation import run_validators
from .selection import make_coord


class EditState(Enum):
    VIEWING = "viewing"
    EDITING = "editing"


@dataclass(frozen=True)
class CommitResult:
    """Outcome of a commit attempt.

    Attributes:
        ok: False only when a validator rejected the draft.
        error: The validator's message when ok is False.
        changed: True when the row store was written.
    """

    ok: bool
    error: str | None = None
    changed: bool = False


def _column_for(columns: Sequence[Column], field: str) -> Column | None:
    return next((c for c in columns if c.field == field), None)


def key_starts_edit(key: str) -> bool:
    """A single printable character or Enter opens the editor."""
    return key == "Enter" or (len(key) == 1 and key.isprintable())


class EditController:
    """Owns the edit cell and its draft; writes through to a RowStore.

    Usage:
        editor = EditController(store, history)
        if editor.begin(coord, column, current_value=row[field]):
            editor.set_draft("new")
            result = editor.commit(column)
            if not result.ok:
                show(result.error)
    """

    def __init__(self, store: RowStore, history: HistoryManager, editable: bool = True):
        self.store = store
        self.history = history
        self.editable = editable

        self.state = EditState.VIEWING
        self.edit_cell: CellCoord | None = None
        self.draft: Any = None
        self.error: str | None = None

    @property
    def is_editing(self) -> bool:
        return self.state is EditState.EDITING

    def can_edit(self, column: Column | None) -> bool:
        return self.editable and column is not None and column.is_editable

    # --- Enter / leave ---

    def begin(
        self,
        coord: CellCoord,
        column: Column | None,
        current_value: Any = None,
        initial_draft: Any = None,
    ) -> bool:
        """Enter EDITING on a cell.

        Args:
            coord: Cell to edit
            column: Its column definition
            current_value: The cell's stored value (seeds the draft)
            initial_draft: Overrides the seed (e.g. the typed character)

        Returns:
            True if editing started
        """
        if not self.can_edit(column):
            return False

        if initial_draft is not None:
            draft = initial_draft
        else:
            draft = "" if current_value is None else current_value

        self.state = EditState.EDITING
        self.edit_cell = coord
        self.draft = draft
        self.error = None
        return True

    def set_draft(self, value: Any) -> None:
        if self.is_editing:
            self.draft = value
            self.error = None

    def cancel(self) -> None:
        """Discard the draft. No mutation, no history."""
        self._exit()

    def _exit(self) -> None:
        self.state = EditState.VIEWING
        self.edit_cell = None
        self.draft = None
        self.error = None

    # --- Commit ---

    def validate(self, column: Column | None) -> str | None:
        if not self.is_editing or column is None:
            return None
        return run_validators(column.validators, self.draft)

    def can_leave(self, column: Column | None) -> bool:
        """True when the current draft may be committed (clicking away)."""
        return self.validate(column) is None

    def commit(self, column: Column | None) -> CommitResult:
        """Validate and write the draft.

        A stale row key or a column that is gone/synthetic ends editing
        without touching the store.

        Returns:
            CommitResult; ok is False only on a validation failure
        """
        if not self.is_editing or self.edit_cell is None:
            return CommitResult(ok=True)

        coord = self.edit_cell
        index = self.store.index_of(coord.row_key)
        if index < 0 or column is None or column.is_synthetic:
            logger.debug("Commit skipped: cell %s no longer resolves", coord.key)
            self._exit()
            return CommitResult(ok=True)

        error = run_validators(column.validators, self.draft)
        if error:
            logger.debug("Commit rejected at %s: %s", coord.key, error)
            self.error = error
            return CommitResult(ok=False, error=error)

        self.history.snapshot_before_change(self.store.rows, f"Edit {coord.field}")
        row = RowLifecycleTracker.mark_updated(self.store[index])
        row[coord.field] = self.draft
        self.store.put(index, row)

        self._exit()
        return CommitResult(ok=True, changed=True)

    # --- Navigation ---

    def _try_enter_at(
        self,
        display_rows: Sequence[Row],
        columns: Sequence[Column],
        row_index: int,
        col_index: int,
    ) -> bool:
        coord = make_coord(display_rows, columns, row_index, col_index)
        if coord is None:
            return False
        column = columns[col_index]
        row = self.store.find(coord.row_key) or display_rows[row_index]
        return self.begin(coord, column, current_value=row.get(column.field))

    def tab(
        self,
        display_rows: Sequence[Row],
        columns: Sequence[Column],
        shift: bool = False,
        refresh: Callable[[], Sequence[Row]] | None = None,
    ) -> CommitResult:
        """Commit, then move the editor to the next (previous) editable cell.

        Scans the rest of the current row, then the next (previous) row from
        its first (last) column. At the grid boundary this is a plain commit.
        The scan starts from where the committed row sits after the commit,
        found by its key, so a re-sorted view is followed.

        Args:
            display_rows: Display rows before the commit
            columns: Effective columns
            shift: Move backwards (Shift+Tab)
            refresh: Returns the display rows as they are after the commit
        """
        if self.edit_cell is None:
            return CommitResult(ok=True)

        origin = self.edit_cell
        result = self.commit(_column_for(columns, origin.field))
        if not result.ok:
            return result

        if refresh is not None:
            display_rows = refresh()
        row_index = next(
            (i for i, r in enumerate(display_rows) if get_row_key(r) == origin.row_key), -1
        )
        col_index = next((i for i, c in enumerate(columns) if c.field == origin.field), -1)
        if row_index < 0 or col_index < 0:
            logger.debug("Tab: %s left the view, stopping after commit", origin.key)
            return result

        step = -1 if shift else 1
        col = col_index + step
        while 0 <= col < len(columns):
            if self._try_enter_at(display_rows, columns, row_index, col):
                return result
            col += step

        next_row = row_index + step
        if not 0 <= next_row < len(display_rows):
            return result

        col_range = range(len(columns) - 1, -1, -1) if shift else range(len(columns))
        for col in col_range:
            if self._try_enter_at(display_rows, columns, next_row, col):
                return result
        return result

    def handle_key(
        self,
        key: str,
        display_rows: Sequence[Row],
        columns: Sequence[Column],
        shift: bool = False,
        refresh: Callable[[], Sequence[Row]] | None = None,
    ) -> CommitResult | None:
        """Editing-mode keys: Enter commits, Escape cancels, Tab navigates.

        Returns:
            The commit result for Enter/Tab, None for any other key
        """
        if not self.is_editing or self.edit_cell is None:
            return None

        if key == "Escape":
            self.cancel()
            return None
        if key == "Tab":
            return self.tab(display_rows, columns, shift=shift, refresh=refresh)
        if key == "Enter":
            return self.commit(_column_for(columns, self.edit_cell.field))
        return None
