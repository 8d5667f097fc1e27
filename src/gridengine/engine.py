"""Headless grid engine.

GridEngine owns one grid's state (rows, columns, view settings, selection,
edit state and history) and is the only place the services are wired
together. A rendering layer reads display rows and effective columns from it
and feeds user input back as method calls or command objects.

Usage:
    engine = GridEngine(columns, rows, GridOptions(show_row_number=True))
    engine.add_observer(lambda eng, reason: redraw())

    engine.click_cell(0, 1)
    engine.key_press("x")          # opens the editor with draft "x"
    engine.key_press("Enter")      # commits

    engine.undo()
    changed = engine.get_changed_rows()
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Generator, Iterable
from contextlib import contextmanager
from typing import Any

from . import commands as cmd
from .data.history import HistoryManager
from .data.lifecycle import RowLifecycleTracker
from .data.row_store import RowStore
from .debug_trace import logger, perf_timer
from .filters import search_filter_options
from .models.column import Column, FilterOption
from .models.constants import ROW_KEY_FIELD, ROW_NUMBER_FIELD
from .models.coords import CellCoord, SortState
from .models.formatters import format_value
from .models.row import Row, RowKey, get_row_key
from .services.clipboard import ClipboardCodec
from .services.column_model import ColumnModel, HeaderLayout
from .services.edit_controller import CommitResult, EditController, key_starts_edit
from .services.selection import SelectionController, make_coord
from .services.tree_service import TreeManager
from .services.view_pipeline import (
    PageInfo,
    ViewPipeline,
    ViewResult,
    ViewState,
    distinct_options,
    filter_rows,
    next_sort_state,
)
from .services.virtual_window import VirtualWindow, WindowRange
from .settings import GridOptions, PaginationOptions

Observer = Callable[["GridEngine", str], None]

ROW_POSITIONS = ("first", "last", "index")


class GridEngine:
    """Central grid state with undo/redo and observer notification.

    Every mutating operation snapshots history first, writes the RowStore,
    drops the cached view and notifies observers. Query methods return lists
    that are snapshots: the next mutation may invalidate them.
    """

    def __init__(
        self,
        columns: Iterable[Column | dict] = (),
        rows: Iterable[Row] | None = None,
        options: GridOptions | dict[str, Any] | None = None,
    ):
        # Observer callbacks - called with (engine, reason)
        self._observers: list[Observer] = []

        # Current edit session description (for nested check)
        self._session: str | None = None

        self.initialize(columns, rows, options)

    def initialize(
        self,
        columns: Iterable[Column | dict],
        rows: Iterable[Row] | None = None,
        options: GridOptions | dict[str, Any] | None = None,
    ) -> None:
        """(Re)build all grid state. Observers are kept.

        Raises:
            ColumnConfigError: If the column definitions are unusable
            ValueError: If the options are invalid
        """
        self.options = GridOptions.coerce(options)

        self.columns = ColumnModel(
            columns,
            show_row_number=self.options.show_row_number,
            show_check_box=self.options.show_check_box,
            container_width=self.options.container_width,
        )
        self.store = RowStore(rows)
        self.history = HistoryManager(capacity=self.options.history_depth)
        self.selection = SelectionController()
        self.editor = EditController(self.store, self.history, editable=self.options.editable)
        self.window = VirtualWindow(self.options.row_height, self.options.overscan)

        # View state
        self.sort_state: SortState | None = None
        self.column_filters: dict[str, list[Any]] = {}
        self.page = 1
        self.page_size = self.options.pagination.default_page_size
        self.total_count: int | None = None  # server paging only
        self.checked_keys: set[RowKey] = set()

        # Last viewport metrics
        self.scroll_offset: float = 0
        self.viewport_height: float = 0

        self._view: ViewResult | None = None
        self._changed("Initialize")

    # --- Observers ---

    def add_observer(self, callback: Observer) -> None:
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Observer) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify_observers(self, reason: str) -> None:
        for callback in list(self._observers):
            try:
                callback(self, reason)
            except Exception:
                # One observer's error must not break the others
                logger.exception("Observer %r failed on %r", callback, reason)

    def _changed(self, reason: str) -> None:
        """Drop the cached view and notify, unless a session defers it."""
        self._view = None
        if self._session is None:
            self._notify_observers(reason)

    @contextmanager
    def edit_session(self, description: str = "") -> Generator[GridEngine, None, None]:
        """Group several operations into one observer notification.

        Each operation inside still records its own history entry.

        Args:
            description: Reason passed to observers on exit

        Yields:
            The engine

        Raises:
            RuntimeError: When sessions are nested
        """
        if self._session is not None:
            raise RuntimeError("Cannot nest edit_session calls")

        self._session = description
        try:
            yield self
        finally:
            self._session = None
            self._changed(description)

    # --- View ---

    @property
    def pagination(self) -> PaginationOptions:
        return self.options.pagination

    def _view_state(self) -> ViewState:
        pag = self.options.pagination
        return ViewState(
            columns=self.columns.effective_columns,
            column_filters=self.column_filters,
            enable_header_filter=self.options.enable_header_filter,
            sort_state=self.sort_state,
            tree_enabled=self.columns.tree_column is not None,
            pagination_mode=pag.mode,
            pagination_type=pag.type,
            page=self.page,
            page_size=self.page_size,
            total_count=self.total_count if pag.is_server else None,
        )

    def _view_result(self) -> ViewResult:
        if self._view is None:
            with perf_timer("display_rows", row_count=len(self.store)):
                self._view = ViewPipeline.run(self.store.rows, self._view_state())
        return self._view

    def _refreshed_display_rows(self) -> list[Row]:
        """Display rows recomputed after a write the cache has not seen yet."""
        self._view = None
        return self._view_result().display_rows

    @property
    def display_rows(self) -> list[Row]:
        """Filtered, sorted, tree-visible, paginated rows."""
        return list(self._view_result().display_rows)

    @property
    def effective_columns(self) -> list[Column]:
        return self.columns.effective_columns

    @property
    def leaf_columns(self) -> list[Column]:
        return self.columns.leaf_columns

    def column_widths(self) -> list[float]:
        return self.columns.resolve_widths()

    def header_layout(self) -> HeaderLayout:
        return self.columns.header_layout()

    def filtered_rows(self) -> list[Row]:
        """Non-deleted rows passing the header filters, in store order."""
        return filter_rows(
            self.store.rows,
            self.column_filters,
            self.columns.effective_columns,
            self.options.enable_header_filter,
        )

    def display_value(self, row_index: int, field: str) -> Any:
        """Formatted value of a display cell (row number for the # column)."""
        rows = self._view_result().display_rows
        if not 0 <= row_index < len(rows):
            return None
        if field == ROW_NUMBER_FIELD:
            return row_index + 1
        column = self.columns.get(field)
        value = rows[row_index].get(field)
        if column is None:
            return value
        return format_value(column, value)

    def _resolve_cell(self, row_key: RowKey | None, field: str) -> CellCoord | None:
        """Fresh coordinate for a key/field pair against the current view."""
        if row_key is None:
            return None
        rows = self._view_result().display_rows
        row_index = next((i for i, r in enumerate(rows) if get_row_key(r) == row_key), -1)
        col_index = self.columns.index_of(field)
        if row_index < 0 or col_index < 0:
            return None
        return CellCoord(row_key=row_key, field=field, row_index=row_index, col_index=col_index)

    # --- Virtualization / paging ---

    def visible_window(
        self, scroll_offset: float | None = None, viewport_height: float | None = None
    ) -> WindowRange:
        """Display-row range to materialize (last scroll metrics by default)."""
        offset = self.scroll_offset if scroll_offset is None else scroll_offset
        height = self.viewport_height if viewport_height is None else viewport_height
        return self.window.compute(len(self._view_result().display_rows), offset, height)

    def scroll(self, scroll_offset: float, viewport_height: float) -> WindowRange:
        """Record viewport metrics; in scroll paging, load the next page at the bottom."""
        self.scroll_offset = max(0, scroll_offset)
        self.viewport_height = max(0, viewport_height)

        if self.pagination.mode == "scroll" and self.viewport_height > 0:
            total = len(self._view_result().display_rows)
            if self.window.at_bottom(total, self.scroll_offset, self.viewport_height):
                info = self.get_page_info()
                if info.current_page < info.page_count:
                    self.goto_page(info.current_page + 1)

        return self.visible_window()

    def get_page_info(self) -> PageInfo:
        return self._view_result().page_info

    def goto_page(self, page: int) -> bool:
        """Move to a page (clamped). Clears selection and editing.

        Returns:
            True if the page changed
        """
        if self.pagination.mode == "none":
            return False

        info = self.get_page_info()
        target = min(max(page, 1), info.page_count)
        if target == info.current_page:
            return False

        self.page = target
        self._clear_selection_state()
        self._changed(f"Go to page {target}")
        return True

    def set_page_size(self, page_size: int) -> bool:
        """Change the page size and return to page 1."""
        if self.pagination.mode == "none":
            return False

        self.page_size = max(1, int(page_size))
        self.page = 1
        self._clear_selection_state()
        self._changed(f"Page size {self.page_size}")
        return True

    def set_total_count(self, total_count: int | None) -> None:
        """Total row count reported by the server (server paging)."""
        self.total_count = None if total_count is None else max(0, total_count)
        self._changed("Total count")

    # --- Sort / filter ---

    def toggle_sort(self, field: str) -> SortState | None:
        """Header click: advance the sort cycle for a sortable column."""
        column = self.columns.get(field)
        if column is None or column.is_synthetic or not column.sortable:
            return self.sort_state

        self.sort_state = next_sort_state(self.sort_state, field)
        self._changed(f"Sort {field}")
        return self.sort_state

    def set_column_filter(self, field: str, values: Collection[Any] | None) -> None:
        """Set the selected-value set of a column filter (empty clears it)."""
        if values:
            self.column_filters[field] = list(values)
        else:
            self.column_filters.pop(field, None)
        self._changed(f"Filter {field}")

    def filter_options(self, field: str, search: str = "", mode: str = "contains") -> list[FilterOption]:
        """Options for a column's filter list, narrowed by search text.

        Uses the column's configured options, else the distinct values of
        the non-deleted rows.
        """
        column = self.columns.get(field)
        if column is None:
            return []
        if column.filter_options is not None:
            options = list(column.filter_options)
        else:
            options = distinct_options(filter_rows(self.store.rows), field)
        if search:
            return search_filter_options(options, search, mode)
        return options

    # --- Selection ---

    def _clear_selection_state(self) -> None:
        self.selection.clear()
        self.editor.cancel()

    def click_cell(
        self, row_index: int, col_index: int, toggle: bool = False, extend: bool = False
    ) -> CellCoord | None:
        """Apply a cell click.

        While editing, clicking another cell commits first; an invalid draft
        refuses the move and leaves everything as it was.

        Returns:
            The clicked coordinate, or None when refused or out of range
        """
        edit_cell = self.editor.edit_cell
        if edit_cell is not None and (edit_cell.row_index, edit_cell.col_index) != (row_index, col_index):
            column = self.columns.get(edit_cell.field)
            if not self.editor.can_leave(column):
                logger.debug("Click refused: invalid draft at %s", edit_cell.key)
                return None
            self.editor.commit(column)

        coord = self.selection.click(
            row_index,
            col_index,
            self._view_result().display_rows,
            self.columns.effective_columns,
            toggle=toggle,
            extend=extend,
        )
        self._changed("Select")
        return coord

    def get_active_cell(self) -> CellCoord | None:
        return self.selection.active_cell

    # --- Editing ---

    def _begin_edit(self, coord: CellCoord, initial_draft: Any = None) -> bool:
        column = self.columns.get(coord.field)
        row = self.store.find(coord.row_key)
        if row is None:
            return False
        if not self.editor.begin(coord, column, row.get(coord.field), initial_draft):
            return False
        self.selection.active_cell = coord
        self._notify_observers("Begin edit")
        return True

    def double_click_cell(self, row_index: int, col_index: int) -> bool:
        coord = make_coord(
            self._view_result().display_rows, self.columns.effective_columns, row_index, col_index
        )
        if coord is None:
            return False
        return self._begin_edit(coord)

    def start_edit_at(self, row_key: RowKey, field: str) -> bool:
        """Open the editor on a cell by identity (no-op if it is not displayed)."""
        coord = self._resolve_cell(row_key, field)
        if coord is None:
            return False
        return self._begin_edit(coord)

    def set_draft(self, value: Any) -> None:
        self.editor.set_draft(value)

    def commit_edit(self) -> CommitResult:
        cell = self.editor.edit_cell
        if cell is None:
            return CommitResult(ok=True)
        result = self.editor.commit(self.columns.get(cell.field))
        self._changed("Edit cell" if result.changed else "Commit")
        return result

    def cancel_edit(self) -> None:
        if self.editor.is_editing:
            self.editor.cancel()
            self._notify_observers("Cancel edit")

    @property
    def is_editing(self) -> bool:
        return self.editor.is_editing

    def key_press(self, key: str, shift: bool = False, ctrl: bool = False) -> CommitResult | None:
        """Keyboard input on the grid.

        Editing:  Enter commits, Escape cancels, Tab/Shift+Tab move.
        Viewing:  Ctrl+Z undo (Ctrl+Shift+Z redo), Ctrl+Y redo; a printable
                  key or Enter opens the editor on the active cell.
        """
        if self.editor.is_editing:
            # Indices may be stale after a re-sort; the key is what counts
            edit_cell = self.editor.edit_cell
            fresh = self._resolve_cell(edit_cell.row_key, edit_cell.field) if edit_cell else None
            if fresh is not None:
                self.editor.edit_cell = fresh
            result = self.editor.handle_key(
                key,
                self._view_result().display_rows,
                self.columns.effective_columns,
                shift=shift,
                refresh=self._refreshed_display_rows,
            )
            if self.editor.edit_cell is not None:
                self.selection.active_cell = self.editor.edit_cell
            self._changed(f"Key {key}")
            return result

        if ctrl:
            lowered = key.lower()
            if lowered == "z" and not shift:
                self.undo()
            elif lowered == "y" or (lowered == "z" and shift):
                self.redo()
            return None

        active = self.selection.active_cell
        if active is None or not key_starts_edit(key):
            return None

        coord = self._resolve_cell(active.row_key, active.field)
        if coord is None:
            return None
        if key == "Enter":
            row = self.store.find(coord.row_key) or {}
            value = row.get(coord.field)
            self._begin_edit(coord, "" if value is None else str(value))
        else:
            self._begin_edit(coord, key)
        return None

    # --- History ---

    def undo(self) -> bool:
        """Restore the previous snapshot, dropping selection and editing.

        Returns:
            True if rows changed
        """
        restored = self.history.undo(self.store.rows)
        if restored is None:
            return False
        self._clear_selection_state()
        self.store.replace(restored)
        self._changed("Undo")
        return True

    def redo(self) -> bool:
        restored = self.history.redo(self.store.rows)
        if restored is None:
            return False
        self._clear_selection_state()
        self.store.replace(restored)
        self._changed("Redo")
        return True

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # --- Clipboard ---

    def copy_selection(self) -> str:
        """TSV text of the selection rectangle ("" without one)."""
        view = self._view_result()
        return ClipboardCodec.copy(self.selection.rect, view.display_rows, self.columns.effective_columns)

    def paste(self, text: Any) -> bool:
        """Paste clipboard text at the active cell.

        Returns:
            True if any row changed
        """
        if self.editor.is_editing or self.selection.active_cell is None:
            return False

        active = self.selection.active_cell
        anchor = self._resolve_cell(active.row_key, active.field)
        if anchor is None:
            return False

        updated = ClipboardCodec.paste(
            text,
            anchor,
            self._view_result().display_rows,
            self.columns.effective_columns,
            self.store.rows,
        )
        if updated is None:
            return False

        self.history.snapshot_before_change(self.store.rows, "Paste")
        self.store.replace(updated)
        self._changed("Paste")
        return True

    # --- Rows ---

    def replace_rows(self, rows: Iterable[Row]) -> None:
        """Swap the row collection. Rows that already carry a key keep it."""
        self.store.replace(rows)
        present = {get_row_key(r) for r in self.store}
        self.checked_keys &= present
        self._changed("Replace rows")

    def get_rows(self) -> list[Row]:
        return self.store.rows

    def add_row(self, position: str = "last", index: int | None = None, row: Row | None = None) -> RowKey:
        """Insert a new INSERTED row.

        Args:
            position: first, last or index
            index: Store index for position "index" (clamped); defaults to
                the active row's store index, else the end
            row: Initial field values

        Returns:
            The new row's key
        """
        if position not in ROW_POSITIONS:
            position = "last"

        insert_at = len(self.store)
        if position == "first":
            insert_at = 0
        elif position == "index":
            if index is not None:
                insert_at = min(max(index, 0), len(self.store))
            elif self.selection.active_cell is not None:
                found = self.store.index_of(self.selection.active_cell.row_key)
                insert_at = found if found >= 0 else len(self.store)

        self.history.snapshot_before_change(self.store.rows, "Add row")
        # A copied row must not bring its key along
        values = {k: v for k, v in (row or {}).items() if k != ROW_KEY_FIELD}
        new_row = RowLifecycleTracker.mark_inserted(values)
        self.store.insert(insert_at, new_row)

        self._clear_selection_state()
        self._changed("Add row")
        return get_row_key(new_row)

    def _remove_target(self, position: str, index: int | None) -> RowKey | None:
        filtered = self.filtered_rows()
        if not filtered:
            return None
        if position == "first":
            return get_row_key(filtered[0])
        if position == "index":
            if index is not None:
                return get_row_key(filtered[index]) if 0 <= index < len(filtered) else None
            active = self.selection.active_cell
            if active is not None:
                keys = {get_row_key(r) for r in filtered}
                return active.row_key if active.row_key in keys else None
        return get_row_key(filtered[-1])

    def remove_row(self, position: str = "last", index: int | None = None) -> bool:
        """Delete one row chosen among the non-deleted, filtered rows.

        INSERTED rows leave the store; others become DELETED.

        Args:
            position: first, last or index
            index: Position within the filtered rows for "index"; defaults
                to the active row (no-op if it is no longer listed), else the
                last row
        """
        key = self._remove_target(position, index)
        store_index = self.store.index_of(key)
        if store_index < 0:
            return False

        self.history.snapshot_before_change(self.store.rows, "Remove row")
        row = self.store[store_index]
        if RowLifecycleTracker.removes_physically(row):
            self.store.remove_at(store_index)
        else:
            self.store.put(store_index, RowLifecycleTracker.mark_deleted(row))
        self.checked_keys.discard(key)

        self._clear_selection_state()
        self._changed("Remove row")
        return True

    def remove_checked_rows(self) -> int:
        """Delete every checked row. Returns how many were affected."""
        if not self.checked_keys:
            return 0

        self.history.snapshot_before_change(self.store.rows, "Remove checked rows")
        remaining: list[Row] = []
        affected = 0
        for row in self.store.rows:
            if get_row_key(row) not in self.checked_keys:
                remaining.append(row)
                continue
            affected += 1
            if not RowLifecycleTracker.removes_physically(row):
                remaining.append(RowLifecycleTracker.mark_deleted(row))
        self.store.replace(remaining)

        self.checked_keys = set()
        self._clear_selection_state()
        self._changed("Remove checked rows")
        return affected

    def reset_grid(self, rows: Iterable[Row] | None = None) -> None:
        """Load rows as a clean baseline: history, checks and selection are cleared."""
        self.store.replace(rows if rows is not None else [])
        self.history.clear()
        self.checked_keys = set()
        self._clear_selection_state()
        self._changed("Reset")

    # --- Status views ---

    def get_inserted_rows(self) -> list[Row]:
        return RowLifecycleTracker.inserted(self.store)

    def get_updated_rows(self) -> list[Row]:
        return RowLifecycleTracker.updated(self.store)

    def get_deleted_rows(self) -> list[Row]:
        return RowLifecycleTracker.deleted(self.store)

    def get_changed_rows(self) -> list[Row]:
        return RowLifecycleTracker.changed(self.store)

    def get_checked_rows(self) -> list[Row]:
        return [r for r in self.store if get_row_key(r) in self.checked_keys]

    def get_selected_rows(self) -> list[Row]:
        keys = self.selection.selected_row_keys()
        return [r for r in self.store if get_row_key(r) in keys]

    def get_focused_rows(self) -> list[Row]:
        active = self.selection.active_cell
        if active is None:
            return []
        return [r for r in self.store if get_row_key(r) == active.row_key]

    # --- Checkboxes ---

    def set_row_checked(self, row_key: RowKey, checked: bool = True) -> bool:
        if self.store.index_of(row_key) < 0:
            return False
        if checked:
            self.checked_keys.add(row_key)
        else:
            self.checked_keys.discard(row_key)
        self._changed("Check row")
        return True

    def set_all_checked(self, checked: bool = True) -> None:
        """Header checkbox: check or uncheck every display row."""
        keys = {get_row_key(r) for r in self._view_result().display_rows}
        if checked:
            self.checked_keys |= keys
        else:
            self.checked_keys -= keys
        self._changed("Check all")

    @property
    def all_checked(self) -> bool:
        keys = [get_row_key(r) for r in self._view_result().display_rows]
        return bool(keys) and all(k in self.checked_keys for k in keys)

    # --- Tree ---

    def toggle_tree_row(self, tree_id: Any) -> bool:
        """Expand/collapse a tree node. No-op for leaves and unknown ids."""
        updated = TreeManager.toggle_row(self.store.rows, tree_id)
        if updated is None:
            return False
        self.history.snapshot_before_change(self.store.rows, "Toggle tree row")
        self.store.replace(updated)
        self._changed("Toggle tree row")
        return True

    def drop_tree_row(self, source_key: RowKey, target_key: RowKey | None, mode: str = "child") -> bool:
        """Drag-and-drop a node (with its subtree). Rejected drops change nothing."""
        if self.columns.tree_column is None:
            return False
        updated = TreeManager.reparent(self.store.rows, source_key, target_key, mode)
        if updated is None:
            return False
        self.history.snapshot_before_change(self.store.rows, "Move tree row")
        self.store.replace(updated)
        self._clear_selection_state()
        self._changed("Move tree row")
        return True

    # --- Columns ---

    def set_columns(self, columns: Iterable[Column | dict]) -> None:
        """Replace column definitions; filters and sort on vanished fields are dropped.

        Raises:
            ColumnConfigError: If the definitions are unusable
        """
        self.columns.set_columns(columns)
        present = set(self.columns.column_order)
        self.column_filters = {f: v for f, v in self.column_filters.items() if f in present}
        if self.sort_state is not None and self.sort_state.field not in present:
            self.sort_state = None
        self._clear_selection_state()
        self._changed("Set columns")

    def move_column(self, from_field: str, to_field: str) -> bool:
        if not self.options.enable_column_reorder:
            return False
        if not self.columns.move_column(from_field, to_field):
            return False
        self._clear_selection_state()
        self._changed("Move column")
        return True

    def resize_column(self, field: str, width: float) -> bool:
        if not self.options.enable_column_resize:
            return False
        if not self.columns.resize_column(field, width):
            return False
        self._changed("Resize column")
        return True

    # --- Commands ---

    def dispatch(self, command: Any) -> Any:
        """Run a command object from gridengine.commands.

        Returns:
            Whatever the matching engine method returns

        Raises:
            TypeError: For an unknown command type
        """
        handler = _COMMAND_HANDLERS.get(type(command))
        if handler is None:
            raise TypeError(f"Unknown grid command: {type(command).__name__}")
        return handler(self, command)


_COMMAND_HANDLERS: dict[type, Callable[[GridEngine, Any], Any]] = {
    cmd.ClickCell: lambda e, c: e.click_cell(c.row_index, c.col_index, c.toggle, c.extend),
    cmd.DoubleClickCell: lambda e, c: e.double_click_cell(c.row_index, c.col_index),
    cmd.KeyPress: lambda e, c: e.key_press(c.key, c.shift, c.ctrl),
    cmd.StartEditAt: lambda e, c: e.start_edit_at(c.row_key, c.field),
    cmd.SetDraft: lambda e, c: e.set_draft(c.value),
    cmd.CommitEdit: lambda e, c: e.commit_edit(),
    cmd.CancelEdit: lambda e, c: e.cancel_edit(),
    cmd.Undo: lambda e, c: e.undo(),
    cmd.Redo: lambda e, c: e.redo(),
    cmd.CopySelection: lambda e, c: e.copy_selection(),
    cmd.Paste: lambda e, c: e.paste(c.text),
    cmd.AddRow: lambda e, c: e.add_row(c.position, c.index, c.row),
    cmd.RemoveRow: lambda e, c: e.remove_row(c.position, c.index),
    cmd.RemoveCheckedRows: lambda e, c: e.remove_checked_rows(),
    cmd.SetRowChecked: lambda e, c: e.set_row_checked(c.row_key, c.checked),
    cmd.SetAllChecked: lambda e, c: e.set_all_checked(c.checked),
    cmd.ToggleSort: lambda e, c: e.toggle_sort(c.field),
    cmd.SetColumnFilter: lambda e, c: e.set_column_filter(c.field, c.values),
    cmd.ToggleTreeRow: lambda e, c: e.toggle_tree_row(c.tree_id),
    cmd.DropTreeRow: lambda e, c: e.drop_tree_row(c.source_key, c.target_key, c.mode),
    cmd.GotoPage: lambda e, c: e.goto_page(c.page),
    cmd.SetPageSize: lambda e, c: e.set_page_size(c.page_size),
    cmd.Scroll: lambda e, c: e.scroll(c.scroll_offset, c.viewport_height),
    cmd.MoveColumn: lambda e, c: e.move_column(c.from_field, c.to_field),
    cmd.ResizeColumn: lambda e, c: e.resize_column(c.field, c.width),
}
