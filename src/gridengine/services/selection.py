"""Cell selection state: active cell, anchor cell and selected-cell set.

Selected cells are tracked as ``"row_key::field"`` membership strings so a
renderer can test highlight state per cell in O(1) without walking the
rectangle.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models.column import Column
from ..models.coords import CellCoord, SelectionRect, cell_key, split_cell_key
from ..models.row import Row, RowKey, get_row_key


def make_coord(
    display_rows: Sequence[Row], columns: Sequence[Column], row_index: int, col_index: int
) -> CellCoord | None:
    """Build a coordinate from display indices, or None when out of range."""
    if not (0 <= row_index < len(display_rows)) or not (0 <= col_index < len(columns)):
        return None
    row_key = get_row_key(display_rows[row_index])
    if row_key is None:
        return None
    return CellCoord(
        row_key=row_key,
        field=columns[col_index].field,
        row_index=row_index,
        col_index=col_index,
    )


def rect_cell_keys(
    rect: SelectionRect, display_rows: Sequence[Row], columns: Sequence[Column]
) -> set[str]:
    """Membership strings for every in-range cell inside rect."""
    keys: set[str] = set()
    for r in range(rect.row_start, rect.row_end + 1):
        if not 0 <= r < len(display_rows):
            continue
        row_key = get_row_key(display_rows[r])
        for c in range(rect.col_start, rect.col_end + 1):
            if 0 <= c < len(columns):
                keys.add(cell_key(row_key, columns[c].field))
    return keys


class SelectionController:
    """Tracks what the user has selected.

    Click semantics:
        plain   active and anchor move to the cell; selection is that cell
        toggle  active moves; anchor is set only if absent; the cell's
                membership flips; the rectangle is left alone
        extend  rectangle from the anchor to the cell (inclusive), selection
                becomes every cell inside it; without an anchor this is a
                plain click
    """

    def __init__(self) -> None:
        self.active_cell: CellCoord | None = None
        self.anchor_cell: CellCoord | None = None
        self.selected_cells: set[str] = set()
        self.rect: SelectionRect | None = None

    def clear(self) -> None:
        self.active_cell = None
        self.anchor_cell = None
        self.selected_cells = set()
        self.rect = None

    # --- Clicks ---

    def click(
        self,
        row_index: int,
        col_index: int,
        display_rows: Sequence[Row],
        columns: Sequence[Column],
        *,
        toggle: bool = False,
        extend: bool = False,
    ) -> CellCoord | None:
        """Apply a cell click.

        Args:
            row_index: Display-row index of the clicked cell
            col_index: Effective-column index of the clicked cell
            display_rows: Current display rows
            columns: Current effective columns
            toggle: Ctrl/Cmd modifier held
            extend: Shift modifier held

        Returns:
            The clicked coordinate, or None when the indices do not resolve
        """
        clicked = make_coord(display_rows, columns, row_index, col_index)
        if clicked is None:
            return None

        if toggle:
            self.active_cell = clicked
            if self.anchor_cell is None:
                self.anchor_cell = clicked
            key = clicked.key
            if key in self.selected_cells:
                self.selected_cells.discard(key)
            else:
                self.selected_cells.add(key)
            return clicked

        if extend and self.anchor_cell is not None:
            anchor = self.anchor_cell
            rect = SelectionRect.between(anchor.row_index, anchor.col_index, row_index, col_index)
            self.active_cell = clicked
            self.rect = rect
            self.selected_cells = rect_cell_keys(rect, display_rows, columns)
            return clicked

        self.select_cell(clicked)
        return clicked

    def select_cell(self, coord: CellCoord) -> None:
        """Collapse the selection to a single cell."""
        self.active_cell = coord
        self.anchor_cell = coord
        self.selected_cells = {coord.key}
        self.rect = SelectionRect(coord.row_index, coord.row_index, coord.col_index, coord.col_index)

    # --- Queries ---

    def is_selected(self, row_key: RowKey, field: str) -> bool:
        return cell_key(row_key, field) in self.selected_cells

    def selected_row_keys(self) -> set[str]:
        return {split_cell_key(k)[0] for k in self.selected_cells}

    @property
    def cell_count(self) -> int:
        return len(self.selected_cells)
