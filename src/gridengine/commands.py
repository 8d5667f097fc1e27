"""Command objects dispatched into GridEngine.

A rendering layer translates input events into these and calls
``engine.dispatch(command)``; tests build them directly. Each command maps to
exactly one engine method of the same meaning.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import Any

from .models.row import Row, RowKey

# --- Cells ---


@dataclass(frozen=True)
class ClickCell:
    row_index: int
    col_index: int
    toggle: bool = False  # Ctrl/Cmd held
    extend: bool = False  # Shift held


@dataclass(frozen=True)
class DoubleClickCell:
    row_index: int
    col_index: int


@dataclass(frozen=True)
class KeyPress:
    """A key event on the grid (or the open editor)."""

    key: str
    shift: bool = False
    ctrl: bool = False


@dataclass(frozen=True)
class StartEditAt:
    row_key: RowKey
    field: str


@dataclass(frozen=True)
class SetDraft:
    value: Any


@dataclass(frozen=True)
class CommitEdit:
    pass


@dataclass(frozen=True)
class CancelEdit:
    pass


# --- History / clipboard ---


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


@dataclass(frozen=True)
class CopySelection:
    pass


@dataclass(frozen=True)
class Paste:
    text: Any


# --- Rows ---


@dataclass(frozen=True)
class AddRow:
    position: str = "last"  # first | last | index
    index: int | None = None
    row: Row | None = None


@dataclass(frozen=True)
class RemoveRow:
    position: str = "last"
    index: int | None = None


@dataclass(frozen=True)
class RemoveCheckedRows:
    pass


@dataclass(frozen=True)
class SetRowChecked:
    row_key: RowKey
    checked: bool = True


@dataclass(frozen=True)
class SetAllChecked:
    checked: bool = True


# --- View ---


@dataclass(frozen=True)
class ToggleSort:
    field: str


@dataclass(frozen=True)
class SetColumnFilter:
    field: str
    values: Collection[Any] | None = None


@dataclass(frozen=True)
class ToggleTreeRow:
    tree_id: Any


@dataclass(frozen=True)
class DropTreeRow:
    source_key: RowKey
    target_key: RowKey | None = None
    mode: str = "child"  # before | after | child


@dataclass(frozen=True)
class GotoPage:
    page: int


@dataclass(frozen=True)
class SetPageSize:
    page_size: int


@dataclass(frozen=True)
class Scroll:
    scroll_offset: float
    viewport_height: float


# --- Columns ---


@dataclass(frozen=True)
class MoveColumn:
    from_field: str
    to_field: str


@dataclass(frozen=True)
class ResizeColumn:
    field: str
    width: float
