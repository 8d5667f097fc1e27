"""Headless editable data-grid engine.

The engine decides what a grid shows and how user input mutates its rows:
filtering, sorting, tree rows, paging, virtualization, selection, inline
editing, clipboard, undo/redo and insert/update/delete tracking. Painting is
left to whatever rendering layer embeds it.
"""

from .engine import GridEngine
from .models.column import Column, ColumnConfigError, EditorConfig, FilterOption
from .models.coords import CellCoord, SelectionRect, SortState
from .models.row import RowStatus, strip_synthetic_fields
from .services.edit_controller import CommitResult, EditState
from .services.export_service import build_export_matrix
from .services.tree_service import TreeManager
from .services.view_pipeline import PageInfo
from .settings import GridOptions, PaginationOptions

__all__ = [
    "CellCoord",
    "Column",
    "ColumnConfigError",
    "CommitResult",
    "EditState",
    "EditorConfig",
    "FilterOption",
    "GridEngine",
    "GridOptions",
    "PageInfo",
    "PaginationOptions",
    "RowStatus",
    "SelectionRect",
    "SortState",
    "TreeManager",
    "build_export_matrix",
    "strip_synthetic_fields",
]
