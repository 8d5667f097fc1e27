"""Service layer for grid logic.

This package contains the state machines and algorithms the GridEngine
coordinates. Services are independent of any rendering layer and operate on
row dicts held by a RowStore.

Services:
- ColumnModel: Leaf/effective columns, drag order, widths, group headers
- TreeManager: Flatten/unflatten, expand/collapse, drag-drop reparenting
- ViewPipeline: filter -> sort -> tree visibility -> paginate
- VirtualWindow: Materialized row range for a scroll position
- SelectionController: Active/anchor cell and selected-cell set
- EditController: Inline edit state machine with validation
- ClipboardCodec: TSV copy and paste
- ExportService: Header/value matrix for external export formats

Mutating services snapshot history before writing. Engine mutations should
be made within a GridEngine.edit_session() context which handles observer
notification.
"""

from .clipboard import ClipboardCodec
from .column_model import ColumnModel, HeaderGroupCell, HeaderLayout
from .edit_controller import CommitResult, EditController, EditState
from .export_service import ExportMatrix, ExportService, build_export_matrix
from .selection import SelectionController
from .tree_service import TreeManager
from .view_pipeline import PageInfo, ViewPipeline, ViewState
from .virtual_window import VirtualWindow, WindowRange

__all__ = [
    "ClipboardCodec",
    "ColumnModel",
    "CommitResult",
    "EditController",
    "EditState",
    "ExportMatrix",
    "ExportService",
    "HeaderGroupCell",
    "HeaderLayout",
    "PageInfo",
    "SelectionController",
    "TreeManager",
    "ViewPipeline",
    "ViewState",
    "VirtualWindow",
    "WindowRange",
    "build_export_matrix",
]
