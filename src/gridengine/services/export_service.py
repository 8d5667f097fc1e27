"""Export service: rows -> plain header/value matrix.

File formats (spreadsheet, CSV, PDF) are written by the caller; this module
only decides which columns and values leave the engine.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..models.column import Column, coerce_column, flatten_leaf_columns
from ..models.row import Row


@dataclass
class ExportMatrix:
    """Header labels, cell values and the leaf columns they came from."""

    header: list[str] = field(default_factory=list)
    data: list[list[Any]] = field(default_factory=list)
    leaf: list[Column] = field(default_factory=list)


def format_cell_for_export(value: Any, label_key: str = "label") -> Any:
    """Flatten a cell value for export.

    - None -> ""
    - list of option dicts -> their labels joined by ", "
    - list of scalars -> non-empty items joined by ", "
    - dict -> its label, or its JSON text
    """
    if value is None:
        return ""

    if isinstance(value, (list, tuple)):
        if not value:
            return ""
        parts = []
        for item in value:
            if isinstance(item, dict):
                parts.append(str(item.get(label_key) or ""))
            else:
                parts.append("" if item is None else str(item))
        return ", ".join(p for p in parts if p)

    if isinstance(value, dict):
        if label_key in value:
            return value[label_key]
        return json.dumps(value, default=str)

    return value


class ExportService:
    """Builds export matrices from columns and rows.

    All methods are static as the service is stateless.
    """

    @staticmethod
    def build_export_matrix(
        columns: Iterable[Column | dict[str, Any]], rows: Sequence[Row]
    ) -> ExportMatrix:
        """Leaf, non-synthetic columns and their formatted values.

        Args:
            columns: Column tree (groups are flattened to leaves)
            rows: Rows to export; engine-private fields are never read

        Returns:
            ExportMatrix with one header label per leaf and one value list per row
        """
        leaf = [c for c in flatten_leaf_columns(coerce_column(c) for c in columns) if not c.is_synthetic]
        header = [(c.header_name or c.field).strip() for c in leaf]
        data = [[format_cell_for_export(row.get(c.field)) for c in leaf] for row in rows]
        return ExportMatrix(header=header, data=data, leaf=leaf)


def build_export_matrix(columns: Iterable[Column | dict[str, Any]], rows: Sequence[Row]) -> ExportMatrix:
    return ExportService.build_export_matrix(columns, rows)
