"""Row model for the grid engine.

Rows are plain dicts of caller data plus a handful of engine-private synthetic
fields (identity, lifecycle status and tree bookkeeping). Helpers here read
those fields and strip them before rows leave the engine.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from .constants import (
    ROW_KEY_FIELD,
    ROW_STATUS_FIELD,
    SYNTHETIC_ROW_FIELDS,
    TREE_EXPANDED_FIELD,
    TREE_HAS_CHILDREN_FIELD,
    TREE_ID_FIELD,
    TREE_LEVEL_FIELD,
    TREE_PARENT_ID_FIELD,
)

Row = dict[str, Any]
RowKey = str


class RowStatus(str, Enum):
    """Lifecycle status of a row relative to the last load/reset."""

    NONE = ""
    INSERTED = "I"
    UPDATED = "U"
    DELETED = "D"


def get_row_key(row: Row) -> RowKey | None:
    """Read the synthetic identity field (None if not assigned yet)."""
    return row.get(ROW_KEY_FIELD)


def get_status(row: Row) -> RowStatus:
    """Read the row status, treating a missing field as NONE."""
    value = row.get(ROW_STATUS_FIELD)
    if value is None:
        return RowStatus.NONE
    return RowStatus(value)


# --- Tree field accessors ---


def tree_id(row: Row) -> Any:
    return row.get(TREE_ID_FIELD)


def tree_parent_id(row: Row) -> Any:
    return row.get(TREE_PARENT_ID_FIELD)


def tree_level(row: Row) -> int:
    return row.get(TREE_LEVEL_FIELD) or 0


def tree_has_children(row: Row) -> bool:
    return bool(row.get(TREE_HAS_CHILDREN_FIELD))


def tree_expanded(row: Row) -> bool:
    """A missing flag counts as expanded."""
    return row.get(TREE_EXPANDED_FIELD) is not False


# --- Export ---


def strip_synthetic_fields(rows: Iterable[Row]) -> list[Row]:
    """Return copies of rows without engine-private fields.

    Use before handing rows to any external export format.

    Args:
        rows: Rows as held by the engine

    Returns:
        New list of plain field maps
    """
    return [{k: v for k, v in row.items() if k not in SYNTHETIC_ROW_FIELDS} for row in rows]
