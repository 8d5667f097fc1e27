"""Insert/Update/Delete status bookkeeping.

Pure transition rules used by the engine mutators:

- edit/paste:   NONE -> UPDATED (INSERTED and DELETED stay as they are)
- add_row:      any -> INSERTED
- remove_row:   INSERTED rows are dropped from the store,
                every other row becomes DELETED and stays until reset
"""

from __future__ import annotations

from collections.abc import Iterable

from ..models.constants import ROW_STATUS_FIELD
from ..models.row import Row, RowStatus, get_status

CHANGED_STATUSES = frozenset({RowStatus.INSERTED, RowStatus.UPDATED, RowStatus.DELETED})


class RowLifecycleTracker:
    """Status transitions and status-filtered views.

    All methods are static as the tracker is stateless.
    """

    @staticmethod
    def mark_updated(row: Row) -> Row:
        """Return a copy of row promoted to UPDATED when its status is NONE."""
        updated = dict(row)
        if get_status(row) == RowStatus.NONE:
            updated[ROW_STATUS_FIELD] = RowStatus.UPDATED
        return updated

    @staticmethod
    def mark_inserted(row: Row) -> Row:
        inserted = dict(row)
        inserted[ROW_STATUS_FIELD] = RowStatus.INSERTED
        return inserted

    @staticmethod
    def mark_deleted(row: Row) -> Row:
        deleted = dict(row)
        deleted[ROW_STATUS_FIELD] = RowStatus.DELETED
        return deleted

    @staticmethod
    def removes_physically(row: Row) -> bool:
        """True when deleting this row should drop it from the store."""
        return get_status(row) == RowStatus.INSERTED

    @staticmethod
    def is_deleted(row: Row) -> bool:
        return get_status(row) == RowStatus.DELETED

    # --- Views ---

    @staticmethod
    def inserted(rows: Iterable[Row]) -> list[Row]:
        return [r for r in rows if get_status(r) == RowStatus.INSERTED]

    @staticmethod
    def updated(rows: Iterable[Row]) -> list[Row]:
        return [r for r in rows if get_status(r) == RowStatus.UPDATED]

    @staticmethod
    def deleted(rows: Iterable[Row]) -> list[Row]:
        return [r for r in rows if get_status(r) == RowStatus.DELETED]

    @staticmethod
    def changed(rows: Iterable[Row]) -> list[Row]:
        return [r for r in rows if get_status(r) in CHANGED_STATUSES]
