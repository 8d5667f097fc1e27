"""Canonical row collection with synthetic identity fields.

Every row carries a ``_row_key`` assigned once and never regenerated while the
row dict lives. Keys are written onto the caller's dicts, so handing the same
records back through ``replace`` keeps their keys stable.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Iterator

from ..models.constants import ROW_KEY_FIELD, ROW_STATUS_FIELD
from ..models.row import Row, RowKey, RowStatus, get_row_key


def generate_key() -> RowKey:
    return uuid.uuid4().hex


class RowStore:
    """Ordered row collection addressed by internal key.

    Rows are treated as copy-on-write by the engine: mutators replace the
    dict at an index rather than editing it, so history snapshots and
    previously returned lists stay untouched.
    """

    def __init__(self, rows: Iterable[Row] | None = None):
        self._rows: list[Row] = []
        if rows is not None:
            self.replace(rows)

    # --- Identity ---

    @staticmethod
    def assign_key(row: Row) -> Row:
        """Give a row an internal key (and default status) if it lacks one.

        Idempotent: a row that already has a key keeps it.

        Args:
            row: Any dict-shaped record

        Returns:
            The same row object
        """
        if row.get(ROW_KEY_FIELD) is None:
            row[ROW_KEY_FIELD] = generate_key()
        if row.get(ROW_STATUS_FIELD) is None:
            row[ROW_STATUS_FIELD] = RowStatus.NONE
        return row

    @classmethod
    def attach_keys(cls, rows: Iterable[Row]) -> list[Row]:
        return [cls.assign_key(row) for row in rows]

    @staticmethod
    def get_key(row: Row) -> RowKey | None:
        return get_row_key(row)

    # --- Collection ---

    @property
    def rows(self) -> list[Row]:
        """Snapshot list of the current rows (shallow)."""
        return list(self._rows)

    def replace(self, rows: Iterable[Row]) -> None:
        self._rows = self.attach_keys(rows)

    def index_of(self, key: RowKey | None) -> int:
        """Store index of the row with this key, or -1."""
        if key is None:
            return -1
        for idx, row in enumerate(self._rows):
            if row.get(ROW_KEY_FIELD) == key:
                return idx
        return -1

    def find(self, key: RowKey | None) -> Row | None:
        idx = self.index_of(key)
        return self._rows[idx] if idx >= 0 else None

    def insert(self, index: int, row: Row) -> None:
        index = min(max(index, 0), len(self._rows))
        self._rows.insert(index, self.assign_key(row))

    def put(self, index: int, row: Row) -> None:
        """Replace the row at index with a new dict."""
        self._rows[index] = row

    def remove_at(self, index: int) -> Row:
        return self._rows.pop(index)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(list(self._rows))

    def __getitem__(self, index: int) -> Row:
        return self._rows[index]
