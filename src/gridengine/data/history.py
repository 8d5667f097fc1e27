"""Bounded undo/redo history of full row snapshots.

A HistorySnapshot captures a deep copy of the whole row collection before a
change, allowing undo/redo to restore previous states.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..debug_trace import logger
from ..models.constants import MAX_UNDO_DEPTH
from ..models.row import Row


def clone_rows(rows: Sequence[Row]) -> list[Row]:
    return copy.deepcopy(list(rows))


def rows_equal(a: Sequence[Row], b: Sequence[Row]) -> bool:
    """Field-wise equality of two row collections (order matters)."""
    if len(a) != len(b):
        return False
    return all(ra == rb for ra, rb in zip(a, b))


@dataclass
class HistorySnapshot:
    """Deep copy of the row collection at a point in time.

    Attributes:
        rows: Row dicts as they were before the change.
        description: Human-readable description of the change.
    """

    rows: list[Row] = field(default_factory=list)
    description: str = ""

    def __repr__(self) -> str:
        return f"HistorySnapshot({self.description!r}, {len(self.rows)} rows)"


class HistoryManager:
    """Two bounded stacks of snapshots.

    Usage:
        history.snapshot_before_change(store.rows, "Edit name")
        store.replace(...)

        restored = history.undo(store.rows)
        if restored is not None:
            store.replace(restored)
    """

    def __init__(self, capacity: int = MAX_UNDO_DEPTH):
        self.capacity = capacity
        self.undo_stack: list[HistorySnapshot] = []
        self.redo_stack: list[HistorySnapshot] = []

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def _push(self, stack: list[HistorySnapshot], snapshot: HistorySnapshot) -> None:
        stack.append(snapshot)
        # Oldest snapshots fall off the bottom
        while len(stack) > self.capacity:
            stack.pop(0)

    def snapshot_before_change(self, rows: Sequence[Row], description: str = "") -> None:
        """Record the current state before a mutation.

        Starts a new branch: the redo stack is cleared.
        """
        self._push(self.undo_stack, HistorySnapshot(clone_rows(rows), description))
        self.redo_stack.clear()

    def undo(self, current: Sequence[Row]) -> list[Row] | None:
        """Step back one snapshot.

        A top snapshot identical to the current state is discarded without
        restoring, so no-op entries cannot trap the user in a loop.

        Args:
            current: The rows as they are now

        Returns:
            Rows to restore, or None when nothing should change
        """
        return self._step(self.undo_stack, self.redo_stack, current, "undo")

    def redo(self, current: Sequence[Row]) -> list[Row] | None:
        return self._step(self.redo_stack, self.undo_stack, current, "redo")

    def _step(
        self,
        source: list[HistorySnapshot],
        target: list[HistorySnapshot],
        current: Sequence[Row],
        label: str,
    ) -> list[Row] | None:
        if not source:
            return None

        snapshot = source.pop()
        if rows_equal(snapshot.rows, current):
            logger.debug("%s: discarded snapshot identical to current state", label)
            return None

        self._push(target, HistorySnapshot(clone_rows(current), snapshot.description))
        return clone_rows(snapshot.rows)

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()
