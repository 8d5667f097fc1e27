"""Tests for HistoryManager undo/redo stacks."""

import pytest

from gridengine.data.history import HistoryManager, clone_rows, rows_equal
from gridengine.models.constants import MAX_UNDO_DEPTH


@pytest.fixture
def history():
    return HistoryManager()


def state(n):
    return [{"_row_key": "k", "value": n}]


class TestSnapshots:
    def test_clone_is_deep(self):
        rows = [{"tags": ["a"]}]
        cloned = clone_rows(rows)
        cloned[0]["tags"].append("b")
        assert rows[0]["tags"] == ["a"]

    def test_rows_equal(self):
        assert rows_equal(state(1), state(1))
        assert not rows_equal(state(1), state(2))
        assert not rows_equal(state(1), [])

    def test_snapshot_clears_redo(self, history):
        history.snapshot_before_change(state(0))
        assert history.undo(state(1)) == state(0)
        assert history.can_redo
        history.snapshot_before_change(state(0), "new branch")
        assert not history.can_redo

    def test_capacity_discards_oldest(self, history):
        for n in range(MAX_UNDO_DEPTH + 5):
            history.snapshot_before_change(state(n))
        assert len(history.undo_stack) == MAX_UNDO_DEPTH
        assert history.undo_stack[0].rows == state(5)

    def test_snapshot_is_isolated_from_later_mutation(self, history):
        rows = state(1)
        history.snapshot_before_change(rows)
        rows[0]["value"] = 99
        assert history.undo_stack[-1].rows == state(1)


class TestUndoRedo:
    def test_empty_stacks_are_noops(self, history):
        assert history.undo(state(0)) is None
        assert history.redo(state(0)) is None

    def test_undo_then_redo(self, history):
        history.snapshot_before_change(state(0), "Edit value")
        current = state(1)

        restored = history.undo(current)
        assert restored == state(0)
        assert history.redo_stack[-1].description == "Edit value"

        again = history.redo(restored)
        assert again == state(1)

    def test_identical_top_is_discarded(self, history):
        """A snapshot equal to the current state is dropped without restoring."""
        history.snapshot_before_change(state(0))
        history.snapshot_before_change(state(1))
        assert history.undo(state(1)) is None
        assert len(history.undo_stack) == 1
        assert not history.can_redo
        assert history.undo(state(1)) == state(0)

    @pytest.mark.parametrize("depth", [1, 5, MAX_UNDO_DEPTH])
    def test_undo_redo_round_trip(self, history, depth):
        """n undos followed by n redos return to the starting state."""
        current = state(0)
        for n in range(1, depth + 1):
            history.snapshot_before_change(current)
            current = state(n)
        final = current

        for _ in range(depth):
            current = history.undo(current)
        assert current == state(0)

        for _ in range(depth):
            current = history.redo(current)
        assert current == final

    def test_clear(self, history):
        history.snapshot_before_change(state(0))
        history.clear()
        assert not history.can_undo
        assert not history.can_redo
