"""Tests for RowLifecycleTracker status rules."""

from gridengine.data.lifecycle import RowLifecycleTracker
from gridengine.models.constants import ROW_STATUS_FIELD
from gridengine.models.row import RowStatus, get_status


def make_row(status):
    return {"name": "x", ROW_STATUS_FIELD: status}


class TestTransitions:
    def test_none_becomes_updated(self):
        row = make_row(RowStatus.NONE)
        updated = RowLifecycleTracker.mark_updated(row)
        assert get_status(updated) == RowStatus.UPDATED
        # Original dict untouched
        assert get_status(row) == RowStatus.NONE

    def test_inserted_and_deleted_not_promoted(self):
        """INSERTED and DELETED rows never turn into UPDATED."""
        for status in (RowStatus.INSERTED, RowStatus.DELETED):
            assert get_status(RowLifecycleTracker.mark_updated(make_row(status))) == status

    def test_updated_stays_updated(self):
        row = make_row(RowStatus.UPDATED)
        assert get_status(RowLifecycleTracker.mark_updated(row)) == RowStatus.UPDATED

    def test_missing_status_counts_as_none(self):
        assert get_status(RowLifecycleTracker.mark_updated({"a": 1})) == RowStatus.UPDATED

    def test_mark_inserted_and_deleted(self):
        assert get_status(RowLifecycleTracker.mark_inserted({})) == RowStatus.INSERTED
        assert get_status(RowLifecycleTracker.mark_deleted(make_row(RowStatus.UPDATED))) == RowStatus.DELETED

    def test_removes_physically_only_inserted(self):
        assert RowLifecycleTracker.removes_physically(make_row(RowStatus.INSERTED))
        assert not RowLifecycleTracker.removes_physically(make_row(RowStatus.NONE))
        assert not RowLifecycleTracker.removes_physically(make_row(RowStatus.UPDATED))


class TestViews:
    def test_filtered_views(self):
        rows = [
            make_row(RowStatus.NONE),
            make_row(RowStatus.INSERTED),
            make_row(RowStatus.UPDATED),
            make_row(RowStatus.DELETED),
        ]
        assert RowLifecycleTracker.inserted(rows) == [rows[1]]
        assert RowLifecycleTracker.updated(rows) == [rows[2]]
        assert RowLifecycleTracker.deleted(rows) == [rows[3]]
        assert RowLifecycleTracker.changed(rows) == rows[1:]

    def test_string_status_values_match(self):
        """Status codes loaded as plain strings still classify."""
        rows = [{ROW_STATUS_FIELD: "U"}, {ROW_STATUS_FIELD: "I"}]
        assert RowLifecycleTracker.updated(rows) == [rows[0]]
        assert RowLifecycleTracker.inserted(rows) == [rows[1]]
