"""Tests for ClipboardCodec copy/paste."""

import pytest

from gridengine.data.row_store import RowStore
from gridengine.models.column import Column, EditorConfig, make_row_number_column
from gridengine.models.constants import ROW_STATUS_FIELD
from gridengine.models.coords import SelectionRect
from gridengine.models.row import RowStatus, get_status
from gridengine.services.clipboard import ClipboardCodec
from gridengine.services.selection import make_coord


@pytest.fixture
def columns():
    return [
        make_row_number_column(),
        Column("a", editor=EditorConfig()),
        Column("b"),  # read-only
        Column("c", editor=EditorConfig()),
    ]


@pytest.fixture
def rows():
    return RowStore.attach_keys(
        [
            {"a": "a0", "b": "b0", "c": None},
            {"a": "a1", "b": "b1", "c": "c1", ROW_STATUS_FIELD: RowStatus.INSERTED},
            {"a": "a2", "b": "b2", "c": "c2"},
        ]
    )


class TestCopy:
    def test_rect_as_tsv(self, rows, columns):
        text = ClipboardCodec.copy(SelectionRect(0, 1, 1, 3), rows, columns)
        assert text == "a0\tb0\t\na1\tb1\tc1"

    def test_row_number_column_writes_index(self, rows, columns):
        text = ClipboardCodec.copy(SelectionRect(1, 2, 0, 1), rows, columns)
        assert text == "2\ta1\n3\ta2"

    def test_no_rect(self, rows, columns):
        assert ClipboardCodec.copy(None, rows, columns) == ""


class TestParse:
    def test_crlf_and_trailing_newline(self):
        assert ClipboardCodec.parse("x\ty\r\nz\tw\r\n") == [["x", "y"], ["z", "w"]]

    def test_malformed_payloads(self):
        assert ClipboardCodec.parse("") is None
        assert ClipboardCodec.parse(None) is None
        assert ClipboardCodec.parse(b"bytes") is None


class TestPaste:
    def test_paste_block(self, rows, columns):
        anchor = make_coord(rows, columns, 0, 1)
        updated = ClipboardCodec.paste("X\tY\tZ", anchor, rows, columns, rows)
        # b is read-only and skipped
        assert (updated[0]["a"], updated[0]["b"], updated[0]["c"]) == ("X", "b0", "Z")
        assert get_status(updated[0]) == RowStatus.UPDATED
        # input rows untouched
        assert rows[0]["a"] == "a0"

    def test_rows_past_end_dropped(self, rows, columns):
        """Paste never creates rows."""
        anchor = make_coord(rows, columns, 2, 1)
        updated = ClipboardCodec.paste("p\nq\nr", anchor, rows, columns, rows)
        assert len(updated) == 3
        assert updated[2]["a"] == "p"

    def test_columns_past_end_dropped(self, rows, columns):
        anchor = make_coord(rows, columns, 0, 3)
        updated = ClipboardCodec.paste("1\t2\t3", anchor, rows, columns, rows)
        assert updated[0]["c"] == "1"
        assert len(updated[0]) == len(rows[0])

    def test_inserted_row_keeps_status(self, rows, columns):
        anchor = make_coord(rows, columns, 1, 1)
        updated = ClipboardCodec.paste("new", anchor, rows, columns, rows)
        assert get_status(updated[1]) == RowStatus.INSERTED

    def test_row_number_column_skipped(self, rows, columns):
        anchor = make_coord(rows, columns, 0, 0)
        updated = ClipboardCodec.paste("99\tA", anchor, rows, columns, rows)
        assert updated[0]["a"] == "A"
        assert "__row_num__" not in updated[0]

    def test_nothing_applicable(self, rows, columns):
        anchor = make_coord(rows, columns, 0, 2)
        assert ClipboardCodec.paste("only-b", anchor, rows, columns, rows) is None
        assert ClipboardCodec.paste("", anchor, rows, columns, rows) is None
        assert ClipboardCodec.paste("x", None, rows, columns, rows) is None

    def test_display_rows_map_to_store_rows(self, rows, columns):
        """Display order differs from store order."""
        display = [rows[2], rows[0]]
        anchor = make_coord(display, columns, 0, 1)
        updated = ClipboardCodec.paste("first\nsecond", anchor, display, columns, rows)
        assert updated[2]["a"] == "first"
        assert updated[0]["a"] == "second"
        assert updated[1]["a"] == "a1"
