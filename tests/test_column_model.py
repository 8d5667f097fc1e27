"""Tests for column definitions and ColumnModel."""

import pytest

from gridengine.models.column import Column, ColumnConfigError, EditorConfig, FilterOption
from gridengine.models.constants import (
    DEFAULT_COL_WIDTH,
    MIN_COL_WIDTH,
    ROW_CHECK_FIELD,
    ROW_NUMBER_FIELD,
)
from gridengine.services.column_model import ColumnModel, sync_column_order


@pytest.fixture
def grouped_columns():
    return [
        {"field": "id", "headerName": "ID", "width": 60},
        {
            "field": "person",
            "headerName": "Person",
            "children": [
                {"field": "first", "headerName": "First"},
                {"field": "last", "headerName": "Last"},
            ],
        },
        {"field": "age", "headerName": "Age", "sortable": True},
    ]


def fields(columns):
    return [c.field for c in columns]


class TestColumnDefinitions:
    def test_from_dict_camel_case(self):
        column = Column.from_dict(
            {
                "field": "name",
                "headerName": "Name",
                "isTreeColumn": True,
                "editor": "text",
                "filterOptions": ["a", {"value": 1, "label": "One"}],
            }
        )
        assert column.header_name == "Name"
        assert column.is_tree_column
        assert column.editor == EditorConfig(type="text")
        assert column.filter_options == [FilterOption("a", "a"), FilterOption(1, "One")]

    def test_unknown_editor_type(self):
        with pytest.raises(ColumnConfigError):
            Column.from_dict({"field": "x", "editor": {"type": "spinner"}})

    def test_duplicate_fields_rejected(self):
        with pytest.raises(ColumnConfigError):
            ColumnModel([{"field": "a"}, {"field": "g", "children": [{"field": "a"}]}])

    def test_empty_field_rejected(self):
        with pytest.raises(ColumnConfigError):
            ColumnModel([{"headerName": "No field"}])

    def test_reserved_field_rejected(self):
        with pytest.raises(ColumnConfigError):
            ColumnModel([{"field": ROW_NUMBER_FIELD}])

    def test_config_error_is_value_error(self):
        assert issubclass(ColumnConfigError, ValueError)

    def test_is_editable(self):
        assert Column("a", editor=EditorConfig()).is_editable
        assert not Column("a").is_editable


class TestLeafAndEffective:
    def test_leaf_columns_flatten_groups(self, grouped_columns):
        model = ColumnModel(grouped_columns)
        assert fields(model.leaf_columns) == ["id", "first", "last", "age"]

    def test_synthetic_columns_injected(self, grouped_columns):
        """Row number comes before the checkbox."""
        model = ColumnModel(grouped_columns, show_row_number=True, show_check_box=True)
        assert fields(model.effective_columns)[:2] == [ROW_NUMBER_FIELD, ROW_CHECK_FIELD]
        rownum = model.effective_columns[0]
        assert rownum.header_name == "#"
        assert rownum.width == 50
        assert not rownum.sortable
        assert model.effective_columns[1].width == 32

    def test_hidden_columns_removed(self):
        model = ColumnModel([{"field": "a"}, {"field": "b", "hidden": True}])
        assert fields(model.effective_columns) == ["a"]
        assert fields(model.leaf_columns) == ["a", "b"]

    def test_tree_column(self):
        model = ColumnModel([{"field": "a"}, {"field": "name", "isTreeColumn": True}])
        assert model.tree_column.field == "name"
        assert ColumnModel([{"field": "a"}]).tree_column is None


class TestColumnOrder:
    def test_sync_keeps_survivors_and_appends(self):
        assert sync_column_order(None, ["a", "b"]) == ["a", "b"]
        assert sync_column_order(["c", "a", "b"], ["a", "b", "d"]) == ["a", "b", "d"]
        assert sync_column_order(["b", "a"], ["a", "b", "c"]) == ["b", "a", "c"]

    def test_move_column(self):
        model = ColumnModel([{"field": "a"}, {"field": "b"}, {"field": "c"}])
        assert model.move_column("c", "a")
        assert fields(model.effective_columns) == ["c", "a", "b"]
        assert model.move_column("c", "b")
        assert fields(model.effective_columns) == ["a", "b", "c"]

    def test_move_column_rejects_unknown_and_synthetic(self):
        model = ColumnModel([{"field": "a"}, {"field": "b"}], show_row_number=True)
        assert not model.move_column("a", "a")
        assert not model.move_column("zzz", "a")
        assert not model.move_column(ROW_NUMBER_FIELD, "a")

    def test_order_survives_set_columns(self):
        model = ColumnModel([{"field": "a"}, {"field": "b"}, {"field": "c"}])
        model.move_column("c", "a")
        model.set_columns([{"field": "a"}, {"field": "c"}, {"field": "d"}])
        assert model.column_order == ["c", "a", "d"]


class TestWidths:
    def test_flexible_share_of_container(self):
        model = ColumnModel(
            [{"field": "a", "width": 100}, {"field": "b"}, {"field": "c"}],
            show_row_number=True,
            container_width=450,
        )
        # 450 - 50 (row number) - 100 (fixed) = 300 over two flex columns
        assert model.resolve_widths() == [50, 100, 150, 150]
        assert model.flex_count == 2

    def test_default_width_without_container(self):
        model = ColumnModel([{"field": "a"}, {"field": "b", "width": 70}])
        assert model.resolve_widths() == [DEFAULT_COL_WIDTH, 70]

    def test_flex_width_never_below_minimum(self):
        model = ColumnModel([{"field": "a", "width": 500}, {"field": "b"}], container_width=300)
        assert model.resolve_widths() == [500, MIN_COL_WIDTH]

    def test_resize_override(self):
        model = ColumnModel([{"field": "a"}, {"field": "b", "width": 80}])
        assert model.resize_column("a", 10)
        assert model.resolve_widths()[0] == MIN_COL_WIDTH
        model.resize_column("a", 220)
        assert model.resolve_widths()[0] == 220

    def test_explicit_width_beats_override(self):
        model = ColumnModel([{"field": "b", "width": 80}])
        model.resize_column("b", 300)
        assert model.resolve_widths() == [80]

    def test_synthetic_not_resizable(self):
        model = ColumnModel([{"field": "a"}], show_check_box=True)
        assert not model.resize_column(ROW_CHECK_FIELD, 200)

    def test_overrides_pruned_on_set_columns(self):
        model = ColumnModel([{"field": "a"}, {"field": "b"}])
        model.resize_column("b", 200)
        model.set_columns([{"field": "a"}])
        assert model.width_overrides == {}

    def test_total_content_width(self):
        model = ColumnModel([{"field": "a", "width": 100}], container_width=400)
        assert model.total_content_width == 400
        model = ColumnModel([{"field": "a", "width": 100}, {"field": "b", "width": 120}])
        assert model.total_content_width == 220


class TestHeaderLayout:
    def test_ungrouped_layout(self):
        layout = ColumnModel([{"field": "a", "width": 50}, {"field": "b", "width": 70}]).header_layout()
        assert layout.depth == 1
        assert layout.levels == []
        assert layout.leaf_lefts == [0, 50]

    def test_group_spans_its_leaves(self, grouped_columns):
        model = ColumnModel(grouped_columns, show_row_number=True, container_width=None)
        layout = model.header_layout()

        assert layout.depth == 2
        [group] = layout.levels[0]
        assert group.label == "Person"
        # row number, id, then first/last
        assert group.start_leaf_index == 2
        assert group.leaf_span == 2
        assert group.left == 50 + 60
        assert group.width == 2 * DEFAULT_COL_WIDTH
        assert layout.leaf_grouped == {"id": False, "first": True, "last": True, "age": False}

    def test_group_follows_reorder(self, grouped_columns):
        """A group spans from its first to last visible leaf after reordering."""
        model = ColumnModel(grouped_columns)
        model.move_column("last", "id")
        layout = model.header_layout()
        [group] = layout.levels[0]
        assert fields(model.effective_columns) == ["last", "id", "first", "age"]
        assert group.start_leaf_index == 0
        assert group.leaf_span == 3

    def test_group_without_visible_leaves_skipped(self):
        model = ColumnModel(
            [{"field": "a"}, {"field": "g", "headerName": "G", "children": [{"field": "b", "hidden": True}]}]
        )
        layout = model.header_layout()
        assert layout.levels == []
        assert layout.depth == 1
