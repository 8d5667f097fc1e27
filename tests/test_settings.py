"""Tests for GridOptions and PaginationOptions."""

import pytest

from gridengine.settings import GridOptions, PaginationOptions


class TestPaginationOptions:
    def test_defaults(self):
        options = PaginationOptions()
        assert options.mode == "none"
        assert options.type == "client"
        assert options.default_page_size == 15
        assert options.page_size_options == [15, 30, 50, 100]
        assert not options.is_server

    def test_invalid_mode_and_type(self):
        with pytest.raises(ValueError):
            PaginationOptions(mode="infinite")
        with pytest.raises(ValueError):
            PaginationOptions(type="cloud")

    def test_from_dict_camel_case(self):
        options = PaginationOptions.from_dict({"mode": "page", "type": "server", "defaultPageSize": 30})
        assert options.mode == "page"
        assert options.is_server
        assert options.default_page_size == 30


class TestGridOptions:
    def test_defaults(self):
        options = GridOptions()
        assert options.row_height == 32
        assert options.editable
        assert options.history_depth == 20
        assert options.overscan == 5
        assert options.container_width is None

    def test_from_dict(self):
        options = GridOptions.from_dict(
            {
                "rowHeight": 28,
                "showRowNumber": True,
                "show_check_box": True,
                "width": 800,
                "pagination": {"mode": "scroll"},
            }
        )
        assert options.row_height == 28
        assert options.show_row_number
        assert options.show_check_box
        assert options.container_width == 800
        assert options.pagination.mode == "scroll"

    def test_coerce(self):
        options = GridOptions(editable=False)
        assert GridOptions.coerce(options) is options
        assert GridOptions.coerce(None) == GridOptions()
        assert GridOptions.coerce({"editable": False}).editable is False
