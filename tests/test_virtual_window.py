"""Tests for VirtualWindow range computation."""

import pytest

from gridengine.services.virtual_window import VirtualWindow


@pytest.fixture
def window():
    return VirtualWindow(row_height=32, overscan=5)


class TestCompute:
    def test_top_of_list(self, window):
        rng = window.compute(total=1000, scroll_offset=0, viewport_height=320)
        assert (rng.start, rng.end) == (0, 15)
        assert rng.offset_top == 0
        assert rng.total_height == 32000

    def test_scrolled(self, window):
        # first visible row 100, minus 5 overscan
        rng = window.compute(total=1000, scroll_offset=3200, viewport_height=320)
        assert rng.start == 95
        assert rng.end == 95 + 10 + 5
        assert rng.offset_top == 95 * 32
        assert 100 in rng
        assert rng.count == 15

    def test_partial_row_rounds_up(self, window):
        rng = window.compute(total=1000, scroll_offset=0, viewport_height=330)
        assert rng.end == 11 + 5

    def test_end_clamped_to_total(self, window):
        rng = window.compute(total=20, scroll_offset=600, viewport_height=320)
        assert rng.end == 20
        assert rng.start == 13

    def test_unmeasured_viewport_materializes_all(self, window):
        rng = window.compute(total=50, scroll_offset=0, viewport_height=0)
        assert (rng.start, rng.end) == (0, 50)

    def test_empty(self, window):
        rng = window.compute(total=0, scroll_offset=100, viewport_height=320)
        assert (rng.start, rng.end, rng.total_height) == (0, 0, 0)

    def test_invalid_row_height(self):
        with pytest.raises(ValueError):
            VirtualWindow(row_height=0)


class TestAtBottom:
    def test_at_bottom(self, window):
        assert window.at_bottom(total=10, scroll_offset=0, viewport_height=320)
        assert window.at_bottom(total=20, scroll_offset=319, viewport_height=320)
        assert not window.at_bottom(total=20, scroll_offset=200, viewport_height=320)
