"""Row virtualization: which display rows to materialize for a scroll position."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..models.constants import DEFAULT_ROW_HEIGHT, OVERSCAN_ROWS


@dataclass(frozen=True)
class WindowRange:
    """Half-open display-row range [start, end) plus container geometry.

    Attributes:
        start: First materialized display-row index.
        end: One past the last materialized index.
        offset_top: Absolute top offset of the first materialized row.
        total_height: Height of the full scroll container.
    """

    start: int
    end: int
    offset_top: int
    total_height: int

    @property
    def count(self) -> int:
        return self.end - self.start

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.end


class VirtualWindow:
    """Fixed-row-height windowing.

    Usage:
        window = VirtualWindow(row_height=32)
        rng = window.compute(total=5000, scroll_offset=6400, viewport_height=600)
        rows_to_draw = display_rows[rng.start : rng.end]
    """

    def __init__(self, row_height: int = DEFAULT_ROW_HEIGHT, overscan: int = OVERSCAN_ROWS):
        if row_height <= 0:
            raise ValueError(f"row_height must be positive, got {row_height}")
        self.row_height = row_height
        self.overscan = max(0, overscan)

    def total_height(self, total: int) -> int:
        return total * self.row_height

    def compute(self, total: int, scroll_offset: float, viewport_height: float) -> WindowRange:
        """Visible range for the given viewport metrics.

        A viewport that has not been measured yet (height 0 or less) gets the
        whole range, so the first render is never empty.

        Args:
            total: Number of display rows
            scroll_offset: Scroll position from the top
            viewport_height: Height of the visible area

        Returns:
            WindowRange clamped to [0, total]
        """
        total = max(0, total)
        total_height = self.total_height(total)
        if viewport_height <= 0:
            return WindowRange(start=0, end=total, offset_top=0, total_height=total_height)

        first = math.floor(max(0.0, scroll_offset) / self.row_height)
        start = min(max(0, first - self.overscan), total)
        visible = math.ceil(viewport_height / self.row_height)
        end = min(total, start + visible + self.overscan)
        return WindowRange(
            start=start,
            end=end,
            offset_top=start * self.row_height,
            total_height=total_height,
        )

    def at_bottom(self, total: int, scroll_offset: float, viewport_height: float) -> bool:
        """True when the viewport touches the end of the container (1px slack)."""
        return scroll_offset + viewport_height >= self.total_height(total) - 1
