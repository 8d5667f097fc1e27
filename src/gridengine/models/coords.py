"""Cell coordinates, selection rectangles and sort state."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import CELL_KEY_SEPARATOR


def cell_key(row_key: object, field: str) -> str:
    """Membership string used for O(1) highlight lookups."""
    return f"{row_key}{CELL_KEY_SEPARATOR}{field}"


def split_cell_key(key: str) -> tuple[str, str]:
    row_key, _, field = key.partition(CELL_KEY_SEPARATOR)
    return row_key, field


@dataclass(frozen=True)
class CellCoord:
    """A cell position.

    ``row_key`` and ``field`` are the durable identity. ``row_index`` and
    ``col_index`` are caches valid only against the display rows and
    effective columns they were computed from.
    """

    row_key: str
    field: str
    row_index: int
    col_index: int

    @property
    def key(self) -> str:
        return cell_key(self.row_key, self.field)


@dataclass(frozen=True)
class SelectionRect:
    """Inclusive rectangle over display-row and column indices."""

    row_start: int
    row_end: int
    col_start: int
    col_end: int

    @classmethod
    def between(cls, a_row: int, a_col: int, b_row: int, b_col: int) -> SelectionRect:
        return cls(
            row_start=min(a_row, b_row),
            row_end=max(a_row, b_row),
            col_start=min(a_col, b_col),
            col_end=max(a_col, b_col),
        )

    @property
    def row_count(self) -> int:
        return self.row_end - self.row_start + 1

    @property
    def col_count(self) -> int:
        return self.col_end - self.col_start + 1

    @property
    def cell_count(self) -> int:
        return self.row_count * self.col_count


@dataclass(frozen=True)
class SortState:
    field: str
    direction: str = "asc"  # "asc" | "desc"
