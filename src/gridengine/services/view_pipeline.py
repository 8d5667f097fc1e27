"""View pipeline: store rows -> display rows.

Stage order is fixed: filter -> sort -> tree visibility -> paginate.
Each stage is a plain function so it can be tested on its own; ViewPipeline
composes them for one pass.
"""

from __future__ import annotations

import math
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any

from ..debug_trace import perf_timer
from ..models.column import Column, FilterOption
from ..models.constants import ROW_NUMBER_FIELD
from ..models.coords import SortState
from ..models.row import Row, RowStatus, get_status
from .tree_service import TreeManager

# ==============================================================================
# Filter
# ==============================================================================


def is_filter_active(selected: Any) -> bool:
    if selected is None or selected == "":
        return False
    if isinstance(selected, (list, tuple, set, frozenset)):
        return len(selected) > 0
    return True


def filter_rows(
    rows: Sequence[Row],
    column_filters: dict[str, Collection[Any]] | None = None,
    columns: Sequence[Column] = (),
    enable_header_filter: bool = False,
) -> list[Row]:
    """Drop deleted rows, then apply per-column membership filters.

    A row passes when, for every active filter on a filterable column, its
    value is in that column's selected-value set.

    Args:
        rows: Rows from the store
        column_filters: field -> selected values
        columns: Effective columns (filters on unknown or non-filterable
            columns are ignored)
        enable_header_filter: Header filtering switched on

    Returns:
        Filtered rows, original order
    """
    base = [r for r in rows if get_status(r) != RowStatus.DELETED]
    if not enable_header_filter or not column_filters:
        return base

    by_field = {c.field: c for c in columns}
    active: list[tuple[str, Collection[Any]]] = []
    for field_name, selected in column_filters.items():
        column = by_field.get(field_name)
        if column is None or not column.filterable or not is_filter_active(selected):
            continue
        if not isinstance(selected, (list, tuple, set, frozenset)):
            selected = [selected]
        active.append((field_name, selected))

    if not active:
        return base

    return [r for r in base if all(r.get(f) in selected for f, selected in active)]


def distinct_options(rows: Sequence[Row], field_name: str) -> list[FilterOption]:
    """Distinct non-empty values of a field, in first-seen order."""
    seen: list[Any] = []
    options: list[FilterOption] = []
    for row in rows:
        value = row.get(field_name)
        if value is None or value == "":
            continue
        if value in seen:
            continue
        seen.append(value)
        options.append(FilterOption(value=value, label=str(value)))
    return options


# ==============================================================================
# Sort
# ==============================================================================


def next_sort_state(previous: SortState | None, field_name: str) -> SortState | None:
    """Header click cycle: unsorted -> asc -> desc -> unsorted.

    Clicking a different field always starts at asc.
    """
    if previous is None or previous.field != field_name:
        return SortState(field_name, "asc")
    if previous.direction == "asc":
        return SortState(field_name, "desc")
    return None


def _compare_values(a: Any, b: Any) -> int:
    try:
        if a < b:
            return -1
        if a > b:
            return 1
        return 0
    except TypeError:
        # Mixed types: fall back to their string forms
        sa, sb = str(a), str(b)
        return (sa > sb) - (sa < sb)


def apply_sort(rows: Sequence[Row], sort_state: SortState | None) -> list[Row]:
    """Stable sort; None sorts before any value in both directions.

    The synthetic row-number column is never sorted.
    """
    if sort_state is None or sort_state.field == ROW_NUMBER_FIELD:
        return list(rows)

    field_name = sort_state.field
    sign = -1 if sort_state.direction == "desc" else 1

    def compare(ra: Row, rb: Row) -> int:
        av = ra.get(field_name)
        bv = rb.get(field_name)
        if av is None and bv is None:
            return 0
        if av is None:
            return -1
        if bv is None:
            return 1
        return sign * _compare_values(av, bv)

    return sorted(rows, key=cmp_to_key(compare))


# ==============================================================================
# Pagination
# ==============================================================================


@dataclass(frozen=True)
class PageInfo:
    current_page: int
    page_size: int
    total_count: int
    page_count: int


def compute_page_info(
    mode: str, page: int, page_size: int, total_count: int
) -> PageInfo:
    """Clamp the page and derive the page count.

    In "none" mode there is always exactly one page.
    """
    if mode == "none":
        return PageInfo(current_page=1, page_size=page_size, total_count=total_count, page_count=1)

    size = max(1, page_size)
    page_count = max(1, math.ceil(total_count / size))
    current = min(max(page, 1), page_count)
    return PageInfo(current_page=current, page_size=size, total_count=total_count, page_count=page_count)


def paginate(rows: Sequence[Row], mode: str, pag_type: str, page: int, page_size: int) -> list[Row]:
    """Slice rows for the current page.

    none            all rows
    page + client   [(page-1)*size, page*size)
    scroll + client [0, page*size), growing as pages load
    server types    rows pass through (the caller already sliced)
    """
    if mode == "page" and pag_type == "client":
        start = (page - 1) * page_size
        return list(rows[start : start + page_size])
    if mode == "scroll" and pag_type == "client":
        return list(rows[: page * page_size])
    return list(rows)


# ==============================================================================
# Pipeline
# ==============================================================================


@dataclass
class ViewState:
    """Inputs of one pipeline pass besides the rows themselves."""

    columns: list[Column] = field(default_factory=list)
    column_filters: dict[str, Collection[Any]] = field(default_factory=dict)
    enable_header_filter: bool = False
    sort_state: SortState | None = None
    tree_enabled: bool = False
    pagination_mode: str = "none"
    pagination_type: str = "client"
    page: int = 1
    page_size: int = 15
    total_count: int | None = None  # server-provided total


@dataclass
class ViewResult:
    display_rows: list[Row]
    tree_visible_rows: list[Row]
    page_info: PageInfo


class ViewPipeline:
    """Composes the four stages into display rows.

    All methods are static as the pipeline is stateless.
    """

    @staticmethod
    def run(rows: Sequence[Row], state: ViewState) -> ViewResult:
        with perf_timer("view_pipeline", row_count=len(rows)):
            filtered = filter_rows(
                rows, state.column_filters, state.columns, state.enable_header_filter
            )
            sorted_rows = apply_sort(filtered, state.sort_state)
            if state.tree_enabled:
                visible = TreeManager.visible_rows(sorted_rows, rows)
            else:
                visible = sorted_rows

            total = state.total_count if state.total_count is not None else len(visible)
            info = compute_page_info(state.pagination_mode, state.page, state.page_size, total)
            display = paginate(
                visible,
                state.pagination_mode,
                state.pagination_type,
                info.current_page,
                info.page_size,
            )
        return ViewResult(display_rows=display, tree_visible_rows=visible, page_info=info)
