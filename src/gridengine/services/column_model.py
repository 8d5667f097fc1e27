"""Column model: leaf resolution, ordering, widths and group header layout.

Resolves a possibly-grouped column tree into:
- leaf columns used for data binding (in the user's drag order)
- effective columns used for headers and cell coordinates, with the synthetic
  row-number/checkbox columns injected and hidden columns removed

Group header geometry is computed from resolved widths (no measuring of
rendered elements), so a renderer can draw spanning headers directly.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..models.column import (
    Column,
    coerce_column,
    flatten_leaf_columns,
    make_row_check_column,
    make_row_number_column,
    validate_columns,
)
from ..models.constants import DEFAULT_COL_WIDTH, MIN_COL_WIDTH


@dataclass(frozen=True)
class HeaderGroupCell:
    """A spanning group header cell."""

    key: str
    label: str
    level: int  # 0 = top row
    start_leaf_index: int  # index into effective columns
    leaf_span: int
    left: float
    width: float


@dataclass
class HeaderLayout:
    """Header geometry for one render.

    Attributes:
        levels: Group cells per header row, top first (empty when ungrouped).
        depth: Number of header rows including the leaf row.
        leaf_grouped: field -> True when the leaf sits under a group.
        leaf_lefts: Left offset of each effective column.
        leaf_widths: Resolved width of each effective column.
    """

    levels: list[list[HeaderGroupCell]] = field(default_factory=list)
    depth: int = 1
    leaf_grouped: dict[str, bool] = field(default_factory=dict)
    leaf_lefts: list[float] = field(default_factory=list)
    leaf_widths: list[float] = field(default_factory=list)


def sync_column_order(previous: list[str] | None, fields: list[str]) -> list[str]:
    """Keep surviving fields in their previous relative order, append new ones.

    Args:
        previous: The last order (None before the first render)
        fields: Fields present now, in definition order

    Returns:
        The new order
    """
    if previous is None:
        return list(fields)
    present = set(fields)
    remained = [f for f in previous if f in present]
    kept = set(remained)
    added = [f for f in fields if f not in kept]
    return remained + added


class ColumnModel:
    """Resolves the column tree into ordered leaf and header lists.

    Usage:
        model = ColumnModel(columns, show_row_number=True)
        model.effective_columns        # header/cell columns
        model.move_column("b", "a")    # drag reorder
        model.resolve_widths()
    """

    def __init__(
        self,
        columns: Iterable[Column | dict] = (),
        *,
        show_row_number: bool = False,
        show_check_box: bool = False,
        container_width: float | None = None,
    ):
        self.show_row_number = show_row_number
        self.show_check_box = show_check_box
        self.container_width = container_width

        self._columns: list[Column] = []
        self._order: list[str] | None = None
        self.width_overrides: dict[str, float] = {}

        self._row_number_column = make_row_number_column()
        self._row_check_column = make_row_check_column()

        self.set_columns(columns)

    # --- Definition ---

    @property
    def columns(self) -> list[Column]:
        """The column tree as configured (groups included)."""
        return list(self._columns)

    def set_columns(self, columns: Iterable[Column | dict]) -> None:
        """Replace the column definitions.

        Drag order survives for fields that still exist; resize overrides
        for vanished fields are dropped.

        Raises:
            ColumnConfigError: If the definitions are unusable
        """
        resolved = [coerce_column(c) for c in columns]
        validate_columns(resolved)
        self._columns = resolved

        fields = [c.field for c in flatten_leaf_columns(resolved)]
        self._order = sync_column_order(self._order, fields)

        present = set(fields)
        self.width_overrides = {f: w for f, w in self.width_overrides.items() if f in present}

    # --- Leaf / header lists ---

    @property
    def leaf_columns(self) -> list[Column]:
        """Data-bound leaf columns in the current drag order (hidden included)."""
        leaves = flatten_leaf_columns(self._columns)
        by_field = {c.field: c for c in leaves}
        ordered = [by_field[f] for f in self._order or [] if f in by_field]
        for column in leaves:
            if column not in ordered:
                ordered.append(column)
        return ordered

    @property
    def effective_columns(self) -> list[Column]:
        """Header/cell columns: synthetic columns first, hidden columns removed."""
        base = [c for c in self.leaf_columns if not c.hidden]
        if self.show_check_box:
            base = [self._row_check_column, *base]
        if self.show_row_number:
            base = [self._row_number_column, *base]
        return base

    @property
    def column_order(self) -> list[str]:
        return list(self._order or [])

    def get(self, field_name: str) -> Column | None:
        for column in self.effective_columns:
            if column.field == field_name:
                return column
        return None

    def index_of(self, field_name: str) -> int:
        for idx, column in enumerate(self.effective_columns):
            if column.field == field_name:
                return idx
        return -1

    @property
    def tree_column(self) -> Column | None:
        for column in self.effective_columns:
            if column.is_tree_column:
                return column
        return None

    # --- Reorder / resize ---

    def move_column(self, from_field: str, to_field: str) -> bool:
        """Move from_field to to_field's position (header drag and drop).

        Returns:
            True if the order changed
        """
        if from_field == to_field or self._order is None:
            return False
        if from_field not in self._order or to_field not in self._order:
            return False

        order = list(self._order)
        to_idx = order.index(to_field)
        order.remove(from_field)
        order.insert(to_idx, from_field)
        self._order = order
        return True

    def resize_column(self, field_name: str, width: float) -> bool:
        """Record a user resize override (clamped to the minimum width).

        Synthetic columns are not resizable.
        """
        column = self.get(field_name)
        if column is None or column.is_synthetic:
            return False
        self.width_overrides[field_name] = max(MIN_COL_WIDTH, width)
        return True

    # --- Widths ---

    def _fixed_width(self, column: Column) -> float | None:
        """Explicit width wins over a resize override."""
        if column.width is not None:
            return column.width
        return self.width_overrides.get(column.field)

    @property
    def flex_count(self) -> int:
        """Leaf, non-synthetic effective columns without a fixed width."""
        return sum(
            1
            for c in self.effective_columns
            if not c.is_synthetic and self._fixed_width(c) is None
        )

    def resolve_widths(self) -> list[float]:
        """Width of every effective column, in order.

        Precedence: explicit width > resize override > flexible share of the
        container width left after fixed columns (default width when the
        container width is unknown).
        """
        columns = self.effective_columns
        fixed = [self._fixed_width(c) for c in columns]

        flex_width: float = DEFAULT_COL_WIDTH
        flex_count = sum(1 for w in fixed if w is None)
        if self.container_width is not None and flex_count:
            remaining = self.container_width - sum(w for w in fixed if w is not None)
            flex_width = max(MIN_COL_WIDTH, remaining / flex_count)

        return [w if w is not None else flex_width for w in fixed]

    @property
    def total_content_width(self) -> float:
        total = sum(self.resolve_widths())
        if self.container_width is not None:
            return max(total, self.container_width)
        return total

    # --- Group headers ---

    def header_layout(self) -> HeaderLayout:
        return build_header_layout(self._columns, self.effective_columns, self.resolve_widths())


def build_header_layout(
    group_columns: list[Column],
    effective_columns: list[Column],
    widths: list[float],
) -> HeaderLayout:
    """Compute spanning group header cells from the column tree.

    Each group spans from its first to its last visible leaf in the effective
    column order. Groups without visible leaves are skipped.

    Args:
        group_columns: The configured column tree
        effective_columns: Columns as rendered (synthetic + ordered leaves)
        widths: Resolved width per effective column

    Returns:
        HeaderLayout with group rows, depth and leaf offsets
    """
    lefts: list[float] = []
    offset = 0.0
    for w in widths:
        lefts.append(offset)
        offset += w

    layout = HeaderLayout(leaf_lefts=lefts, leaf_widths=list(widths))
    if not any(c.children for c in group_columns):
        return layout

    field_index = {c.field: idx for idx, c in enumerate(effective_columns)}
    level_cells: list[list[HeaderGroupCell]] = []

    def collect_leaf_indices(node: Column) -> list[int]:
        if not node.children:
            idx = field_index.get(node.field)
            return [idx] if idx is not None else []
        result: list[int] = []
        for child in node.children:
            result.extend(collect_leaf_indices(child))
        return result

    def walk(nodes: list[Column], level: int, has_group_parent: bool) -> None:
        while len(level_cells) <= level:
            level_cells.append([])

        for idx, node in enumerate(nodes):
            if node.children:
                indices = sorted(collect_leaf_indices(node))
                if not indices:
                    continue
                start, end = indices[0], indices[-1]
                level_cells[level].append(
                    HeaderGroupCell(
                        key=f"{node.field or node.header_name}-{level}-{idx}",
                        label=node.header_name,
                        level=level,
                        start_leaf_index=start,
                        leaf_span=end - start + 1,
                        left=lefts[start],
                        width=sum(widths[start : end + 1]),
                    )
                )
                walk(node.children, level + 1, True)
            elif node.field in field_index:
                layout.leaf_grouped[node.field] = (
                    layout.leaf_grouped.get(node.field, False) or has_group_parent
                )

    walk(group_columns, 0, False)

    layout.levels = [cells for cells in level_cells if cells]
    layout.depth = len(layout.levels) + 1
    return layout
