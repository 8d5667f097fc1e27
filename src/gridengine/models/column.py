"""Column definitions for the grid engine.

A column tree may contain group columns (with ``children``); only leaf
columns bind data. Definitions are validated once, at configuration time,
so the rest of the engine can treat rows as generically keyed dicts.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from .constants import (
    DEFAULT_TREE_INDENT,
    ROW_CHECK_FIELD,
    ROW_CHECK_WIDTH,
    ROW_NUMBER_FIELD,
    ROW_NUMBER_WIDTH,
    SYNTHETIC_COLUMN_FIELDS,
)
from .validation import Validator

EDITOR_TYPES = frozenset({"text", "number", "date", "dropdown", "combo", "custom"})


class ColumnConfigError(ValueError):
    """Raised when a column definition cannot be used."""


@dataclass(frozen=True)
class FilterOption:
    """One selectable value in a header filter list."""

    value: Any
    label: str


@dataclass
class EditorConfig:
    """How a cell is edited.

    Attributes:
        type: One of text, number, date, dropdown, combo, custom.
        options: Choices for dropdown/combo editors.
        multiple: Dropdown allows multiple values.
        step/min/max: Number editor bounds (informational for the renderer).
    """

    type: str = "text"
    options: list[FilterOption] = field(default_factory=list)
    multiple: bool = False
    step: float | None = None
    min: float | None = None
    max: float | None = None

    @classmethod
    def from_value(cls, value: EditorConfig | dict | str | None) -> EditorConfig | None:
        if value is None or isinstance(value, EditorConfig):
            return value
        if isinstance(value, str):
            value = {"type": value}
        editor_type = value.get("type", "text")
        if editor_type not in EDITOR_TYPES:
            raise ColumnConfigError(f"Unknown editor type: {editor_type!r}")
        return cls(
            type=editor_type,
            options=[_coerce_option(o) for o in value.get("options", [])],
            multiple=bool(value.get("multiple", False)),
            step=value.get("step"),
            min=value.get("min"),
            max=value.get("max"),
        )


@dataclass
class Column:
    """A column (leaf or group) of the grid.

    Leaf columns hold data under ``field``. Group columns carry ``children``
    and only contribute header text.
    """

    field: str
    header_name: str = ""
    width: int | None = None
    sortable: bool = False
    filterable: bool = False
    hidden: bool = False
    editor: EditorConfig | None = None
    validators: list[Validator] = field(default_factory=list)
    is_tree_column: bool = False
    tree_indent: int = DEFAULT_TREE_INDENT
    children: list[Column] = field(default_factory=list)
    filter_options: list[FilterOption] | None = None
    formatter: Callable[[Any], Any] | None = None
    align: str = "left"

    @property
    def is_group(self) -> bool:
        return bool(self.children)

    @property
    def is_synthetic(self) -> bool:
        return self.field in SYNTHETIC_COLUMN_FIELDS

    @property
    def is_editable(self) -> bool:
        """Editor declared and not an engine-managed column."""
        return self.editor is not None and not self.is_synthetic

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Column:
        """Build a column from a dict-shaped definition.

        Accepts both snake_case keys and the camelCase keys used by
        JavaScript grid configs (headerName, isTreeColumn, filterOptions).
        """
        validators = data.get("validators") or []
        if callable(validators):
            validators = [validators]

        filter_options = data.get("filter_options", data.get("filterOptions"))
        if filter_options is not None:
            filter_options = [_coerce_option(o) for o in filter_options]

        return cls(
            field=data.get("field", ""),
            header_name=data.get("header_name", data.get("headerName", "")),
            width=data.get("width"),
            sortable=bool(data.get("sortable", False)),
            filterable=bool(data.get("filterable", False)),
            hidden=bool(data.get("hidden", False)),
            editor=EditorConfig.from_value(data.get("editor")),
            validators=list(validators),
            is_tree_column=bool(data.get("is_tree_column", data.get("isTreeColumn", False))),
            tree_indent=data.get("tree_indent", data.get("treeIndent", DEFAULT_TREE_INDENT)),
            children=[coerce_column(c) for c in data.get("children") or []],
            filter_options=filter_options,
            formatter=data.get("formatter"),
            align=data.get("align", "left"),
        )


def _coerce_option(option: FilterOption | dict | Any) -> FilterOption:
    if isinstance(option, FilterOption):
        return option
    if isinstance(option, dict):
        value = option.get("value")
        return FilterOption(value=value, label=str(option.get("label", value)))
    return FilterOption(value=option, label=str(option))


def coerce_column(column: Column | dict[str, Any]) -> Column:
    """Accept either a Column or its dict form."""
    if isinstance(column, Column):
        return column
    return Column.from_dict(column)


def iter_leaf_columns(columns: Iterable[Column]) -> Iterator[Column]:
    """Yield leaf columns depth-first, left to right."""
    for column in columns:
        if column.children:
            yield from iter_leaf_columns(column.children)
        else:
            yield column


def flatten_leaf_columns(columns: Iterable[Column]) -> list[Column]:
    return list(iter_leaf_columns(columns))


def validate_columns(columns: list[Column]) -> None:
    """Check a column tree before the engine uses it.

    Raises:
        ColumnConfigError: On empty or duplicate leaf fields, or when a caller
            column reuses a synthetic field name.
    """
    seen: set[str] = set()
    for column in iter_leaf_columns(columns):
        if not column.field:
            raise ColumnConfigError(f"Leaf column {column.header_name!r} has no field")
        if column.field in SYNTHETIC_COLUMN_FIELDS:
            raise ColumnConfigError(f"Field {column.field!r} is reserved")
        if column.field in seen:
            raise ColumnConfigError(f"Duplicate column field: {column.field!r}")
        seen.add(column.field)


def make_row_number_column() -> Column:
    return Column(
        field=ROW_NUMBER_FIELD,
        header_name="#",
        width=ROW_NUMBER_WIDTH,
        sortable=False,
        align="center",
    )


def make_row_check_column() -> Column:
    return Column(field=ROW_CHECK_FIELD, header_name="", width=ROW_CHECK_WIDTH, align="center")
