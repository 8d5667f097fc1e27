from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .models.constants import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_ROW_HEIGHT,
    MAX_UNDO_DEPTH,
    OVERSCAN_ROWS,
    PAGE_SIZE_OPTIONS,
)

PAGINATION_MODES = ("none", "page", "scroll")
PAGINATION_TYPES = ("client", "server")


@dataclass
class PaginationOptions:
    """Paging configuration.

    mode:
        none   - every row, plain scrolling
        page   - page buttons
        scroll - pages accumulate as the user scrolls to the bottom
    type:
        client - the engine slices the full row set
        server - rows arrive already sliced; total_count comes from the caller
    """

    mode: str = "none"
    type: str = "client"
    default_page_size: int = DEFAULT_PAGE_SIZE
    page_size_options: list[int] = field(default_factory=lambda: list(PAGE_SIZE_OPTIONS))

    def __post_init__(self) -> None:
        if self.mode not in PAGINATION_MODES:
            raise ValueError(f"Unknown pagination mode: {self.mode!r}")
        if self.type not in PAGINATION_TYPES:
            raise ValueError(f"Unknown pagination type: {self.type!r}")

    @property
    def is_server(self) -> bool:
        return self.type == "server"

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> PaginationOptions:
        data = data or {}
        return cls(
            mode=data.get("mode", "none"),
            type=data.get("type", "client"),
            default_page_size=data.get(
                "default_page_size", data.get("defaultPageSize", DEFAULT_PAGE_SIZE)
            ),
            page_size_options=list(
                data.get("page_size_options", data.get("pageSizeOptions", PAGE_SIZE_OPTIONS))
            ),
        )


@dataclass
class GridOptions:
    """Grid configuration passed at construction."""

    row_height: int = DEFAULT_ROW_HEIGHT
    editable: bool = True
    show_row_number: bool = False
    show_check_box: bool = False
    enable_header_filter: bool = False
    enable_column_reorder: bool = False
    enable_column_resize: bool = False
    container_width: int | None = None
    pagination: PaginationOptions = field(default_factory=PaginationOptions)
    history_depth: int = MAX_UNDO_DEPTH
    overscan: int = OVERSCAN_ROWS

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> GridOptions:
        """Build options from a dict (snake_case or camelCase keys)."""
        data = data or {}

        def get(name: str, camel: str, default: Any) -> Any:
            return data.get(name, data.get(camel, default))

        pagination = data.get("pagination")
        if not isinstance(pagination, PaginationOptions):
            pagination = PaginationOptions.from_dict(pagination)

        return cls(
            row_height=get("row_height", "rowHeight", DEFAULT_ROW_HEIGHT),
            editable=get("editable", "editable", True),
            show_row_number=get("show_row_number", "showRowNumber", False),
            show_check_box=get("show_check_box", "showCheckBox", False),
            enable_header_filter=get("enable_header_filter", "enableHeaderFilter", False),
            enable_column_reorder=get("enable_column_reorder", "enableColumnReorder", False),
            enable_column_resize=get("enable_column_resize", "enableColumnResize", False),
            container_width=get("container_width", "width", None),
            pagination=pagination,
            history_depth=get("history_depth", "historyDepth", MAX_UNDO_DEPTH),
            overscan=get("overscan", "overscan", OVERSCAN_ROWS),
        )

    @classmethod
    def coerce(cls, value: GridOptions | dict[str, Any] | None) -> GridOptions:
        if isinstance(value, GridOptions):
            return value
        return cls.from_dict(value)
