"""Tab-separated clipboard encoding for copy and paste.

The caller owns the system clipboard: copy returns text to put there, and
paste takes the text read from it. Nothing here touches history; the engine
snapshots before applying a paste result.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..data.lifecycle import RowLifecycleTracker
from ..debug_trace import logger
from ..models.column import Column
from ..models.constants import ROW_NUMBER_FIELD
from ..models.coords import CellCoord, SelectionRect
from ..models.row import Row, get_row_key


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


class ClipboardCodec:
    """TSV serialize/deserialize of cell blocks.

    All methods are static as the codec is stateless.
    """

    @staticmethod
    def copy(rect: SelectionRect | None, display_rows: Sequence[Row], columns: Sequence[Column]) -> str:
        """Serialize a selection rectangle, row-major.

        The row-number column writes the row's 1-based display index.

        Args:
            rect: Selection rectangle over display rows and effective columns
            display_rows: Current display rows
            columns: Effective columns

        Returns:
            Tab/newline-joined text ("" without a rectangle)
        """
        if rect is None:
            return ""

        lines: list[str] = []
        for r in range(rect.row_start, rect.row_end + 1):
            row = display_rows[r] if 0 <= r < len(display_rows) else {}
            values: list[str] = []
            for c in range(rect.col_start, rect.col_end + 1):
                if not 0 <= c < len(columns):
                    continue
                column = columns[c]
                if column.field == ROW_NUMBER_FIELD:
                    values.append(str(r + 1))
                else:
                    values.append(_cell_text(row.get(column.field)))
            lines.append("\t".join(values))
        return "\n".join(lines)

    @staticmethod
    def parse(text: Any) -> list[list[str]] | None:
        """Split clipboard text into a block of cells.

        CRLF and lone CR become newlines. One trailing empty line, as left by
        spreadsheet applications, is dropped.

        Returns:
            Rows of cell strings, or None for a non-text or empty payload
        """
        if not isinstance(text, str) or text == "":
            return None

        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        lines = normalized.split("\n")
        if len(lines) > 1 and lines[-1] == "":
            lines.pop()
        return [line.split("\t") for line in lines]

    @staticmethod
    def paste(
        text: Any,
        active_cell: CellCoord | None,
        display_rows: Sequence[Row],
        columns: Sequence[Column],
        rows: Sequence[Row],
    ) -> list[Row] | None:
        """Apply clipboard text anchored at the active cell.

        Block row i lands on display row ``active.row_index + i``; block rows
        past the last display row are dropped (paste never creates rows).
        Cells landing on non-editable or synthetic columns are skipped, cells
        past the last column are dropped. Written rows follow the edit status
        rule (NONE becomes UPDATED).

        Args:
            text: Clipboard payload
            active_cell: Paste anchor
            display_rows: Current display rows
            columns: Effective columns
            rows: Every row in the store

        Returns:
            New store row list, or None when nothing applies
        """
        block = ClipboardCodec.parse(text)
        if block is None or active_cell is None:
            return None

        updated = list(rows)
        index_by_key = {get_row_key(r): i for i, r in enumerate(updated)}
        changed = False

        for r_off, values in enumerate(block):
            dest_row = active_cell.row_index + r_off
            if dest_row >= len(display_rows):
                logger.debug("Paste: dropped %d rows past the last display row", len(block) - r_off)
                break

            store_index = index_by_key.get(get_row_key(display_rows[dest_row]))
            if store_index is None:
                continue

            row_copy = dict(updated[store_index])
            wrote = False
            for c_off, value in enumerate(values):
                dest_col = active_cell.col_index + c_off
                if dest_col >= len(columns):
                    break
                column = columns[dest_col]
                if not column.is_editable:
                    continue
                row_copy[column.field] = value
                wrote = True

            if wrote:
                updated[store_index] = RowLifecycleTracker.mark_updated(row_copy)
                changed = True

        return updated if changed else None
