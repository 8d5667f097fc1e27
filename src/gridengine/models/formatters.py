"""Display formatters (stored value -> display value).

Formatters never touch stored data; the rendering layer calls
``format_value`` for each materialized cell.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .column import Column

Formatter = Callable[[Any], Any]

DATE_FORMATS: dict[str, str] = {
    "yyyy-MM-dd": "%Y-%m-%d",
    "yyyy.MM.dd": "%Y.%m.%d",
    "yyyy/MM/dd": "%Y/%m/%d",
}


def number_formatter(
    decimal_places: int | None = None,
    use_grouping: bool = True,
    unit: str | None = None,
) -> Formatter:
    """Create a number formatter.

    Examples:
        number_formatter(decimal_places=2)(1234.5) -> "1,234.50"
        number_formatter(unit=" pcs")(12) -> "12 pcs"

    Args:
        decimal_places: Fixed number of decimals (None keeps the value's own)
        use_grouping: Insert thousands separators
        unit: Suffix appended to the formatted number

    Returns:
        Formatter callable; values that are not numeric come back unchanged
    """

    def fmt(value: Any) -> Any:
        if value is None or value == "":
            return ""
        try:
            num = float(value)
        except (TypeError, ValueError):
            return value

        grouping = "," if use_grouping else ""
        if decimal_places is not None:
            text = f"{num:{grouping}.{decimal_places}f}"
        elif num.is_integer():
            text = f"{int(num):{grouping}d}"
        else:
            text = format(num, grouping)
        return f"{text}{unit}" if unit else text

    return fmt


def date_formatter(format: str = "yyyy-MM-dd") -> Formatter:
    """Create a date formatter for ISO strings, dates and datetimes.

    Unparseable values are returned unchanged.
    """
    strf = DATE_FORMATS.get(format, DATE_FORMATS["yyyy-MM-dd"])

    def fmt(value: Any) -> Any:
        if not value:
            return ""
        parsed: date | None = None
        if isinstance(value, (date, datetime)):
            parsed = value
        elif isinstance(value, str):
            try:
                parsed = datetime.fromisoformat(value)
            except ValueError:
                parsed = None
        if parsed is None:
            return value
        return parsed.strftime(strf)

    return fmt


def format_value(column: Column, value: Any) -> Any:
    if column.formatter is None:
        return "" if value is None else value
    return column.formatter(value)
