"""Tests for display formatters."""

from datetime import date

from gridengine.models.column import Column
from gridengine.models.formatters import date_formatter, format_value, number_formatter


class TestNumberFormatter:
    def test_grouping_and_decimals(self):
        assert number_formatter(decimal_places=2)(1234.5) == "1,234.50"
        assert number_formatter()(1234567) == "1,234,567"
        assert number_formatter(use_grouping=False)(1234) == "1234"

    def test_unit_suffix(self):
        assert number_formatter(unit=" pcs")(12) == "12 pcs"

    def test_fractional_without_fixed_places(self):
        assert number_formatter()(1234.25) == "1,234.25"

    def test_non_numeric_passthrough(self):
        assert number_formatter()("n/a") == "n/a"
        assert number_formatter()(None) == ""


class TestDateFormatter:
    def test_iso_string(self):
        assert date_formatter("yyyy.MM.dd")("2024-03-05") == "2024.03.05"

    def test_date_object(self):
        assert date_formatter()(date(2024, 1, 2)) == "2024-01-02"

    def test_unparseable_passthrough(self):
        assert date_formatter()("someday") == "someday"
        assert date_formatter()("") == ""


class TestFormatValue:
    def test_without_formatter(self):
        assert format_value(Column("a"), None) == ""
        assert format_value(Column("a"), 5) == 5

    def test_with_formatter(self):
        column = Column("a", formatter=number_formatter(decimal_places=1))
        assert format_value(column, 3) == "3.0"
