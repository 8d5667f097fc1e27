"""Tests for cell validators."""

import pytest

from gridengine.models.validation import (
    custom,
    email,
    english,
    integer,
    max_length,
    max_value,
    min_value,
    number,
    required,
    run_validators,
    value_range,
)


class TestRequired:
    @pytest.mark.parametrize("value", [None, "", "   ", []])
    def test_blank_rejected(self, value):
        assert required()(value) == "Value is required."

    @pytest.mark.parametrize("value", ["x", 0, False, ["a"]])
    def test_present_accepted(self, value):
        assert required()(value) is None


class TestNumeric:
    def test_number(self):
        assert number()("12.5") is None
        assert number()(3) is None
        assert number()("abc") == "Only numbers are allowed."

    def test_integer(self):
        assert integer()("-42") is None
        assert integer()("4.2") == "Only whole numbers are allowed."

    def test_blank_passes_non_required_validators(self):
        """Only required() rejects an empty value."""
        for validator in (number(), integer(), min_value(1), max_value(1), value_range(1, 2), email(), english()):
            assert validator("") is None
            assert validator(None) is None

    def test_min_max(self):
        assert min_value(10)("9") == "Must be at least 10."
        assert min_value(10)("10") is None
        assert max_value(5, "too big")(6) == "too big"
        assert max_value(5)(5) is None

    def test_range(self):
        assert value_range(1, 3)(2) is None
        assert value_range(1, 3)(4) == "Must be between 1 and 3."

    def test_non_numeric_left_to_number_validator(self):
        assert min_value(1)("abc") is None


class TestText:
    def test_email(self):
        assert email()("user@example.com") is None
        assert email()("user@example") == "Not a valid email address."

    def test_english(self):
        assert english()("Hello World") is None
        assert english()("Hello1") == "Only English letters are allowed."

    def test_max_length(self):
        assert max_length(3)("abcd") == "Too long (4/3)"
        assert max_length(3)("abc") is None


class TestRunValidators:
    def test_first_error_wins(self):
        validators = [required("missing"), number("nan"), min_value(0, "negative")]
        assert run_validators(validators, "") == "missing"
        assert run_validators(validators, "x") == "nan"
        assert run_validators(validators, "-1") == "negative"
        assert run_validators(validators, "1") is None

    def test_no_validators(self):
        assert run_validators(None, "anything") is None
        assert run_validators([], "anything") is None

    def test_custom(self):
        even = custom(lambda v: None if int(v) % 2 == 0 else "odd")
        assert run_validators([even], "4") is None
        assert run_validators([even], "3") == "odd"
