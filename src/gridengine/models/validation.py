"""Cell value validators.

A validator is a callable ``(value) -> error_message | None``. Factories in
this module build the common ones; ``run_validators`` applies a column's list
and reports the first failure.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Any

Validator = Callable[[Any], "str | None"]

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_INTEGER_PATTERN = re.compile(r"^-?\d+$")
_ENGLISH_PATTERN = re.compile(r"^[A-Za-z\s]+$")


def run_validators(validators: Iterable[Validator] | None, value: Any) -> str | None:
    """Run validators in order and return the first error message.

    Args:
        validators: Validators configured on a column (may be None)
        value: The draft value being committed

    Returns:
        The first non-empty error message, or None if every validator passed
    """
    if not validators:
        return None
    for validator in validators:
        message = validator(value)
        if message:
            return message
    return None


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return float(value)
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def required(message: str = "Value is required.") -> Validator:
    def check(value: Any) -> str | None:
        if value is None:
            return message
        if isinstance(value, str) and value.strip() == "":
            return message
        if isinstance(value, (list, tuple, set)) and len(value) == 0:
            return message
        return None

    return check


def number(message: str = "Only numbers are allowed.") -> Validator:
    def check(value: Any) -> str | None:
        if _is_blank(value):
            return None
        return message if _to_number(value) is None else None

    return check


def integer(message: str = "Only whole numbers are allowed.") -> Validator:
    def check(value: Any) -> str | None:
        if _is_blank(value):
            return None
        return None if _INTEGER_PATTERN.match(str(value)) else message

    return check


def min_value(minimum: float, message: str | None = None) -> Validator:
    def check(value: Any) -> str | None:
        if _is_blank(value):
            return None
        n = _to_number(value)
        if n is None:
            return None
        if n < minimum:
            return message or f"Must be at least {minimum}."
        return None

    return check


def max_value(maximum: float, message: str | None = None) -> Validator:
    def check(value: Any) -> str | None:
        if _is_blank(value):
            return None
        n = _to_number(value)
        if n is None:
            return None
        if n > maximum:
            return message or f"Must be at most {maximum}."
        return None

    return check


def value_range(minimum: float, maximum: float, message: str | None = None) -> Validator:
    def check(value: Any) -> str | None:
        if _is_blank(value):
            return None
        n = _to_number(value)
        if n is None:
            return None
        if n < minimum or n > maximum:
            return message or f"Must be between {minimum} and {maximum}."
        return None

    return check


def email(message: str = "Not a valid email address.") -> Validator:
    def check(value: Any) -> str | None:
        if _is_blank(value):
            return None
        return None if _EMAIL_PATTERN.match(str(value).strip()) else message

    return check


def english(message: str = "Only English letters are allowed.") -> Validator:
    def check(value: Any) -> str | None:
        if _is_blank(value):
            return None
        return None if _ENGLISH_PATTERN.match(str(value)) else message

    return check


def max_length(limit: int, message: str | None = None) -> Validator:
    """Reject strings longer than limit (shows current/limit like "Too long (30/24)")."""

    def check(value: Any) -> str | None:
        if _is_blank(value):
            return None
        text = str(value)
        if len(text) > limit:
            return message or f"Too long ({len(text)}/{limit})"
        return None

    return check


def custom(fn: Callable[[Any], str | None]) -> Validator:
    return fn
