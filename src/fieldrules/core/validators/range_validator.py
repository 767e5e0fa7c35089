"""
Size rules - length, min and max.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from .base_validator import BaseRule, param, to_number


class LengthRule(BaseRule):
    """
    Validates the character length of a string.

    Parameters:
    - length(n): length must equal n
    - length(min, max): length must lie in [min, max] inclusive

    Length is counted in code points, so ``"héllo"`` has length 5.
    """

    rule_type = "length"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        if not isinstance(value, str):
            return False

        lower = to_number(param(params, 0))
        upper = to_number(param(params, 1))
        if lower is None:
            return False

        length = len(value)
        if upper is not None:
            return lower <= length <= upper
        return length == lower


def _truncated_int(value: Any) -> int | None:
    # int() truncates toward zero, so "17.9" -> 17
    number = to_number(value)
    if number is None:
        return None
    try:
        return int(number)
    except (OverflowError, ValueError):
        return None


class MinRule(BaseRule):
    """
    Validates that a numeric value is at least ``min``.

    The value is coerced to an integer by truncation before comparison;
    non-numeric values fail.
    """

    rule_type = "min"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        number = _truncated_int(value)
        bound = to_number(param(params, 0))
        if number is None or bound is None:
            return False
        return number >= bound


class MaxRule(BaseRule):
    """
    Validates that a numeric value is at most ``max``.

    Same coercion as MinRule.
    """

    rule_type = "max"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        number = _truncated_int(value)
        bound = to_number(param(params, 0))
        if number is None or bound is None:
            return False
        return number <= bound
