"""
Comparison rules - equals, different, in, notIn and contains.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from .base_validator import BaseRule, loose_equals, param


class EqualsRule(BaseRule):
    """
    Validates that a field matches another field.

    Parameters:
    - equals(other_field): name of the field to compare against

    Fails when the other field is absent or null.
    """

    rule_type = "equals"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        other_field = param(params, 0)
        if not isinstance(other_field, str):
            return False
        other = data.get(other_field)
        if other is None:
            return False
        return loose_equals(value, other)


class DifferentRule(BaseRule):
    """
    Validates that a field differs from another field.

    Fails when the other field is absent or null.
    """

    rule_type = "different"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        other_field = param(params, 0)
        if not isinstance(other_field, str):
            return False
        other = data.get(other_field)
        if other is None:
            return False
        return not loose_equals(value, other)


def _is_member(value: Any, choices: Any) -> bool:
    if isinstance(choices, Mapping):
        choices = list(choices.values())
    if not isinstance(choices, list | tuple | set | frozenset):
        return False
    return any(loose_equals(value, choice) for choice in choices)


class InRule(BaseRule):
    """
    Validates that a field is one of a list of values.

    Parameters:
    - in(choices): list, tuple or set of allowed values
    """

    rule_type = "in"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        return _is_member(value, param(params, 0))


class NotInRule(BaseRule):
    """Validates that a field is not one of a list of values."""

    rule_type = "notIn"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        return not _is_member(value, param(params, 0))


class ContainsRule(BaseRule):
    """
    Validates that a string field contains a substring.

    Fails (never raises) when either the value or the substring is not a string.
    """

    rule_type = "contains"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        needle = param(params, 0)
        if not isinstance(needle, str) or not isinstance(value, str):
            return False
        return needle in value
