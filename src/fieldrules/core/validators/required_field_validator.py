"""
Presence rules - required and accepted.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from .base_validator import BaseRule


class RequiredRule(BaseRule):
    """
    Validates that a field is present and not null/empty.

    Fails if:
    - Field is missing from the data (value is None)
    - Field value is None
    - Field value is a string that is empty after stripping whitespace
    """

    rule_type = "required"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        if value is None:
            return False
        if isinstance(value, str) and value.strip() == "":
            return False
        return True


class AcceptedRule(BaseRule):
    """
    Validates that a field was "accepted", e.g. a terms-of-service checkbox.

    Only ``"yes"``, ``"on"``, ``1`` and ``True`` are accepted; the comparison is
    strict, so ``"1"`` and ``1.0`` are rejected.
    """

    rule_type = "accepted"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        if value is True:
            return True
        if type(value) is int:
            return value == 1
        return isinstance(value, str) and value in ("yes", "on")
