"""
Type rules - numeric, integer, ip and email.
"""

import ipaddress
import re
from collections.abc import Mapping, Sequence
from typing import Any

from .base_validator import BaseRule, is_number, is_numeric_string


class NumericRule(BaseRule):
    """
    Validates that a field is a number or a numeric string.

    Accepts ints and floats (not bools) and strings such as ``"42"``,
    ``"-3.5"``, ``" 1e3 "``.
    """

    rule_type = "numeric"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        return is_number(value) or is_numeric_string(value)


class IntegerRule(BaseRule):
    """
    Validates that a field is an integer.

    Strings must be an optionally signed run of digits without leading zeros;
    surrounding whitespace is ignored.
    """

    rule_type = "integer"

    INTEGER_PATTERN = re.compile(r"^[+-]?(0|[1-9][0-9]*)$")

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        if isinstance(value, str):
            return self.INTEGER_PATTERN.match(value.strip()) is not None
        return False


class IpRule(BaseRule):
    """Validates that a field is an IPv4 or IPv6 address."""

    rule_type = "ip"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        if not isinstance(value, str):
            return False
        try:
            ipaddress.ip_address(value)
        except ValueError:
            return False
        return True


class EmailRule(BaseRule):
    """
    Minimal e-mail check: the value contains ``@`` and at least one character
    follows the first ``@``.

    This is intentionally permissive and is not RFC 5322 validation.
    """

    rule_type = "email"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        if not isinstance(value, str):
            return False
        position = value.find("@")
        return position != -1 and position + 1 < len(value)
