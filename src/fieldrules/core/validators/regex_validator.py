"""
Pattern rules - regex, alpha, alphaNum and slug.
"""

import re
from collections.abc import Mapping, Sequence
from re import Pattern
from typing import Any

from .base_validator import BaseRule, param


class RegexRule(BaseRule):
    """
    Validates that a field value matches a regular expression.

    Parameters:
    - regex(pattern): pattern string or compiled Pattern

    The pattern is applied with ``re.search``; anchor it with ``^``/``$`` to
    require a full match. Invalid patterns fail the check.
    """

    rule_type = "regex"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        if not isinstance(value, str):
            return False

        pattern = param(params, 0)
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern)
            except re.error:
                return False
        # bytes patterns cannot match str values
        if not isinstance(pattern, Pattern) or not isinstance(pattern.pattern, str):
            return False

        return pattern.search(value) is not None


class _CharacterClassRule(BaseRule):
    pattern: Pattern

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        return isinstance(value, str) and self.pattern.fullmatch(value) is not None


class AlphaRule(_CharacterClassRule):
    """Validates that a field contains only letters a-z (case-insensitive)."""

    rule_type = "alpha"
    pattern = re.compile(r"[a-z]+", re.IGNORECASE)


class AlphaNumRule(_CharacterClassRule):
    """Validates that a field contains only letters a-z and digits 0-9."""

    rule_type = "alphaNum"
    pattern = re.compile(r"[a-z0-9]+", re.IGNORECASE)


class SlugRule(_CharacterClassRule):
    """Validates that a field contains only letters, digits, dashes and underscores."""

    rule_type = "slug"
    pattern = re.compile(r"[-a-z0-9_]+", re.IGNORECASE)
