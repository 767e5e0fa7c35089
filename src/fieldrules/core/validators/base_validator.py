"""
Base rule interface for all validation checks.

Every check, built-in or registered at runtime, is exposed to the engine as a
BaseRule. Checks return a boolean and never raise on bad input: a value of the
wrong type is simply a failed check.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

_NUMERIC_STRING = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


class BaseRule(ABC):
    """
    Abstract base class for all rules.

    Subclasses set ``rule_type`` to the name the rule is declared under
    (``required``, ``length``, ``dateBefore``, ...) and implement check().
    """

    rule_type: ClassVar[str] = ""

    @abstractmethod
    def check(
        self,
        value: Any,
        params: Sequence[Any],
        field_name: str,
        data: Mapping[str, Any],
    ) -> bool:
        """
        Evaluate the rule against a single field value.

        Args:
            value: The field value (None when the field is absent)
            params: Positional parameters given when the rule was declared
            field_name: Name of the field being checked
            data: The validator's full field map (for cross-field rules)

        Returns:
            True if the value passes the rule
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rule_type={self.rule_type!r})"


def is_number(value: Any) -> bool:
    """True for int and float values, excluding bool."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_numeric_string(value: Any) -> bool:
    return isinstance(value, str) and _NUMERIC_STRING.match(value) is not None


def to_number(value: Any) -> float | int | None:
    """
    Coerce a number or numeric string to a number.

    Returns None when the value has no numeric interpretation.
    """
    if is_number(value):
        return value
    if is_numeric_string(value):
        number = float(value)
        return int(number) if number.is_integer() and "." not in value else number
    return None


def loose_equals(left: Any, right: Any) -> bool:
    """
    Compare two values, treating numbers and numeric strings as numbers.

    ``"17" == 17`` is True here; everything else falls back to ``==``.
    """
    if (is_number(left) or is_numeric_string(left)) and (is_number(right) or is_numeric_string(right)):
        return to_number(left) == to_number(right)
    try:
        return bool(left == right)
    except (TypeError, ValueError):
        return False


def param(params: Sequence[Any], index: int, default: Any = None) -> Any:
    """Positional parameter lookup that tolerates short parameter lists."""
    return params[index] if len(params) > index else default
