"""
CallbackRule - wraps a user-registered check function.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from fieldrules.exceptions import InvalidRule
from fieldrules.observability.logger import get_logger

from .base_validator import BaseRule

logger = get_logger(__name__)

Check = Callable[[Any, Sequence[Any], str], Any]


class CallbackRule(BaseRule):
    """
    Validates using a custom check function.

    The function signature should be:
        def my_check(value: Any, params: Sequence[Any], field_name: str) -> bool:
            return value == "expected"

    A truthy return value passes. An exception raised by the function is logged
    and counts as a failed check, so validate() never raises.
    """

    def __init__(self, rule_type: str, func: Check):
        if not callable(func):
            raise InvalidRule(rule_type, func)
        self.rule_type = rule_type
        self.func = func

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        try:
            return bool(self.func(value, list(params), field_name))
        except Exception as e:
            logger.warning(
                f"Check for rule '{self.rule_type}' raised on field '{field_name}': {e}",
                exc_info=True,
            )
            return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rule_type={self.rule_type!r}, func={self.func!r})"
