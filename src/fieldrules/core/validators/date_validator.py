"""
Date rules - date, dateFormat, dateBefore and dateAfter.

Free-form date strings are parsed with ``dateutil`` and must name a full
calendar date; "2024-06-01" passes but "March" or "17" does not. The relative
words now, today, tomorrow and yesterday are also accepted. ``dateFormat``
uses ``datetime.strptime`` directives (e.g. ``%Y-%m-%d``).
"""

from collections.abc import Mapping, Sequence
from datetime import date, datetime, time, timedelta
from typing import Any

from dateutil import parser as date_parser

from .base_validator import BaseRule, param

_RELATIVE_DAYS = {"now": 0, "today": 0, "tomorrow": 1, "yesterday": -1}

_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def parse_date(value: Any) -> datetime | None:
    """
    Interpret a value as a datetime.

    Args:
        value: datetime, date, relative day word or parsable date string

    Returns:
        A datetime, or None if the value cannot be read as a date
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str) or not value.strip():
        return None

    keyword = value.strip().lower()
    if keyword in _RELATIVE_DAYS:
        today = datetime.combine(date.today(), time.min)
        return datetime.now() if keyword == "now" else today + timedelta(days=_RELATIVE_DAYS[keyword])

    # dateutil fills missing year/month/day from its default; parse against two
    # different defaults and reject anything that borrowed a component
    try:
        first = date_parser.parse(value, default=_DEFAULT_A)
        second = date_parser.parse(value, default=_DEFAULT_B)
    except (ValueError, OverflowError):
        return None
    if first != second:
        return None
    return first


def _timestamps(value: Any, reference: Any) -> tuple[float, float] | None:
    # Compare as POSIX timestamps so naive and aware datetimes can be mixed
    parsed_value = parse_date(value)
    parsed_reference = parse_date(reference)
    if parsed_value is None or parsed_reference is None:
        return None
    try:
        return parsed_value.timestamp(), parsed_reference.timestamp()
    except (OverflowError, OSError, ValueError):
        return None


class DateRule(BaseRule):
    """Validates that a field is a date or a parsable date string."""

    rule_type = "date"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        return parse_date(value) is not None


class DateFormatRule(BaseRule):
    """
    Validates that a string matches a specific date format exactly.

    Parameters:
    - dateFormat(fmt): ``strptime`` format string
    """

    rule_type = "dateFormat"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        fmt = param(params, 0)
        if not isinstance(value, str) or not isinstance(fmt, str):
            return False
        try:
            datetime.strptime(value, fmt)
        except ValueError:
            return False
        return True


class DateBeforeRule(BaseRule):
    """
    Validates that a date is strictly before a reference date.

    Parameters:
    - dateBefore(reference): date, datetime or parsable string
    """

    rule_type = "dateBefore"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        stamps = _timestamps(value, param(params, 0))
        return stamps is not None and stamps[0] < stamps[1]


class DateAfterRule(BaseRule):
    """Validates that a date is strictly after a reference date."""

    rule_type = "dateAfter"

    def check(self, value: Any, params: Sequence[Any], field_name: str, data: Mapping[str, Any]) -> bool:
        stamps = _timestamps(value, param(params, 0))
        return stamps is not None and stamps[0] > stamps[1]
