"""
Built-in rule implementations.

Provides the rules available by name to every validator: presence, type,
size, comparison, pattern, URL and date checks, plus the CallbackRule wrapper
for user-registered checks.
"""

from .base_validator import BaseRule, loose_equals, to_number
from .comparison_validator import ContainsRule, DifferentRule, EqualsRule, InRule, NotInRule
from .custom_validator import CallbackRule
from .date_validator import DateAfterRule, DateBeforeRule, DateFormatRule, DateRule, parse_date
from .range_validator import LengthRule, MaxRule, MinRule
from .regex_validator import AlphaNumRule, AlphaRule, RegexRule, SlugRule
from .required_field_validator import AcceptedRule, RequiredRule
from .type_validator import EmailRule, IntegerRule, IpRule, NumericRule
from .url_validator import UrlActiveRule, UrlRule

BUILTIN_RULES: dict[str, BaseRule] = {
    rule.rule_type: rule
    for rule in (
        RequiredRule(),
        AcceptedRule(),
        EqualsRule(),
        DifferentRule(),
        NumericRule(),
        IntegerRule(),
        LengthRule(),
        MinRule(),
        MaxRule(),
        InRule(),
        NotInRule(),
        ContainsRule(),
        IpRule(),
        EmailRule(),
        UrlRule(),
        UrlActiveRule(),
        AlphaRule(),
        AlphaNumRule(),
        SlugRule(),
        RegexRule(),
        DateRule(),
        DateFormatRule(),
        DateBeforeRule(),
        DateAfterRule(),
    )
}

__all__ = [
    "BUILTIN_RULES",
    "BaseRule",
    "CallbackRule",
    "RequiredRule",
    "AcceptedRule",
    "EqualsRule",
    "DifferentRule",
    "NumericRule",
    "IntegerRule",
    "LengthRule",
    "MinRule",
    "MaxRule",
    "InRule",
    "NotInRule",
    "ContainsRule",
    "IpRule",
    "EmailRule",
    "UrlRule",
    "UrlActiveRule",
    "AlphaRule",
    "AlphaNumRule",
    "SlugRule",
    "RegexRule",
    "DateRule",
    "DateFormatRule",
    "DateBeforeRule",
    "DateAfterRule",
    "loose_equals",
    "parse_date",
    "to_number",
]
