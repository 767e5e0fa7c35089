"""
Rule registry, validation engine and configuration management.
"""

from .messages import ERROR_DEFAULT, format_message, load_messages
from .registry import RuleRegistry, default_registry, register_rule
from .rule_config import RuleConfigLoader
from .rule_engine import Validator

__all__ = [
    "ERROR_DEFAULT",
    "RuleConfigLoader",
    "RuleRegistry",
    "Validator",
    "default_registry",
    "format_message",
    "load_messages",
    "register_rule",
]
