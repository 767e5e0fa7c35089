"""
fieldrules - declarative field validation.

Declare named rules against the fields of a mapping, run them, and collect
formatted error messages per field.
"""

from fieldrules.core.models import RuleDeclaration, ValidationResult
from fieldrules.core.rules import (
    ERROR_DEFAULT,
    RuleConfigLoader,
    RuleRegistry,
    Validator,
    default_registry,
    format_message,
    load_messages,
    register_rule,
)
from fieldrules.exceptions import (
    FieldRulesError,
    InvalidRule,
    MessageCatalogError,
    NoDeclarationToAnnotate,
    UnknownRule,
)

__version__ = "0.1.0"

__all__ = [
    "ERROR_DEFAULT",
    "FieldRulesError",
    "InvalidRule",
    "MessageCatalogError",
    "NoDeclarationToAnnotate",
    "RuleConfigLoader",
    "RuleDeclaration",
    "RuleRegistry",
    "UnknownRule",
    "ValidationResult",
    "Validator",
    "default_registry",
    "format_message",
    "load_messages",
    "register_rule",
]
