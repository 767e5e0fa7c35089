"""
Data models for rule declarations and validation results.

All models use Pydantic for runtime validation and type safety.
"""

from .rule_declaration import RuleDeclaration
from .validation_result import ValidationResult

__all__ = [
    "RuleDeclaration",
    "ValidationResult",
]
