"""
Validator: declares rules against a field map and runs them.

Typical use:

    v = Validator({"name": "Al", "email": "al@example.com"})
    v.rule("required", ["name", "email"])
    v.rule("length", "name", 3, 16).message("must be {0} to {1} characters")
    if not v.validate():
        print(v.errors())
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from fieldrules.core.models import RuleDeclaration, ValidationResult
from fieldrules.core.validators import BaseRule
from fieldrules.core.validators.custom_validator import Check
from fieldrules.exceptions import NoDeclarationToAnnotate, UnknownRule
from fieldrules.observability.logger import get_logger
from fieldrules.observability.metrics import (
    record_rule_evaluation,
    record_validation,
    track_duration,
    validation_duration_seconds,
)

from .messages import ERROR_DEFAULT, format_message
from .registry import RuleRegistry, default_registry

logger = get_logger(__name__)


def _as_field_list(fields: str | Iterable[str]) -> list[str]:
    if isinstance(fields, str):
        return [fields]
    return list(fields)


class Validator:
    """
    Validates a mapping of field names to values against declared rules.

    Every declaration runs on every validate() call; failures never stop
    evaluation, so one field can collect several messages. Errors accumulate
    across validate() calls until reset().
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        fields: Iterable[str] | None = None,
        lang: str | None = None,
        lang_dir: str | Path | None = None,
        registry: RuleRegistry | None = None,
    ):
        """
        Initialize the validator.

        Args:
            data: Field values to validate
            fields: Optional allow-list; other keys in ``data`` are dropped
            lang: Language code for default messages (None keeps the current messages)
            lang_dir: Directory holding ``<lang>.yaml`` message files
            registry: Rule registry (defaults to the process-wide registry)

        Raises:
            MessageCatalogError: If ``lang`` is given and its messages cannot be loaded
        """
        self.registry = registry if registry is not None else default_registry

        allowed = set(fields) if fields else None
        self._fields: dict[str, Any] = {
            name: value for name, value in data.items() if allowed is None or name in allowed
        }
        self._errors: dict[str, list[str]] = {}
        self._validations: list[RuleDeclaration] = []

        if lang is not None:
            self.registry.set_language(lang, lang_dir)

    @classmethod
    def add_rule(cls, name: str, check: Check, message: str = ERROR_DEFAULT) -> None:
        """Register a rule on the process-wide default registry."""
        default_registry.register(name, check, message)

    def rule(self, rule: str, fields: str | Iterable[str], *params: Any) -> "Validator":
        """
        Declare a rule for one or more fields.

        Args:
            rule: Rule name
            fields: Field name or iterable of field names
            *params: Positional rule parameters

        Returns:
            self, so declarations can be chained

        Raises:
            UnknownRule: If the rule name is neither registered nor built-in
        """
        if not self.registry.has(rule):
            raise UnknownRule(rule)

        declaration = RuleDeclaration(
            rule=rule,
            fields=_as_field_list(fields),
            params=list(params),
            message=self.registry.default_message(rule),
        )
        self._validations.append(declaration)
        logger.debug(f"Declared rule '{rule}' on {declaration.fields} with params {declaration.params}")
        return self

    def rules(self, rules: Mapping[str, Any]) -> "Validator":
        """
        Declare several rules at once.

        Each value is either a single field target (one declaration) or a list
        of entries, one declaration per entry. An entry is a field name or a
        list whose first element is the field target and whose remaining
        elements are the rule parameters:

            v.rules({
                "required": [["name"], ["email"]],
                "length": [["name", 3, 16]],
                "email": "email",
            })
        """
        for rule, targets in rules.items():
            if isinstance(targets, list | tuple):
                for entry in targets:
                    if isinstance(entry, list | tuple):
                        if not entry:
                            raise ValueError(f"Empty declaration for rule '{rule}'")
                        self.rule(rule, entry[0], *entry[1:])
                    else:
                        self.rule(rule, entry)
            else:
                self.rule(rule, targets)
        return self

    def message(self, message: str) -> "Validator":
        """
        Set the failure message of the most recently declared rule.

        Raises:
            NoDeclarationToAnnotate: If no rule has been declared yet
        """
        if not self._validations:
            raise NoDeclarationToAnnotate()
        self._validations[-1].message = message
        return self

    def validate(self) -> bool:
        """
        Run every declaration against the current field map.

        Returns:
            True if no field has any error
        """
        with track_duration(validation_duration_seconds):
            for declaration in self._validations:
                try:
                    rule = self.registry.resolve(declaration.rule)
                except UnknownRule:
                    # Unregistered after it was declared
                    logger.warning(f"Rule '{declaration.rule}' is no longer registered; treating as failed")
                    rule = None

                for field_name in declaration.fields:
                    passed = self._run_check(rule, declaration, field_name)
                    record_rule_evaluation(declaration.rule, passed)

                    if not passed:
                        self.error(field_name, declaration.message, declaration.params)

        passed = not self._errors
        record_validation(passed)
        logger.debug(
            f"Validation {'passed' if passed else 'failed'}: "
            f"{len(self._validations)} rules, {sum(len(m) for m in self._errors.values())} errors"
        )
        return passed

    def _run_check(self, rule: BaseRule | None, declaration: RuleDeclaration, field_name: str) -> bool:
        if rule is None:
            return False
        try:
            return bool(rule.check(self._fields.get(field_name), declaration.params, field_name, self._fields))
        except Exception as e:
            logger.warning(f"Rule '{declaration.rule}' raised on field '{field_name}': {e}")
            return False

    def error(self, field_name: str, message: str, params: Iterable[Any] = ()) -> None:
        """Format a message and append it to a field's errors."""
        self._errors.setdefault(field_name, []).append(format_message(message, list(params)))

    def errors(self, field_name: str | None = None) -> dict[str, list[str]] | list[str] | bool:
        """
        Get error messages.

        Args:
            field_name: Restrict to one field

        Returns:
            All errors by field; or the field's messages, or False if the
            field has no errors
        """
        if field_name is not None:
            messages = self._errors.get(field_name)
            return list(messages) if messages else False
        return {name: list(messages) for name, messages in self._errors.items()}

    def data(self) -> dict[str, Any]:
        """Copy of the field map being validated."""
        return dict(self._fields)

    @property
    def declarations(self) -> list[RuleDeclaration]:
        return list(self._validations)

    def result(self) -> ValidationResult:
        """Snapshot of the current errors as a ValidationResult."""
        return ValidationResult(
            passed=not self._errors,
            errors=self.errors(),
            rule_count=len(self._validations),
        )

    def reset(self) -> None:
        """Clear fields, errors and declarations."""
        self._fields = {}
        self._errors = {}
        self._validations = []

    def __repr__(self) -> str:
        return f"Validator(fields={list(self._fields)}, rules={len(self._validations)})"
