"""
Unit tests for Pydantic data models.
"""

import re

import pytest
from pydantic import ValidationError

from fieldrules import RuleDeclaration, ValidationResult


class TestRuleDeclaration:
    """Tests for RuleDeclaration model"""

    def test_valid_declaration(self):
        declaration = RuleDeclaration(rule="length", fields=["name"], params=[3, 5], message="Invalid")
        assert declaration.rule == "length"
        assert declaration.params == [3, 5]

    def test_params_default_to_empty(self):
        declaration = RuleDeclaration(rule="required", fields=["name"], message="Invalid")
        assert declaration.params == []

    def test_empty_rule_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            RuleDeclaration(rule="", fields=["name"], message="Invalid")
        assert "rule" in str(exc_info.value)

    def test_params_keep_arbitrary_objects(self):
        pattern = re.compile(r"\d+")
        declaration = RuleDeclaration(rule="regex", fields=["code"], params=[pattern], message="Invalid")
        assert declaration.params[0] is pattern

    def test_message_is_mutable(self):
        declaration = RuleDeclaration(rule="required", fields=["name"], message="Invalid")
        declaration.message = "is required"
        assert declaration.message == "is required"


class TestValidationResult:
    """Tests for ValidationResult model"""

    def test_passed_result(self):
        result = ValidationResult(passed=True, rule_count=2)
        assert result.errors == {}
        assert result.failed_fields == []

    def test_failed_result(self):
        result = ValidationResult(passed=False, errors={"age": ["Invalid"]}, rule_count=1)
        assert result.failed_fields == ["age"]

    def test_passed_with_errors_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ValidationResult(passed=True, errors={"age": ["Invalid"]})
        assert "passed=True" in str(exc_info.value)

    def test_negative_rule_count_rejected(self):
        with pytest.raises(ValidationError):
            ValidationResult(passed=True, rule_count=-1)

    def test_json_round_trip(self):
        result = ValidationResult(passed=False, errors={"age": ["Invalid"]}, rule_count=1)
        assert ValidationResult.model_validate_json(result.model_dump_json()) == result
