"""
ValidationResult model representing the outcome of a validate() run (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator


class ValidationResult(BaseModel):
    """
    Snapshot of a validator's state after validate().

    Attributes:
        passed: Overall validation status
        errors: Formatted error messages per field, in declaration order
        rule_count: Number of declarations evaluated
    """

    passed: bool
    errors: dict[str, list[str]] = Field(default_factory=dict)
    rule_count: int = Field(0, ge=0)

    @field_validator("errors")
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies errors is empty."""
        if info.data.get("passed") and v:
            raise ValueError("passed=True but errors is not empty")
        return v

    @property
    def failed_fields(self) -> list[str]:
        return list(self.errors)

    model_config = {
        "json_schema_extra": {
            "example": {
                "passed": False,
                "errors": {
                    "email": ["is not a valid email address"],
                    "age": ["is required", "must be greater than 18"],
                },
                "rule_count": 3,
            }
        }
    }
