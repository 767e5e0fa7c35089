"""
RuleDeclaration model representing one rule bound to fields, parameters and a message.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RuleDeclaration(BaseModel):
    """
    One rule applied to one or more fields.

    Attributes:
        rule: Rule name ("required", "length", or a registered name)
        fields: Target field names, checked in order
        params: Positional rule parameters (e.g. [3, 5] for length)
        message: Message template used when the check fails
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        json_schema_extra={
            "example": {
                "rule": "length",
                "fields": ["username"],
                "params": [3, 16],
                "message": "must be between {0} and {1} characters",
            }
        },
    )

    rule: str = Field(..., min_length=1)
    fields: list[str]
    params: list[Any] = Field(default_factory=list)
    message: str
