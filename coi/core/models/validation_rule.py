"""
ValidationRule model representing one step of a single-field rule chain.
"""

from typing import Any, Literal, get_args

from pydantic import BaseModel, Field

RuleType = Literal[
    "required",
    "min_length",
    "max_length",
    "length_range",
    "number_range",
    "require_format",
    "email",
    "url",
    "phone",
    "id_card",
    "positive_integer",
    "is_number",
    "chinese",
    "require_regexp",
    "custom",
]

RULE_TYPES: tuple[str, ...] = get_args(RuleType)


class ValidationRule(BaseModel):
    """
    One rule in a chain, applied in declaration order.

    Attributes:
        rule_type: Which rule to apply
        params: Rule-specific params, e.g. {"min": 1, "max": 100} for
            number_range, {"length": 3} for min_length, {"formats": [...]}
            for require_format, {"pattern": "...", "flags": [...]} for
            require_regexp, {"predicate": callable} for custom
        message: Override for the rule's default message
        enabled: Whether the rule is applied
    """

    rule_type: RuleType
    params: dict[str, Any] = Field(default_factory=dict)
    message: str | None = None
    enabled: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "rule_type": "number_range",
                "params": {"min": 1, "max": 100},
                "message": None,
                "enabled": True,
            }
        }
