"""
ValidationResult model: a snapshot of a Validator after its chain has run.
"""

from pydantic import BaseModel, Field, field_validator


class ValidationResult(BaseModel):
    """
    Outcome of validating one value.

    Attributes:
        label: Label the messages were prefixed with
        passed: Overall validation status
        message: The current message (pass sentinel when passed)
        errors: Recorded label-prefixed messages
        failed_rule: Rule type that stopped the chain
        failure_kind: Category of the failure (parameter, type_mismatch, rule, execution)
    """

    label: str = ""
    passed: bool
    message: str
    errors: list[str] = Field(default_factory=list)
    failed_rule: str | None = None
    failure_kind: str | None = None

    @field_validator("errors")
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies errors is empty and passed=False implies it is not."""
        passed = info.data.get("passed")
        if passed and len(v) > 0:
            raise ValueError("passed=True but errors is not empty")
        if passed is False and len(v) == 0:
            raise ValueError("passed=False but errors is empty")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "label": "Email",
                "passed": False,
                "message": "Emailinvalid email",
                "errors": ["Emailinvalid email"],
                "failed_rule": "email",
                "failure_kind": "rule",
            }
        }
