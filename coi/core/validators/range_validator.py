"""
RangeValidator - validates numeric values are within a specified range.
"""

from typing import Any

from coi.core import messages

from .base_validator import BaseValidator, RuleOutcome
from .type_validator import coerce_number


class RangeValidator(BaseValidator):
    """
    Validates that a value coerces to a number within [min, max].

    Parameters:
    - min_value: Minimum value (inclusive)
    - max_value: Maximum value (inclusive)

    A value that cannot be coerced is a rule failure with its own
    message, not a parameter error.
    """

    def __init__(self, min_value: Any, max_value: Any, message: str | None = None):
        super().__init__(message)
        self.min_value = min_value
        self.max_value = max_value
        self.require_number(min_value, messages.MIN_VALUE_PARAM)
        self.require_number(max_value, messages.MAX_VALUE_PARAM)

    def evaluate(self, value: Any) -> RuleOutcome:
        try:
            number = coerce_number(value)
        except (ValueError, TypeError):
            return RuleOutcome.fail(messages.NUMBER)

        if number < self.min_value or number > self.max_value:
            return self.failure()
        return RuleOutcome.ok()

    @property
    def default_message(self) -> str:
        return messages.render(messages.NUMBER_RANGE, min=self.min_value, max=self.max_value)

    @property
    def rule_type(self) -> str:
        return "number_range"
