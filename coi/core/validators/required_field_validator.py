"""
RequiredFieldValidator - ensures a value is present and not empty.
"""

from collections.abc import Mapping, Sequence, Set
from typing import Any

from coi.core import messages
from coi.core.patterns import match_pattern

from .base_validator import BaseValidator, RuleOutcome


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a value is present and not empty.

    Fails if:
    - Value is None
    - Value is a whitespace-only string
    - Value is an empty sequence, mapping or set
    """

    def evaluate(self, value: Any) -> RuleOutcome:
        if self._is_empty(value):
            return self.failure()
        return RuleOutcome.ok()

    @staticmethod
    def _is_empty(value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, str):
            return match_pattern("whitespace", value)
        if isinstance(value, Sequence | Mapping | Set):
            return len(value) == 0
        return False

    @property
    def default_message(self) -> str:
        return messages.REQUIRED

    @property
    def rule_type(self) -> str:
        return "required"
