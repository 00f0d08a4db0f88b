"""
Length validators - validate the length of text and ordered sequences.
"""

from collections.abc import Sequence
from typing import Any

from coi.core import messages

from .base_validator import BaseValidator, FailureKind, RuleOutcome


class LengthValidator(BaseValidator):
    """
    Shared length handling for min_length, max_length and length_range.

    Only text and ordered sequences have a length. None and any other
    value fail with a type mismatch before the bounds are checked.
    Subclasses implement in_bounds().
    """

    def evaluate(self, value: Any) -> RuleOutcome:
        if value is None:
            return RuleOutcome.fail(messages.EMPTY_DATA, FailureKind.TYPE_MISMATCH)
        if not isinstance(value, str | Sequence):
            return RuleOutcome.fail(messages.NO_LENGTH, FailureKind.TYPE_MISMATCH)

        if not self.in_bounds(len(value)):
            return self.failure()
        return RuleOutcome.ok()

    def in_bounds(self, length: int) -> bool:
        raise NotImplementedError


class MinLengthValidator(LengthValidator):
    """Validates len(value) >= length."""

    def __init__(self, length: Any, message: str | None = None):
        super().__init__(message)
        self.length = length
        self.require_number(length, messages.LENGTH_PARAM)

    def in_bounds(self, length: int) -> bool:
        return length >= self.length

    @property
    def default_message(self) -> str:
        return messages.render(messages.MIN_LENGTH, length=self.length)

    @property
    def rule_type(self) -> str:
        return "min_length"


class MaxLengthValidator(LengthValidator):
    """Validates len(value) <= length."""

    def __init__(self, length: Any, message: str | None = None):
        super().__init__(message)
        self.length = length
        self.require_number(length, messages.LENGTH_PARAM)

    def in_bounds(self, length: int) -> bool:
        return length <= self.length

    @property
    def default_message(self) -> str:
        return messages.render(messages.MAX_LENGTH, length=self.length)

    @property
    def rule_type(self) -> str:
        return "max_length"


class LengthRangeValidator(LengthValidator):
    """
    Validates min_length <= len(value) <= max_length.

    Parameters:
    - min_length: Minimum length (inclusive)
    - max_length: Maximum length (inclusive)
    """

    def __init__(self, min_length: Any, max_length: Any, message: str | None = None):
        super().__init__(message)
        self.min_length = min_length
        self.max_length = max_length
        self.require_number(min_length, messages.MIN_LENGTH_PARAM)
        self.require_number(max_length, messages.MAX_LENGTH_PARAM)

    def in_bounds(self, length: int) -> bool:
        return self.min_length <= length <= self.max_length

    @property
    def default_message(self) -> str:
        return messages.render(messages.LENGTH_RANGE, min=self.min_length, max=self.max_length)

    @property
    def rule_type(self) -> str:
        return "length_range"
