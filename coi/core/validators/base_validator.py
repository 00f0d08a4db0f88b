"""
Base validator interface for all validation rules.

All validators inherit from BaseValidator, check their own parameters in
__init__ and implement evaluate(), which reports the outcome as a RuleOutcome
instead of raising.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any


class FailureKind(str, Enum):
    """Why a chain stopped."""

    PARAMETER = "parameter"
    TYPE_MISMATCH = "type_mismatch"
    RULE = "rule"
    EXECUTION = "execution"


class ValidationError(Exception):
    """Raised by Validator.raise_for_status() when a chain has failed."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class RuleParameterError(ValueError):
    """Raised when a rule is constructed with invalid parameters."""

    def __init__(self, rule_type: str, message: str):
        self.rule_type = rule_type
        self.message = message
        super().__init__(f"[{rule_type}] {message}")


@dataclass(frozen=True)
class RuleOutcome:
    """
    Result of evaluating one rule against one value.

    Attributes:
        passed: Whether the value satisfied the rule
        message: Unprefixed failure text (empty when passed)
        kind: Failure category (None when passed)
    """

    passed: bool
    message: str = ""
    kind: FailureKind | None = None

    @classmethod
    def ok(cls) -> "RuleOutcome":
        return cls(passed=True)

    @classmethod
    def fail(cls, message: str, kind: FailureKind = FailureKind.RULE) -> "RuleOutcome":
        return cls(passed=False, message=message, kind=kind)


def is_number_param(value: Any) -> bool:
    """True for real numbers other than bool and NaN."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements a specific rule type (required, min_length,
    number_range, email, custom, ...).
    """

    def __init__(self, message: str | None = None):
        """
        Initialize validator.

        Args:
            message: Override for the rule's default failure message
        """
        self.message = message

    @abstractmethod
    def evaluate(self, value: Any) -> RuleOutcome:
        """
        Evaluate a value against this rule.

        Args:
            value: The value under test

        Returns:
            RuleOutcome describing success or the reason for failure
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    @property
    def default_message(self) -> str:
        """Message used when no override was supplied."""
        return ""

    def failure(self) -> RuleOutcome:
        """Rule failure carrying the override or the default message."""
        text = self.message if self.message is not None else self.default_message
        return RuleOutcome.fail(text)

    def require_number(self, value: Any, message: str) -> None:
        """
        Check a numeric rule parameter.

        Raises:
            RuleParameterError: If value is not a usable number
        """
        if not is_number_param(value):
            raise RuleParameterError(self.rule_type, message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rule_type={self.rule_type}, message={self.message!r})"
