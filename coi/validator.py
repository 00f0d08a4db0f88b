"""
Fluent, chainable field validator.

Example:
    >>> v = Validator("test@example.com", "Email").is_required().is_email()
    >>> v.passed
    True
    >>> Validator("", "Username").is_required().min_length(3).current_message
    'Usernamecannot be empty'

Rule methods never raise for bad data or bad parameters; the first failure
records one label-prefixed message and every later rule becomes a no-op
until reset().
"""

from collections.abc import Callable, Sequence
from typing import Any

from coi.core import chain
from coi.core.chain import ChainState, Failure
from coi.core.models import ValidationResult
from coi.core.validators import (
    BaseValidator,
    CustomValidator,
    FormatValidator,
    LengthRangeValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NumberValidator,
    PatternValidator,
    RangeValidator,
    RegexValidator,
    RequiredFieldValidator,
    ValidationError,
)
from coi.observability.logger import get_logger

logger = get_logger("coi.validator")


class Validator:
    """
    Holds one validation session: a value, a label and the chain state.

    Every method returns self so calls can be chained.
    """

    def __init__(self, value: Any = None, label: str | None = None):
        """
        Create a validator.

        Args:
            value: The datum under test
            label: Prefix for every error message (empty by default)
        """
        self._state = ChainState(value=value)
        if label is not None:
            self._transition(chain.set_label(self._state, label))

    def _transition(self, new_state: ChainState) -> "Validator":
        if new_state.failed and not self._state.failed:
            logger.debug(
                "Validation failed",
                extra={
                    "field_label": new_state.label,
                    "rule": new_state.failure.rule_type,
                    "failure_kind": new_state.failure.kind.value,
                    "error_message": new_state.message,
                },
            )
        self._state = new_state
        return self

    def _apply(self, factory: Callable[[], BaseValidator]) -> "Validator":
        return self._transition(chain.apply_rule(self._state, factory))

    # =======================
    # STATE
    # =======================

    @property
    def value(self) -> Any:
        return self._state.value

    @property
    def label(self) -> str:
        return self._state.label

    @property
    def passed(self) -> bool:
        return self._state.passed

    @property
    def current_message(self) -> str:
        return self._state.message

    @property
    def failure(self) -> Failure | None:
        return self._state.failure

    @property
    def state(self) -> ChainState:
        return self._state

    def get_all_errors(self) -> list[str]:
        """Return a copy of the recorded messages."""
        return list(self._state.errors)

    def result(self) -> ValidationResult:
        """Snapshot the current state as a ValidationResult."""
        failure = self._state.failure
        return ValidationResult(
            label=self._state.label,
            passed=self._state.passed,
            message=self._state.message,
            errors=list(self._state.errors),
            failed_rule=failure.rule_type if failure else None,
            failure_kind=failure.kind.value if failure else None,
        )

    def raise_for_status(self) -> "Validator":
        """
        Raise if the chain has failed.

        Raises:
            ValidationError: Carrying the failing rule, label and message
        """
        if self._state.failed:
            raise ValidationError(
                rule_name=self._state.failure.rule_type,
                field_name=self._state.label,
                message=self._state.message,
            )
        return self

    # =======================
    # MUTATORS
    # =======================

    def set_value(self, value: Any) -> "Validator":
        return self._transition(chain.set_value(self._state, value))

    def set_label(self, label: str) -> "Validator":
        return self._transition(chain.set_label(self._state, label))

    def reset(self) -> "Validator":
        """Clear the failure, keeping value and label. Always runs."""
        self._state = chain.reset(self._state)
        return self

    # =======================
    # RULES
    # =======================

    def is_required(self, message: str | None = None) -> "Validator":
        return self._apply(lambda: RequiredFieldValidator(message))

    def min_length(self, length: int, message: str | None = None) -> "Validator":
        return self._apply(lambda: MinLengthValidator(length, message))

    def max_length(self, length: int, message: str | None = None) -> "Validator":
        return self._apply(lambda: MaxLengthValidator(length, message))

    def length_range(self, min_length: int, max_length: int, message: str | None = None) -> "Validator":
        return self._apply(lambda: LengthRangeValidator(min_length, max_length, message))

    def number_range(self, min_value: float, max_value: float, message: str | None = None) -> "Validator":
        return self._apply(lambda: RangeValidator(min_value, max_value, message))

    def require_format(self, formats: Sequence[str], message: str | None = None) -> "Validator":
        """Allow only characters from the given tokens: "number", "letter", "chinese"."""
        return self._apply(lambda: FormatValidator(formats, message))

    def is_email(self, message: str | None = None) -> "Validator":
        return self._apply(lambda: PatternValidator("email", message))

    def is_url(self, message: str | None = None) -> "Validator":
        return self._apply(lambda: PatternValidator("url", message))

    def is_phone(self, message: str | None = None) -> "Validator":
        """Mainland China mobile number: 1[3-9] followed by 9 digits."""
        return self._apply(lambda: PatternValidator("phone", message))

    def is_id_card(self, message: str | None = None) -> "Validator":
        """Mainland China 18-character resident ID number."""
        return self._apply(lambda: PatternValidator("id_card", message))

    def is_positive_integer(self, message: str | None = None) -> "Validator":
        return self._apply(lambda: PatternValidator("positive_integer", message))

    def is_number(self, message: str | None = None) -> "Validator":
        return self._apply(lambda: NumberValidator(message))

    def is_chinese(self, message: str | None = None) -> "Validator":
        return self._apply(lambda: PatternValidator("chinese", message))

    def require_regexp(self, pattern: Any, message: str | None = None) -> "Validator":
        """Require a compiled pattern to match somewhere in str(value)."""
        return self._apply(lambda: RegexValidator(pattern, message))

    def custom(self, predicate: Callable[[Any], Any], message: str | None = None) -> "Validator":
        """Require predicate(value) to be truthy. Exceptions become failures."""
        return self._apply(lambda: CustomValidator(predicate, message))

    def __repr__(self) -> str:
        return f"Validator(value={self.value!r}, label={self.label!r}, passed={self.passed})"
