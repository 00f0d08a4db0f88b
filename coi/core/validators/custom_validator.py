"""
CustomValidator - validates using a caller-supplied predicate.
"""

from collections.abc import Callable
from typing import Any

from coi.core import messages
from coi.observability.logger import get_logger

from .base_validator import BaseValidator, FailureKind, RuleOutcome, RuleParameterError

logger = get_logger("coi.validators.custom")


class CustomValidator(BaseValidator):
    """
    Validates using a custom predicate.

    Parameters:
    - predicate: A callable taking the value and returning a truthy result
      when the value is valid

    If the predicate raises, the exception is logged and converted into an
    execution failure; it never reaches the caller.

    The predicate signature should be:
        def my_predicate(value: Any) -> bool:
            return value % 2 == 0
    """

    def __init__(self, predicate: Callable[[Any], Any], message: str | None = None):
        super().__init__(message)
        if not callable(predicate):
            raise RuleParameterError(self.rule_type, messages.CALLABLE_PARAM)
        self.predicate = predicate

    def evaluate(self, value: Any) -> RuleOutcome:
        try:
            result = self.predicate(value)
        except Exception as e:
            logger.warning(
                "Custom validator raised",
                extra={
                    "predicate": getattr(self.predicate, "__name__", repr(self.predicate)),
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
                exc_info=True,
            )
            return RuleOutcome.fail(messages.EXECUTION_FAILED, FailureKind.EXECUTION)

        if not result:
            return self.failure()
        return RuleOutcome.ok()

    @property
    def default_message(self) -> str:
        return messages.CUSTOM

    @property
    def rule_type(self) -> str:
        return "custom"
