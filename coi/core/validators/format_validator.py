"""
FormatValidator - validates text is composed of allowed character classes.
"""

from typing import Any

from coi.core import messages
from coi.core.patterns import format_pattern

from .base_validator import BaseValidator, FailureKind, RuleOutcome, RuleParameterError


class FormatValidator(BaseValidator):
    """
    Validates that every character of a string belongs to the union of
    the character classes named by the format tokens.

    Parameters:
    - formats: List of tokens from FORMAT_MAP ("number", "letter", "chinese").
      Unknown tokens are ignored, but at least one must be known.

    The empty string contains no disallowed characters and passes.
    """

    def __init__(self, formats: Any, message: str | None = None):
        super().__init__(message)
        if not isinstance(formats, list | tuple):
            raise RuleParameterError(self.rule_type, messages.FORMAT_LIST_PARAM)

        self.formats = list(formats)
        self.pattern = format_pattern(token for token in self.formats if isinstance(token, str))
        if self.pattern is None:
            raise RuleParameterError(self.rule_type, messages.FORMAT_TOKEN_PARAM)

    def evaluate(self, value: Any) -> RuleOutcome:
        if not isinstance(value, str):
            return RuleOutcome.fail(messages.TEXT_TYPE, FailureKind.TYPE_MISMATCH)

        if self.pattern.fullmatch(value) is None:
            return self.failure()
        return RuleOutcome.ok()

    @property
    def default_message(self) -> str:
        return messages.INVALID_FORMAT

    @property
    def rule_type(self) -> str:
        return "require_format"
