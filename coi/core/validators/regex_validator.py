"""
Regex-based validators.

PatternValidator checks text against one of the built-in REGEX_PATTERNS;
RegexValidator checks any value against a caller-supplied compiled pattern.
"""

from re import Pattern
from typing import Any

from coi.core import messages
from coi.core.patterns import REGEX_PATTERNS

from .base_validator import BaseValidator, FailureKind, RuleOutcome, RuleParameterError


class PatternValidator(BaseValidator):
    """
    Validates that a string fully matches a built-in named pattern.

    Parameters:
    - pattern_name: Key into REGEX_PATTERNS (email, url, phone, id_card,
      positive_integer, chinese)

    Non-string values fail with a type mismatch.
    """

    DEFAULT_MESSAGES = {
        "email": messages.EMAIL,
        "url": messages.URL,
        "phone": messages.PHONE,
        "id_card": messages.ID_CARD,
        "positive_integer": messages.POSITIVE_INTEGER,
        "chinese": messages.CHINESE,
    }

    def __init__(self, pattern_name: str, message: str | None = None):
        super().__init__(message)
        if pattern_name not in self.DEFAULT_MESSAGES:
            raise ValueError(f"Unsupported pattern: {pattern_name}")
        self.pattern_name = pattern_name
        self.pattern = REGEX_PATTERNS[pattern_name]

    def evaluate(self, value: Any) -> RuleOutcome:
        if not isinstance(value, str):
            return RuleOutcome.fail(messages.TEXT_TYPE, FailureKind.TYPE_MISMATCH)

        if self.pattern.fullmatch(value) is None:
            return self.failure()
        return RuleOutcome.ok()

    @property
    def default_message(self) -> str:
        return self.DEFAULT_MESSAGES[self.pattern_name]

    @property
    def rule_type(self) -> str:
        return self.pattern_name


class RegexValidator(BaseValidator):
    """
    Validates that str(value) contains a match for a compiled pattern.

    Parameters:
    - pattern: A compiled re.Pattern. Strings are rejected; anchor the
      pattern with ^/$ to require a whole-value match.
    """

    def __init__(self, pattern: Any, message: str | None = None):
        super().__init__(message)
        if not isinstance(pattern, Pattern):
            raise RuleParameterError(self.rule_type, messages.REGEX_PARAM)
        self.pattern = pattern

    def evaluate(self, value: Any) -> RuleOutcome:
        # Convert to string if needed
        if not isinstance(value, str):
            value_str = str(value)
        else:
            value_str = value

        try:
            matched = self.pattern.search(value_str) is not None
        except TypeError:
            # bytes pattern against text
            return self.failure()

        if not matched:
            return self.failure()
        return RuleOutcome.ok()

    @property
    def default_message(self) -> str:
        return messages.INVALID_FORMAT

    @property
    def rule_type(self) -> str:
        return "require_regexp"
