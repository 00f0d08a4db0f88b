"""
Validation rule implementations.

Provides validators for required values, lengths, numeric ranges, character
formats, built-in patterns, regular expressions and custom predicates.
"""

from .base_validator import (
    BaseValidator,
    FailureKind,
    RuleOutcome,
    RuleParameterError,
    ValidationError,
)
from .custom_validator import CustomValidator
from .format_validator import FormatValidator
from .length_validator import (
    LengthRangeValidator,
    LengthValidator,
    MaxLengthValidator,
    MinLengthValidator,
)
from .range_validator import RangeValidator
from .regex_validator import PatternValidator, RegexValidator
from .required_field_validator import RequiredFieldValidator
from .type_validator import NumberValidator, coerce_number

__all__ = [
    "BaseValidator",
    "FailureKind",
    "RuleOutcome",
    "RuleParameterError",
    "ValidationError",
    "RequiredFieldValidator",
    "LengthValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "LengthRangeValidator",
    "RangeValidator",
    "NumberValidator",
    "coerce_number",
    "FormatValidator",
    "PatternValidator",
    "RegexValidator",
    "CustomValidator",
]
