"""
Data models for rule definitions and validation results.

All models use Pydantic for runtime validation and type safety.
"""

from .validation_result import ValidationResult
from .validation_rule import RULE_TYPES, ValidationRule

__all__ = [
    "RULE_TYPES",
    "ValidationRule",
    "ValidationResult",
]
