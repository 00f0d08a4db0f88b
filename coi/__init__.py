"""
coi - a fluent, chainable field validator.

Attach a value and a label, chain rule checks, and read back the first
failure:

    from coi import Validator

    v = Validator("13800138000", "Phone").is_required().is_phone()
    if not v.passed:
        print(v.current_message)
"""

from coi.core.models import ValidationResult, ValidationRule
from coi.core.rules import RuleConfigBuilder, RuleConfigLoader, RuleEngine
from coi.core.validators import FailureKind, ValidationError
from coi.validator import Validator

__version__ = "1.0.3"

__all__ = [
    "Validator",
    "ValidationError",
    "FailureKind",
    "ValidationRule",
    "ValidationResult",
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
]
