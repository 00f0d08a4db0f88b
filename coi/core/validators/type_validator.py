"""
NumberValidator - validates that a value can be coerced to a number.
"""

import math
import re
from decimal import Decimal
from numbers import Real
from typing import Any

from coi.core import messages

from .base_validator import BaseValidator, RuleOutcome

# Numeric text forms; anything else (including "1_000", "inf", "nan") is rejected
_DECIMAL_TEXT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY_TEXT = re.compile(r"[+-]?Infinity")
_RADIX_TEXT = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _parse_text(value: str) -> float | int:
    text = value.strip()
    if not text:
        return 0
    if _DECIMAL_TEXT.fullmatch(text):
        return float(text)
    if _INFINITY_TEXT.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    if _RADIX_TEXT.fullmatch(text):
        return int(text, 0)
    raise ValueError(f"Cannot parse '{value}' as number")


def coerce_number(value: Any) -> float | int:
    """
    Coerce a value to a number.

    Follows loose numeric conversion:
    - None, empty and whitespace-only text become 0
    - bools become 0/1
    - text is stripped and parsed as a decimal literal (optional sign,
      fraction and exponent), "Infinity" with optional sign, or an
      unsigned 0x/0o/0b literal
    - a list or tuple becomes 0 when empty, the coerced element when it
      has exactly one, and is rejected otherwise

    NaN is never a valid result.

    Args:
        value: The value to coerce

    Returns:
        The coerced number

    Raises:
        ValueError: If the value is NaN or the text is not numeric
        TypeError: If the value's type cannot be coerced
    """
    if value is None:
        return 0

    # bool before Real, bool is an int subclass
    if isinstance(value, bool):
        return int(value)

    if isinstance(value, Real):
        number = value
    elif isinstance(value, Decimal):
        number = float(value)
    elif isinstance(value, str):
        number = _parse_text(value)
    elif isinstance(value, list | tuple):
        if not value:
            return 0
        if len(value) > 1:
            raise ValueError("Cannot coerce a multi-element sequence to number")
        # A lone element converts through its text form, where "True"/"False" are not numeric
        if isinstance(value[0], bool):
            raise ValueError("Cannot coerce a boolean element to number")
        return coerce_number(value[0])
    else:
        raise TypeError(f"Cannot coerce {type(value).__name__} to number")

    if math.isnan(number):
        raise ValueError("NaN is not a valid number")
    return number


class NumberValidator(BaseValidator):
    """Validates that a value coerces to a number (see coerce_number)."""

    def evaluate(self, value: Any) -> RuleOutcome:
        try:
            coerce_number(value)
        except (ValueError, TypeError):
            return self.failure()
        return RuleOutcome.ok()

    @property
    def default_message(self) -> str:
        return messages.NUMBER

    @property
    def rule_type(self) -> str:
        return "is_number"
