"""
Default message text used by validators.

Templates containing ``{...}`` placeholders are filled with rule parameters
through render().
"""

import math
from typing import Any


def number_text(value: Any) -> str:
    """Render a numeric parameter: 100.0 as "100", inf as "Infinity"."""
    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def render(template: str, **params: Any) -> str:
    """Fill a message template, rendering each parameter with number_text()."""
    return template.format(**{name: number_text(value) for name, value in params.items()})


PASSED = "passed"

# Rule defaults
REQUIRED = "cannot be empty"
MIN_LENGTH = "cannot be less than {length}"
MAX_LENGTH = "cannot be more than {length}"
LENGTH_RANGE = "length must be between {min}-{max}"
NUMBER_RANGE = "value must be between {min}-{max}"
INVALID_FORMAT = "invalid format"
EMAIL = "invalid email"
URL = "invalid URL"
PHONE = "invalid phone number"
ID_CARD = "invalid ID number"
POSITIVE_INTEGER = "must be a positive integer"
NUMBER = "must be a valid number"
CHINESE = "must be Chinese text"
CUSTOM = "validation failed"

# Parameter errors
LENGTH_PARAM = "length parameter must be a number"
MIN_LENGTH_PARAM = "minimum length parameter must be a number"
MAX_LENGTH_PARAM = "maximum length parameter must be a number"
MIN_VALUE_PARAM = "minimum value parameter must be a number"
MAX_VALUE_PARAM = "maximum value parameter must be a number"
FORMAT_LIST_PARAM = "format parameter must be a list"
FORMAT_TOKEN_PARAM = "invalid format parameter"
REGEX_PARAM = "invalid regular expression parameter"
CALLABLE_PARAM = "validator must be callable"

# Type mismatches
LABEL_TYPE = "label must be a string"
TEXT_TYPE = "must be text"
EMPTY_DATA = "data cannot be empty"
NO_LENGTH = "data must have a length property"

# Custom predicate raised
EXECUTION_FAILED = "validator execution failed"
