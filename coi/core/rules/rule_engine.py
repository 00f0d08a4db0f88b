"""
Rule engine for applying declarative rule chains to a single value.

The engine dispatches each enabled ValidationRule onto the matching fluent
Validator method, in order. Short-circuiting is the Validator's: once a
rule fails, the remaining rules are no-ops.
"""

import re
from collections.abc import Callable
from typing import Any

from coi.core.models import ValidationResult, ValidationRule
from coi.validator import Validator

Dispatch = Callable[[Validator, dict[str, Any], str | None], Validator]


def _compile_regex(params: dict[str, Any]) -> re.Pattern:
    """
    Compile the pattern param of a require_regexp rule.

    Raises:
        ValueError: If the pattern is missing, the flags are unknown or the
            regex does not compile
    """
    pattern = params.get("pattern")
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise ValueError("require_regexp requires a 'pattern' string or compiled pattern")

    flags = params.get("flags", 0)
    if isinstance(flags, list | tuple):
        combined = 0
        for name in flags:
            try:
                combined |= re.RegexFlag[str(name).upper()]
            except KeyError:
                raise ValueError(f"Unknown regex flag: {name}")
        flags = combined

    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise ValueError(f"Invalid regex pattern: {e}")


class RuleEngine:
    """
    Applies an ordered list of rules to one value at a time.
    """

    DISPATCH: dict[str, Dispatch] = {
        "required": lambda v, p, m: v.is_required(m),
        "min_length": lambda v, p, m: v.min_length(p.get("length"), m),
        "max_length": lambda v, p, m: v.max_length(p.get("length"), m),
        "length_range": lambda v, p, m: v.length_range(p.get("min"), p.get("max"), m),
        "number_range": lambda v, p, m: v.number_range(p.get("min"), p.get("max"), m),
        "require_format": lambda v, p, m: v.require_format(p.get("formats"), m),
        "email": lambda v, p, m: v.is_email(m),
        "url": lambda v, p, m: v.is_url(m),
        "phone": lambda v, p, m: v.is_phone(m),
        "id_card": lambda v, p, m: v.is_id_card(m),
        "positive_integer": lambda v, p, m: v.is_positive_integer(m),
        "is_number": lambda v, p, m: v.is_number(m),
        "chinese": lambda v, p, m: v.is_chinese(m),
        "require_regexp": lambda v, p, m: v.require_regexp(p.get("pattern"), m),
        "custom": lambda v, p, m: v.custom(p.get("predicate"), m),
    }

    def __init__(self, rules: list[ValidationRule | dict[str, Any]]):
        """
        Initialize the rule engine.

        Args:
            rules: ValidationRule instances, or dicts with the same fields

        Raises:
            ValueError: If a regex rule cannot compile
            pydantic.ValidationError: If a dict rule is malformed
        """
        self.rules: list[ValidationRule] = [
            rule if isinstance(rule, ValidationRule) else ValidationRule(**rule)
            for rule in rules
        ]
        self.steps: list[tuple[ValidationRule, dict[str, Any]]] = []
        self._build_steps()

    def _build_steps(self) -> None:
        """Resolve enabled rules into (rule, params) steps."""
        for rule in self.rules:
            # Skip disabled rules
            if not rule.enabled:
                continue

            params = dict(rule.params)
            if rule.rule_type == "require_regexp":
                params["pattern"] = _compile_regex(params)
            self.steps.append((rule, params))

    def apply(self, validator: Validator) -> Validator:
        """
        Apply every enabled rule to an existing validator.

        Args:
            validator: The validator to chain onto

        Returns:
            The same validator
        """
        for rule, params in self.steps:
            self.DISPATCH[rule.rule_type](validator, params, rule.message)
        return validator

    def validate(self, value: Any, label: str | None = None) -> ValidationResult:
        """
        Validate a value with a fresh Validator.

        Args:
            value: The value to validate
            label: Message prefix

        Returns:
            ValidationResult for the value
        """
        return self.apply(Validator(value, label)).result()

    def validate_batch(self, values: list[Any], label: str | None = None) -> list[ValidationResult]:
        """Validate each value independently with the same chain."""
        return [self.validate(value, label) for value in values]

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts and types
        """
        counts: dict[str, int] = {}
        for rule, _ in self.steps:
            counts[rule.rule_type] = counts.get(rule.rule_type, 0) + 1
        return {
            "total_rules": len(self.steps),
            "disabled_rules": len(self.rules) - len(self.steps),
            "rules_by_type": counts,
        }
