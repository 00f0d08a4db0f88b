"""
Rule configuration management.

Loads single-field rule chains from YAML files and provides a builder for
assembling them programmatically.
"""

from collections.abc import Callable
from pathlib import Path
from re import Pattern
from typing import Any

import yaml

from coi.core.models import ValidationRule


class RuleConfigLoader:
    """
    Loads a rule chain from a YAML configuration file.

    Expected YAML format:
    ```yaml
    label: "Username"
    rules:
      - type: required
        message: "is required"
      - type: length_range
        params:
          min: 3
          max: 16
      - type: require_format
        params:
          formats: [letter, number]
      - type: require_regexp
        params:
          pattern: "^[a-z]"
          flags: [IGNORECASE]
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")
        self.label: str | None = None

    def load_rules(self) -> list[ValidationRule]:
        """
        Load and parse validation rules from YAML file.

        Returns:
            Rules in declaration order, suitable for RuleEngine

        Raises:
            ValueError: If YAML is missing the rules list or a rule is malformed
            pydantic.ValidationError: If a rule has an unknown type or bad fields
        """
        with open(self.config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not config or "rules" not in config:
            raise ValueError("Configuration file must contain 'rules' section")

        rule_list = config["rules"]
        if not isinstance(rule_list, list):
            raise ValueError("'rules' must be a list")

        label = config.get("label")
        if label is not None and not isinstance(label, str):
            raise ValueError("'label' must be a string")
        self.label = label

        return [self._parse_rule(rule_def, idx) for idx, rule_def in enumerate(rule_list)]

    def _parse_rule(self, rule_def: Any, idx: int) -> ValidationRule:
        """
        Parse a single rule definition.

        Args:
            rule_def: The rule definition from YAML
            idx: Position of the rule (for error messages)

        Returns:
            Parsed ValidationRule

        Raises:
            ValueError: If rule definition is invalid
        """
        if not isinstance(rule_def, dict):
            raise ValueError(f"Rule #{idx} must be a mapping")
        if "type" not in rule_def:
            raise ValueError(f"Rule #{idx} is missing 'type'")

        return ValidationRule(
            rule_type=rule_def["type"],
            params=rule_def.get("params", rule_def.get("parameters")) or {},
            message=rule_def.get("message"),
            enabled=rule_def.get("enabled", True),
        )


class RuleConfigBuilder:
    """
    Programmatically build a rule chain (for testing or dynamic rules).
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: list[ValidationRule] = []

    def _add(self, rule_type: str, params: dict[str, Any] | None = None, message: str | None = None) -> "RuleConfigBuilder":
        self.rules.append(ValidationRule(rule_type=rule_type, params=params or {}, message=message))
        return self

    def add_required(self, message: str | None = None) -> "RuleConfigBuilder":
        return self._add("required", message=message)

    def add_min_length(self, length: int, message: str | None = None) -> "RuleConfigBuilder":
        return self._add("min_length", {"length": length}, message)

    def add_max_length(self, length: int, message: str | None = None) -> "RuleConfigBuilder":
        return self._add("max_length", {"length": length}, message)

    def add_length_range(self, min_length: int, max_length: int, message: str | None = None) -> "RuleConfigBuilder":
        return self._add("length_range", {"min": min_length, "max": max_length}, message)

    def add_number_range(self, min_value: float, max_value: float, message: str | None = None) -> "RuleConfigBuilder":
        return self._add("number_range", {"min": min_value, "max": max_value}, message)

    def add_format(self, formats: list[str], message: str | None = None) -> "RuleConfigBuilder":
        return self._add("require_format", {"formats": formats}, message)

    def add_pattern(self, pattern_name: str, message: str | None = None) -> "RuleConfigBuilder":
        """Add a built-in pattern rule: email, url, phone, id_card, positive_integer or chinese."""
        return self._add(pattern_name, message=message)

    def add_number(self, message: str | None = None) -> "RuleConfigBuilder":
        return self._add("is_number", message=message)

    def add_regex(self, pattern: str | Pattern, message: str | None = None) -> "RuleConfigBuilder":
        return self._add("require_regexp", {"pattern": pattern}, message)

    def add_custom(self, predicate: Callable[[Any], Any], message: str | None = None) -> "RuleConfigBuilder":
        return self._add("custom", {"predicate": predicate}, message)

    def build(self) -> list[ValidationRule]:
        """Build and return the rule configuration."""
        return list(self.rules)
