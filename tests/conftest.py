"""
Pytest configuration and fixtures for coi tests
"""
import textwrap
from pathlib import Path

import pytest


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests with no external dependencies"
    )


# =======================
# RULE CONFIG FIXTURES
# =======================

@pytest.fixture
def username_rules_yaml() -> str:
    """YAML rule chain for a username field"""
    return textwrap.dedent(
        """
        label: "Username"
        rules:
          - type: required
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
            message: " must start with a letter"
          - type: phone
            enabled: false
        """
    )


@pytest.fixture
def rule_config_file(tmp_path, username_rules_yaml) -> Path:
    """Username rule chain written to a temporary file"""
    path = tmp_path / "username_rules.yaml"
    path.write_text(username_rules_yaml, encoding="utf-8")
    return path
