"""
Chain state machine.

A validation chain is in one of two states, PASSING or FAILED. Every
transition is a pure function returning a new ChainState; a FAILED state is
returned unchanged by everything except reset().
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from coi.core import messages
from coi.core.validators import BaseValidator, FailureKind, RuleParameterError


class ChainStatus(str, Enum):
    PASSING = "passing"
    FAILED = "failed"


@dataclass(frozen=True)
class Failure:
    """Which rule stopped the chain, and why."""

    rule_type: str
    kind: FailureKind


@dataclass(frozen=True)
class ChainState:
    """
    Immutable snapshot of a validation chain.

    Attributes:
        value: The datum under test
        label: Prefix applied to every recorded message
        status: PASSING or FAILED
        errors: Label-prefixed messages; holds exactly one entry once FAILED
        failure: Details of the failing rule, None while PASSING
    """

    value: Any = None
    label: str = ""
    status: ChainStatus = ChainStatus.PASSING
    errors: tuple[str, ...] = ()
    failure: Failure | None = None

    @property
    def passed(self) -> bool:
        return self.status is ChainStatus.PASSING

    @property
    def failed(self) -> bool:
        return self.status is ChainStatus.FAILED

    @property
    def message(self) -> str:
        """Last recorded message, or the pass sentinel."""
        return self.errors[-1] if self.errors else messages.PASSED

    def fail(self, text: str, rule_type: str, kind: FailureKind) -> "ChainState":
        """Transition to FAILED, recording label + text."""
        return replace(
            self,
            status=ChainStatus.FAILED,
            errors=self.errors + (f"{self.label}{text}",),
            failure=Failure(rule_type=rule_type, kind=kind),
        )


def apply_rule(state: ChainState, factory: Callable[[], BaseValidator]) -> ChainState:
    """
    Build a rule and evaluate it against the state's value.

    Args:
        state: Current chain state
        factory: Zero-argument callable constructing the rule; it may raise
            RuleParameterError for invalid parameters

    Returns:
        The same state when already FAILED or when the rule passes,
        otherwise a FAILED state carrying the rule's message
    """
    if state.failed:
        return state

    try:
        rule = factory()
    except RuleParameterError as e:
        return state.fail(e.message, e.rule_type, FailureKind.PARAMETER)

    outcome = rule.evaluate(state.value)
    if outcome.passed:
        return state
    return state.fail(outcome.message, rule.rule_type, outcome.kind or FailureKind.RULE)


def set_value(state: ChainState, value: Any) -> ChainState:
    if state.failed:
        return state
    return replace(state, value=value)


def set_label(state: ChainState, label: Any) -> ChainState:
    if state.failed:
        return state
    if not isinstance(label, str):
        return state.fail(messages.LABEL_TYPE, "label", FailureKind.TYPE_MISMATCH)
    return replace(state, label=label)


def reset(state: ChainState) -> ChainState:
    """Return to PASSING with no errors, keeping value and label."""
    return replace(state, status=ChainStatus.PASSING, errors=(), failure=None)
