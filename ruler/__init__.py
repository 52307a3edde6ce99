"""Ruler - conditional rules evaluated against a context."""

from ruler.core import (
    Action,
    Context,
    InvalidActionError,
    Predicate,
    Proposition,
    RuleError,
    Settings,
    configure_logging,
    get_settings,
    is_proposition,
)
from ruler.rules import Branch, Rule, RuleOutcome, RuleSet
from ruler.runtime import ExecutionTrace, TraceStep

__all__ = [
    "Action",
    "Branch",
    "Context",
    "ExecutionTrace",
    "InvalidActionError",
    "Predicate",
    "Proposition",
    "Rule",
    "RuleError",
    "RuleOutcome",
    "RuleSet",
    "Settings",
    "TraceStep",
    "configure_logging",
    "get_settings",
    "is_proposition",
]
