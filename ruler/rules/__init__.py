"""Rules domain - conditional rules and rule sets."""

from .rule import Branch, Rule, RuleOutcome
from .ruleset import RuleSet

__all__ = [
    "Branch",
    "Rule",
    "RuleOutcome",
    "RuleSet",
]
