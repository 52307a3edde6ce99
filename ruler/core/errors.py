"""Exceptions raised by rules."""


class RuleError(Exception):
    """Base class for rule errors."""


class InvalidActionError(RuleError, TypeError):
    """A rule action is set but cannot be invoked."""

    def __init__(self, branch: str, rule_id: str | None = None):
        self.branch = branch
        self.rule_id = rule_id
        target = f"rule '{rule_id}'" if rule_id else "rule"
        super().__init__(f"Rule actions must be callable ({branch} action of {target}).")
