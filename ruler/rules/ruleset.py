"""Ordered collection of rules executed together."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator

from ruler.core.context import Context
from ruler.rules.rule import Rule
from ruler.runtime.trace import ExecutionTrace

logger = logging.getLogger(__name__)

_GENERATED_ID = re.compile(r"rule\[\d+\]")


class RuleSet:
    """Runs a list of rules, in insertion order, against one context."""

    def __init__(self, rules: Iterable[Rule] | None = None, ruleset_id: str | None = None):
        self.ruleset_id = ruleset_id
        self._rules: list[Rule] = []
        for rule in rules or []:
            self.add_rule(rule)

    def add_rule(self, rule: Rule) -> RuleSet:
        """Add a rule; adding the same rule object again is a no-op.

        Unlabelled rules are identified by position as ``rule[<index>]``.

        Returns:
            self (chainable)

        Raises:
            TypeError: If ``rule`` is not a Rule
            ValueError: If the rule id is already used or has the reserved
                ``rule[<index>]`` form
        """
        if not isinstance(rule, Rule):
            raise TypeError(f"RuleSet accepts Rule instances, got {type(rule).__name__}")
        if any(existing is rule for existing in self._rules):
            return self
        if rule.rule_id:
            if _GENERATED_ID.fullmatch(rule.rule_id):
                raise ValueError(f"Rule id '{rule.rule_id}' is reserved for unlabelled rules")
            if any(existing.rule_id == rule.rule_id for existing in self._rules):
                raise ValueError(f"Duplicate rule id: {rule.rule_id}")
        self._rules.append(rule)
        return self

    @property
    def rules(self) -> list[Rule]:
        return list(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(list(self._rules))

    def evaluate_all(self, context: Context) -> dict[str, bool]:
        """Evaluate every rule without running actions."""
        return {
            self._node_id(rule, i): rule.evaluate(context)
            for i, rule in enumerate(self._rules)
        }

    def execute_rules(self, context: Context) -> ExecutionTrace:
        """Execute every rule against the context.

        Errors raised by a condition or action stop the run and propagate.

        Returns:
            Trace with one step per rule
        """
        trace = ExecutionTrace(ruleset_id=self.ruleset_id)

        for i, rule in enumerate(self._rules):
            node_id = self._node_id(rule, i)
            outcome = rule.run(context)
            branch = outcome.branch.value if outcome.branch else None

            if branch:
                description = f"{node_id}: condition {outcome.result}, {branch} action fired"
            else:
                description = f"{node_id}: condition {outcome.result}, no action"
            logger.debug("%s", description)

            trace.add_step(
                node_id=node_id,
                description=description,
                result=outcome.result,
                branch=branch,
                output=outcome.value,
            )

        trace.complete()
        logger.info(
            "Executed %d rules, %d actions fired", len(trace.steps), len(trace.fired)
        )
        return trace

    @staticmethod
    def _node_id(rule: Rule, index: int) -> str:
        return rule.rule_id or f"rule[{index}]"
