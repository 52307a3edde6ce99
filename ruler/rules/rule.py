"""Rule: a proposition paired with actions for each outcome."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, SkipValidation

from ruler.core.context import Context
from ruler.core.errors import InvalidActionError
from ruler.core.proposition import Action, Proposition

logger = logging.getLogger(__name__)


class Branch(str, Enum):
    """Which of a rule's actions fired."""

    TRUE = "true"
    FALSE = "false"


class RuleOutcome(BaseModel):
    """Result of running a rule once."""

    rule_id: str | None = None
    """The rule that was run (None for anonymous rules)."""

    result: bool
    """What the rule's condition evaluated to."""

    branch: Branch | None = None
    """Which action fired, None when no action was invoked."""

    value: Any = None
    """Return value of the action that fired."""

    @property
    def fired(self) -> bool:
        """Whether an action was invoked."""
        return self.branch is not None


class Rule(BaseModel):
    """A conditional Proposition with optional actions for either outcome.

    The condition is evaluated against a Context; when it holds,
    ``action_true`` is called with ``context.values()``, otherwise
    ``action_false`` is. Either action may be left unset.

    Callability of actions is checked when the rule executes, not when it
    is built. Use ``Rule.build`` for eager checking. With
    ``strict_actions=False`` only the true action is checked; a
    non-callable false action is called as-is.

    Rules are themselves Propositions, so a rule can be the condition of
    another rule.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    condition: Proposition
    action_true: SkipValidation[Action | None] = None
    action_false: SkipValidation[Action | None] = None
    rule_id: str | None = None
    strict_actions: bool = True

    def __init__(
        self,
        condition: Proposition | None = None,
        action_true: Action | None = None,
        action_false: Action | None = None,
        **data: Any,
    ):
        super().__init__(
            condition=condition,
            action_true=action_true,
            action_false=action_false,
            **data,
        )

    @classmethod
    def build(
        cls,
        condition: Proposition,
        action_true: Action | None = None,
        action_false: Action | None = None,
        rule_id: str | None = None,
        strict_actions: bool = True,
    ) -> Rule:
        """Create a rule, rejecting non-callable actions up front.

        Raises:
            InvalidActionError: If a supplied action is not callable
        """
        if action_true is not None and not callable(action_true):
            raise InvalidActionError(Branch.TRUE.value, rule_id)
        if action_false is not None and not callable(action_false):
            raise InvalidActionError(Branch.FALSE.value, rule_id)
        return cls(
            condition,
            action_true,
            action_false,
            rule_id=rule_id,
            strict_actions=strict_actions,
        )

    def evaluate(self, context: Context) -> bool:
        """Evaluate the rule's condition against the context."""
        return self.condition.evaluate(context)

    def execute(self, context: Context) -> Any:
        """Evaluate the rule and invoke the matching action, if any.

        Returns:
            The action's return value, or None when no action fired

        Raises:
            InvalidActionError: If the action to invoke is not callable
        """
        return self.run(context).value

    def run(self, context: Context) -> RuleOutcome:
        """Like ``execute``, but report which branch fired."""
        result = self.evaluate(context)
        logger.debug("Rule %s evaluated to %s", self.rule_id or "<anonymous>", result)

        if result and self.action_true is not None:
            if not callable(self.action_true):
                raise InvalidActionError(Branch.TRUE.value, self.rule_id)
            return self._invoke(self.action_true, Branch.TRUE, context)

        if not result and self.action_false is not None:
            if self.strict_actions and not callable(self.action_false):
                raise InvalidActionError(Branch.FALSE.value, self.rule_id)
            return self._invoke(self.action_false, Branch.FALSE, context)

        return RuleOutcome(rule_id=self.rule_id, result=bool(result))

    def _invoke(self, action: Any, branch: Branch, context: Context) -> RuleOutcome:
        logger.debug("Rule %s firing %s action", self.rule_id or "<anonymous>", branch.value)
        value = action(context.values())
        return RuleOutcome(
            rule_id=self.rule_id,
            result=branch is Branch.TRUE,
            branch=branch,
            value=value,
        )
