"""
Execution tracing for rule sets.

Records, per rule, whether its condition held and which action fired,
so a run can be audited or explained afterwards.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


class TraceStep(BaseModel):
    """A single rule execution within a trace."""

    node_id: str
    """Identifier of the rule (its rule_id, or ``rule[<index>]``)."""

    description: str
    """Human-readable summary of what happened."""

    result: bool
    """What the rule's condition evaluated to."""

    branch: str | None = None
    """Which action fired ("true"/"false"), None when nothing fired."""

    output: Any = None
    """Return value of the action that fired."""


class ExecutionTrace(BaseModel):
    """Complete trace of one rule set execution."""

    ruleset_id: str | None = None

    started_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    """ISO timestamp of when execution started."""

    completed_at: str | None = None
    """ISO timestamp of when execution completed."""

    steps: list[TraceStep] = Field(default_factory=list)

    def add_step(
        self,
        node_id: str,
        description: str,
        result: bool,
        branch: str | None = None,
        output: Any = None,
    ) -> TraceStep:
        """Add a step to the trace.

        Returns:
            The created TraceStep
        """
        step = TraceStep(
            node_id=node_id,
            description=description,
            result=result,
            branch=branch,
            output=output,
        )
        self.steps.append(step)
        return step

    def complete(self) -> None:
        """Mark the trace as complete."""
        self.completed_at = datetime.now(timezone.utc).isoformat()

    @property
    def fired(self) -> list[TraceStep]:
        """Steps where an action was invoked."""
        return [step for step in self.steps if step.branch is not None]

    def to_legacy_trace(self) -> list[dict[str, Any]]:
        """Flatten steps into plain dictionaries."""
        return [
            {
                "node_id": step.node_id,
                "description": step.description,
                "result": step.result,
                "branch": step.branch,
            }
            for step in self.steps
        ]
