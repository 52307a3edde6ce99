"""Proposition protocol and action types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .context import Context


Action = Callable[[Mapping[str, Any]], Any]
"""Callable invoked with a snapshot of the context's bound values."""


@runtime_checkable
class Proposition(Protocol):
    """Anything that evaluates to a boolean against a context."""

    def evaluate(self, context: Context) -> bool: ...


class Predicate:
    """Adapts a plain ``fn(context) -> bool`` callable into a Proposition.

    Example:
        adult = Predicate(lambda ctx: ctx["age"] >= 18, "age >= 18")
    """

    def __init__(self, fn: Callable[[Context], Any], description: str | None = None):
        if not callable(fn):
            raise TypeError("Predicate requires a callable")
        self.fn = fn
        self.description = description or getattr(fn, "__name__", "predicate")

    def evaluate(self, context: Context) -> bool:
        return bool(self.fn(context))

    def __repr__(self) -> str:
        return f"Predicate({self.description!r})"


def is_proposition(obj: Any) -> bool:
    """Check whether an object can serve as a rule condition."""
    return isinstance(obj, Proposition)
