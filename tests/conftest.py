"""Pytest fixtures for test suite."""

import pytest
from typing import Any

from ruler import Context, Predicate, get_settings


class StubProposition:
    """Proposition with a fixed result that records the contexts it saw."""

    def __init__(self, result: Any):
        self.result = result
        self.calls: list[Context] = []

    def evaluate(self, context: Context) -> Any:
        self.calls.append(context)
        return self.result


class RecordingAction:
    """Action that records its arguments and returns a fixed value."""

    def __init__(self, returns: Any = None):
        self.returns = returns
        self.calls: list[dict[str, Any]] = []

    def __call__(self, values: dict[str, Any]) -> Any:
        self.calls.append(values)
        return self.returns


# =============================================================================
# Core Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from cached settings and RULER_* environment."""
    for key in ("RULER_APP_NAME", "RULER_LOG_LEVEL", "RULER_DEBUG"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def context() -> Context:
    """Context with a couple of bound variables."""
    return Context({"age": 21, "country": "NL"})


@pytest.fixture
def true_condition() -> StubProposition:
    return StubProposition(True)


@pytest.fixture
def false_condition() -> StubProposition:
    return StubProposition(False)


@pytest.fixture
def is_adult() -> Predicate:
    return Predicate(lambda ctx: ctx["age"] >= 18, "age >= 18")


@pytest.fixture
def action() -> RecordingAction:
    return RecordingAction(returns="fired")


@pytest.fixture
def make_condition():
    """Factory for stub conditions with a given result."""
    return StubProposition


@pytest.fixture
def make_action():
    """Factory for recording actions with a given return value."""
    return RecordingAction
