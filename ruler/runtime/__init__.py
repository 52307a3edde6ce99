"""
Runtime package.

Provides execution tracing for rule set runs.
"""

from ruler.runtime.trace import ExecutionTrace, TraceStep

__all__ = [
    "ExecutionTrace",
    "TraceStep",
]
