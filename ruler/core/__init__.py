"""Core package - configuration, logging, errors, and evaluation primitives."""

from .config import Settings, get_settings
from .logging_config import configure_logging
from .errors import RuleError, InvalidActionError
from .context import Context
from .proposition import Action, Predicate, Proposition, is_proposition

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "configure_logging",
    # Errors
    "RuleError",
    "InvalidActionError",
    # Evaluation
    "Context",
    "Action",
    "Predicate",
    "Proposition",
    "is_proposition",
]
