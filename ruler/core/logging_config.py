"""Logging setup for the ``ruler`` package."""

import logging
import sys

from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_HANDLER_NAME = "ruler-console"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a console handler to the ``ruler`` logger.

    Calling this more than once replaces the level but never stacks handlers.

    Args:
        level: Explicit level; falls back to ``Settings.log_level``, or DEBUG
            when ``Settings.debug`` is set.

    Returns:
        The configured package logger
    """
    settings = get_settings()
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger("ruler")
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
