"""Diagnostics for huelog itself, using loguru.

huelog is imported into other applications, so its own messages stay
disabled until the application calls ``enable_diagnostics()``.
"""

import sys
from typing import Any

from loguru import logger

from huelog.config import settings

logger.disable("huelog")


def enable_diagnostics(level: str | None = None, sink: Any = sys.stderr) -> int:
    """
    Turn on huelog's internal diagnostics.

    Args:
        level: Minimum level name (defaults to settings.log_level)
        sink: Any loguru sink, stderr by default

    Returns:
        The loguru handler id, for disable_diagnostics()
    """
    logger.enable("huelog")
    # colorize=True forces ANSI colors even without TTY
    return logger.add(
        sink,
        level=(level or settings.log_level).upper(),
        colorize=True,
        filter="huelog",
    )


def disable_diagnostics(handler_id: int | None = None) -> None:
    """Turn diagnostics off again, removing the handler if one is given."""
    if handler_id is not None:
        logger.remove(handler_id)
    logger.disable("huelog")


__all__ = ["logger", "enable_diagnostics", "disable_diagnostics"]
