"""
Logging configuration module for the battle core.

Every module logs through the "rpg" logger. The entry point decides the
verbosity by calling setup_logging, which attaches a rich handler to that
logger only, so embedding applications keep control of the root logger.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "rpg"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level: int | str = logging.INFO, show_time: bool = True) -> None:
    """
    Attaches a rich handler to the battle core logger.

    Calling it again replaces the handler instead of adding a second one.

    Args:
        level (int | str):
            The logging level, as a number or a name such as "DEBUG".
        show_time (bool):
            Whether each record shows its timestamp.

    """
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(width=120, force_jupyter=False),
        show_time=show_time,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def _with_context(message: str, context: dict[str, Any] | None) -> str:
    if not context:
        return message
    pairs = " ".join(f"{key}={value}" for key, value in context.items())
    return f"{message} [{pairs}]"


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs an info message with optional context.

    Args:
        message (str): The info message.
        context (dict[str, Any] | None): Key/value pairs appended to the message.

    """
    logger.info(_with_context(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs a debug message with optional context."""
    logger.debug(_with_context(message, context))
