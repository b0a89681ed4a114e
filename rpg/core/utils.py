"""
Utilities module for the battle core.

Provides small shared helpers: console printing with rich formatting,
the singleton metaclass, and the integer clamps used by every stat update.
"""

from __future__ import annotations

from typing import Any, Generic

from rich.console import Console
from rich.rule import Rule
from typing_extensions import TypeVar

# Initialize the rich console.
_console = Console(markup=True, width=120, force_terminal=True, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


# ---- Singleton Metaclass ----


_T = TypeVar("_T")


class Singleton(type, Generic[_T]):
    """Metaclass that returns the same instance every time."""

    _instances: dict[Singleton[_T], _T] = {}

    def __call__(cls, *args: Any, **kwargs: Any) -> _T:
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


# ---- Numeric Helpers ----


def clamp(value: int, lower: int, upper: int) -> int:
    """
    Clamps a value into the [lower, upper] interval.

    Args:
        value (int): The value to clamp.
        lower (int): The lowest allowed value.
        upper (int): The highest allowed value.

    Returns:
        int: The clamped value.

    """
    return max(lower, min(value, upper))


def percentage_of(value: int, percent: int) -> int:
    """Returns percent% of value, rounded down and never lower than 1."""
    return max(1, value * percent // 100)
