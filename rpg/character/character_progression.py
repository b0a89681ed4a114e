"""
Character progression module for the battle core.

Implements the experience curve and the level-up loop. The stat growth of
each level is drawn through the Randomizer, so two characters reaching the
same level may end with different stats.
"""

import math
from typing import Any

from core.constants import XP_BASE, XP_EXPONENT
from core.logging import log_debug
from core.randomizer import Randomizer

from .character_class import StatCurve


def xp_for_next(level: int) -> int:
    """
    Returns the experience points required to move past the given level.

    Args:
        level (int): The current level.

    Returns:
        int: floor(30 * level ** 1.5).

    """
    return math.floor(XP_BASE * level**XP_EXPONENT)


def base_stat(curve: StatCurve, level: int, randomizer: Randomizer) -> int:
    """
    Returns a stat at a level by summing its starting value and one
    randomized increase for each level-up.

    Args:
        curve (StatCurve): The stat curve of the class.
        level (int): The target level.
        randomizer (Randomizer): Source of the growth rolls.

    Returns:
        int: The value of the stat at the level.

    """
    if level < 1:
        raise ValueError(f"Level must be at least 1, got {level}.")
    value = curve.base
    for _ in range(level - 1):
        value += randomizer.stat_increase(curve.increase)
    return value


class CharacterProgression:
    """
    Tracks the level and accumulated experience of a Character.

    Attributes:
        owner (Any):
            The Character instance that owns this module.
        level (int):
            The current level, at least 1.
        xp (int):
            The experience accumulated towards the next level.

    """

    def __init__(self, owner: Any) -> None:
        self.owner: Any = owner
        self.level: int = 1
        self.xp: int = 0

    @property
    def xp_for_next(self) -> int:
        """Returns the experience required to reach the next level."""
        return xp_for_next(self.level)

    def increase_level(self, randomizer: Randomizer) -> None:
        """
        Raises the level by one and grows all the stats of the owner.

        Args:
            randomizer (Randomizer): Source of the growth rolls.

        """
        self.level += 1
        self.owner.stats.grow(randomizer)

    def add_experience(self, amount: int, randomizer: Randomizer) -> int:
        """
        Adds experience, levelling up as many times as the total allows.

        Args:
            amount (int):
                The experience gained, not negative.
            randomizer (Randomizer):
                Source of the growth rolls.

        Returns:
            int:
                The number of level-ups triggered.

        """
        if amount < 0:
            raise ValueError(f"Experience cannot be negative, got {amount}.")
        self.xp += amount

        levels_up = 0
        for_next = self.xp_for_next
        while self.xp >= for_next:
            self.increase_level(randomizer)
            self.xp -= for_next
            levels_up += 1
            for_next = self.xp_for_next

        if levels_up:
            log_debug(
                f"{self.owner.colored_name} reached level {self.level}",
                {"levels_up": levels_up, "xp": self.xp},
            )
        return levels_up
