"""
Character stats module for the battle core.

Holds the base stats of a Character (the values grown by levelling, before
any ring or equipment modifier) and its current hit points and magic
points. Every update of hp and mp is clamped at the point of mutation.
"""

from typing import Any

from core.randomizer import Randomizer
from core.utils import clamp

from .character_class import CharacterClass


class CharacterStats:
    """
    Handles the base stats and the current hp/mp of a Character.

    Attributes:
        owner (Any):
            The Character instance that owns this CharacterStats.
        max_hp (int):
            The base maximum hit points.
        max_mp (int):
            The base maximum magic points, 0 for non-magic classes.
        strength (int):
            The base strength.
        speed (int):
            The base speed.
        hp (int):
            The current hit points, in [0, owner.max_hp].
        mp (int):
            The current magic points, in [0, owner.max_mp].

    """

    def __init__(self, owner: Any, class_def: CharacterClass) -> None:
        self.owner: Any = owner
        self.max_hp: int = class_def.hp.base
        self.max_mp: int = class_def.mp.base if class_def.mp else 0
        self.strength: int = class_def.strength.base
        self.speed: int = class_def.speed.base
        self.hp: int = self.max_hp
        self.mp: int = self.max_mp

    # ============================================================================
    # GROWTH
    # ============================================================================

    def grow(self, randomizer: Randomizer) -> None:
        """
        Grows every stat by one randomized level increase.

        The absolute damage (and mp consumption) already taken is carried over,
        so the current values rise by the same amount as the maximums.

        Args:
            randomizer (Randomizer):
                Source of the growth rolls.

        """
        class_def: CharacterClass = self.owner.class_def

        self.strength += randomizer.stat_increase(class_def.strength.increase)
        self.speed += randomizer.stat_increase(class_def.speed.increase)

        hp_damage = self.owner.max_hp - self.hp
        self.max_hp += randomizer.stat_increase(class_def.hp.increase)
        self.hp = clamp(self.owner.max_hp - hp_damage, 0, self.owner.max_hp)

        if class_def.mp is not None:
            mp_used = self.owner.max_mp - self.mp
            self.max_mp += randomizer.stat_increase(class_def.mp.increase)
            self.mp = clamp(self.owner.max_mp - mp_used, 0, self.owner.max_mp)

    # ============================================================================
    # UTILITY METHODS
    # ============================================================================

    def adjust_hp(self, amount: int) -> int:
        """
        Adjusts the current HP by the specified amount.

        Args:
            amount (int):
                The amount to adjust HP by (positive or negative).

        Returns:
            int:
                The actual amount adjusted (may be less than requested if at max
                or min).

        """
        new_hp = clamp(self.hp + amount, 0, self.owner.max_hp)
        actual_adjustment = new_hp - self.hp
        self.hp = new_hp
        return actual_adjustment

    def adjust_mp(self, amount: int) -> int:
        """
        Adjusts the current MP by the specified amount.

        Args:
            amount (int):
                The amount to adjust MP by (positive or negative).

        Returns:
            int:
                The actual amount adjusted.

        """
        new_mp = clamp(self.mp + amount, 0, self.owner.max_mp)
        actual_adjustment = new_mp - self.mp
        self.mp = new_mp
        return actual_adjustment

    def set_hp(self, value: int) -> None:
        """Sets the current HP, clamped into [0, max_hp]."""
        self.hp = clamp(value, 0, self.owner.max_hp)
