"""
Character class module for the battle core.

A character class is a data-driven archetype: the starting value and the
per-level growth of every stat, an optional magic (mp) curve, and an
optional status effect the class inflicts with its attacks. Characters
reference their class definition instead of subclassing it.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core.constants import Category, StatusEffect


class StatCurve(BaseModel):
    """
    Represents the starting value of a stat and its nominal per-level
    increase.
    """

    model_config = ConfigDict(frozen=True)

    base: int = Field(
        description="The value of the stat at level 1.",
        ge=0,
    )
    increase: int = Field(
        description="The nominal amount the stat grows on each level-up.",
        ge=0,
    )

    def at(self, level: int) -> int:
        """
        Returns the canonical (non-randomized) value of the stat at a level.

        Args:
            level (int): The level, starting from 1.

        Returns:
            int: The value of the stat at that level.

        """
        return self.base + (level - 1) * self.increase


class StatusInfliction(BaseModel):
    """A status effect inflicted by the attacks of a class, one time in `ratio`."""

    model_config = ConfigDict(frozen=True)

    status: StatusEffect = Field(
        description="The status effect inflicted.",
    )
    ratio: int = Field(
        default=20,
        description="One attack in `ratio` inflicts the status.",
        ge=1,
    )


class CharacterClass(BaseModel):
    """
    Defines the archetype of a character.

    The definition is immutable and shared by every character of the class.
    Classes with an `mp` curve are magic-capable.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the class.",
        min_length=1,
    )
    category: Category = Field(
        default=Category.COMMON,
        description="The category of the class, which scales the experience it gives.",
    )
    hp: StatCurve = Field(
        description="The max hit points curve.",
    )
    strength: StatCurve = Field(
        description="The strength curve.",
    )
    speed: StatCurve = Field(
        description="The speed curve.",
    )
    mp: StatCurve | None = Field(
        default=None,
        description="The magic points curve, None for non-magic classes.",
    )
    inflicts: StatusInfliction | None = Field(
        default=None,
        description="The status effect innately inflicted by the attacks of the class.",
    )

    def model_post_init(self, _: Any) -> None:
        if self.hp.base <= 0:
            raise ValueError(f"Class {self.name} must start with positive hp.")
        if self.speed.base <= 0:
            raise ValueError(f"Class {self.name} must start with positive speed.")

    @property
    def is_magic(self) -> bool:
        """Returns True if the class can cast spells."""
        return self.mp is not None

    def mp_at(self, level: int) -> int:
        """Returns the canonical mp at the given level, 0 for non-magic classes."""
        if self.mp is None:
            return 0
        return self.mp.at(level)
