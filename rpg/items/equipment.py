"""
Equipment module for the battle core.

Weapons and armors are immutable values identified by their level. The
strength they contribute is derived from the strength curve of the wearer's
class at that level, and a higher level always means a better piece.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from core.constants import EQUIPMENT_STRENGTH_FACTOR, EquipmentKind

if TYPE_CHECKING:
    from character.character_class import StatCurve


class Equipment(BaseModel):
    """
    Represents a weapon or an armor piece.

    A weapon adds its strength to the attack of the wearer, an armor adds it
    to the defense.
    """

    model_config = ConfigDict(frozen=True)

    kind: EquipmentKind = Field(
        description="The slot the piece is worn in.",
    )
    level: int = Field(
        description="The level of the piece.",
        ge=1,
    )

    @classmethod
    def weapon(cls, level: int) -> Equipment:
        """Builds a weapon of the given level."""
        return cls(kind=EquipmentKind.WEAPON, level=level)

    @classmethod
    def armor(cls, level: int) -> Equipment:
        """Builds an armor of the given level."""
        return cls(kind=EquipmentKind.ARMOR, level=level)

    @property
    def name(self) -> str:
        return f"{self.kind.display_name.lower()}[{self.level}]"

    def strength(self, strength_curve: StatCurve) -> int:
        """
        Returns the strength contributed to a wearer.

        Args:
            strength_curve (StatCurve):
                The strength curve of the wearer's class.

        Returns:
            int:
                Half the canonical class strength at the level of the piece,
                rounded.

        """
        return round(strength_curve.at(self.level) * EQUIPMENT_STRENGTH_FACTOR)

    def is_upgrade_from(self, other: Equipment | None) -> bool:
        """
        Returns True if this piece is better than the other one.

        Args:
            other (Equipment | None): The currently worn piece, if any.

        Returns:
            bool: True if nothing is worn or the other piece has a lower level.

        """
        if other is None:
            return True
        return self.level > other.level

    def __str__(self) -> str:
        return self.name
