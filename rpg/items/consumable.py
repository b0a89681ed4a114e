"""
Consumable module for the battle core.

Defines the recovery items (potions, ethers and remedies) and the Inventory
bag the battle engine draws them from when the player is in trouble.
"""

from collections import defaultdict
from typing import Any

from catchery import log_warning
from pydantic import BaseModel, ConfigDict, Field

from core.constants import ItemKind


class ItemUse(BaseModel):
    """Describes what using a consumable achieved."""

    kind: ItemKind = Field(
        description="The kind of item used.",
    )
    recovered_hp: int = Field(
        default=0,
        description="Hit points restored.",
    )
    recovered_mp: int = Field(
        default=0,
        description="Magic points restored.",
    )
    cured: bool = Field(
        default=False,
        description="Whether a status effect was removed.",
    )


class Consumable(BaseModel):
    """
    Represents a single-use recovery item.

    Potions restore half the canonical class hp at their level, ethers the
    whole canonical class mp at their level, and remedies cure the current
    status effect.
    """

    model_config = ConfigDict(frozen=True)

    kind: ItemKind = Field(
        description="The kind of item.",
    )
    level: int = Field(
        default=1,
        description="The level of the item, which scales its potency.",
        ge=1,
    )

    @classmethod
    def potion(cls, level: int = 1) -> "Consumable":
        return cls(kind=ItemKind.POTION, level=level)

    @classmethod
    def ether(cls, level: int = 1) -> "Consumable":
        return cls(kind=ItemKind.ETHER, level=level)

    @classmethod
    def remedy(cls) -> "Consumable":
        return cls(kind=ItemKind.REMEDY)

    def apply(self, character: Any) -> ItemUse:
        """
        Applies the item to a character.

        Args:
            character (Character):
                The character consuming the item.

        Returns:
            ItemUse:
                What the item restored.

        """
        class_def = character.class_def
        if self.kind == ItemKind.POTION:
            recovered = character.heal(class_def.hp.at(self.level) // 2)
            return ItemUse(kind=self.kind, recovered_hp=recovered)
        if self.kind == ItemKind.ETHER:
            recovered = character.update_mp(class_def.mp_at(self.level))
            return ItemUse(kind=self.kind, recovered_mp=recovered)
        if self.kind == ItemKind.REMEDY:
            return ItemUse(kind=self.kind, cured=character.cure())
        raise ValueError(f"Unknown item kind: {self.kind}")

    def __str__(self) -> str:
        if self.kind == ItemKind.REMEDY:
            return "remedy"
        return f"{self.kind.display_name.lower()}[{self.level}]"


class Inventory:
    """
    A bag of consumables grouped by kind.

    Attributes:
        items (dict[ItemKind, list[Consumable]]):
            The stored items; the last added item of a kind is used first.

    """

    def __init__(self, items: list[Consumable] | None = None) -> None:
        self.items: dict[ItemKind, list[Consumable]] = defaultdict(list)
        for item in items or []:
            self.add(item)

    def add(self, item: Consumable) -> None:
        """Stores an item in the bag."""
        self.items[item.kind].append(item)

    def count(self, kind: ItemKind) -> int:
        """Returns how many items of the given kind are stored."""
        return len(self.items.get(kind, []))

    def has(self, kind: ItemKind) -> bool:
        return self.count(kind) > 0

    def use(self, kind: ItemKind, character: Any) -> ItemUse | None:
        """
        Consumes one item of the given kind on a character.

        Args:
            kind (ItemKind):
                The kind of item to use.
            character (Character):
                The character consuming the item.

        Returns:
            ItemUse | None:
                What the item restored, None if no such item is stored.

        """
        if not self.has(kind):
            log_warning(
                f"No {kind.display_name.lower()} left in the inventory",
                {"kind": kind.name, "character": character.name},
            )
            return None
        item = self.items[kind].pop()
        if not self.items[kind]:
            del self.items[kind]
        return item.apply(character)

    def summary(self) -> dict[str, int]:
        """Returns the number of items stored for each kind."""
        return {kind.name.lower(): len(items) for kind, items in self.items.items()}
