"""
Character equipment module for the battle core.

Manages the weapon, armor and ring slots of a Character and computes its
effective stats on demand, from the base stats and the worn rings. Weapon
and armor bonuses are added after the ring multiplier.
"""

from collections.abc import Callable
from typing import Any

from catchery import log_warning
from core.constants import (
    MAGIC_MULTIPLIER,
    MAGIC_PHYSICAL_ATTENUATION,
    EquipmentKind,
    RingTag,
    StatKind,
)
from core.logging import log_debug
from core.utils import clamp
from effects.modifier import (
    equipment_bonus,
    modified_stat,
    ring_bonus,
    ring_factor,
)
from items.equipment import Equipment
from items.ring import Ring


class CharacterEquipment:
    """
    Handles the equipment slots and the effective stats of a Character.

    Attributes:
        owner (Any):
            The Character instance that owns this module.
        weapon (Equipment | None):
            The worn weapon.
        armor (Equipment | None):
            The worn armor.
        left_ring (Ring | None):
            The ring worn in the left slot.
        right_ring (Ring | None):
            The ring worn in the right slot.

    """

    def __init__(self, owner: Any) -> None:
        self.owner: Any = owner
        self.weapon: Equipment | None = None
        self.armor: Equipment | None = None
        self.left_ring: Ring | None = None
        self.right_ring: Ring | None = None

    # ============================================================================
    # RING QUERIES
    # ============================================================================

    @property
    def rings(self) -> tuple[Ring | None, Ring | None]:
        """Returns the (left, right) ring slots."""
        return self.left_ring, self.right_ring

    def wears(self, ring: Ring) -> bool:
        """Returns True if the ring is worn in either slot."""
        return ring in self.rings

    def has_tag(self, tag: RingTag) -> bool:
        """Returns True if any worn ring declares the behaviour."""
        return any(ring.has_tag(tag) for ring in self.rings if ring is not None)

    def count_tag(self, tag: RingTag) -> int:
        """Returns how many worn rings declare the behaviour."""
        return sum(1 for ring in self.rings if ring is not None and ring.has_tag(tag))

    # ============================================================================
    # EFFECTIVE STATS
    # ============================================================================

    @property
    def max_hp(self) -> int:
        return modified_stat(self.owner.stats.max_hp, self.rings, StatKind.HP)

    @property
    def max_mp(self) -> int:
        return modified_stat(self.owner.stats.max_mp, self.rings, StatKind.MP)

    @property
    def speed(self) -> int:
        return modified_stat(self.owner.stats.speed, self.rings, StatKind.SPEED)

    @property
    def attack(self) -> int:
        """
        Returns the physical attack: ring-modified strength plus the weapon.

        Magic classes hit with attenuated strength, so they stay useful when
        they run out of mp.
        """
        strength = self.owner.stats.strength
        if self.owner.class_def.is_magic:
            strength = strength // MAGIC_PHYSICAL_ATTENUATION
        weapon = equipment_bonus(self.weapon, self.owner.class_def.strength)
        return modified_stat(strength, self.rings, StatKind.ATTACK) + weapon

    @property
    def magic(self) -> int:
        """Returns the magic attack, 0 for non-magic classes."""
        if not self.owner.class_def.is_magic:
            return 0
        base = self.owner.stats.strength * MAGIC_MULTIPLIER
        return modified_stat(base, self.rings, StatKind.MAGIC)

    @property
    def defense(self) -> int:
        """Returns the defense: the defense ring bonus plus the armor."""
        bonus = ring_bonus(
            self.owner.stats.strength, ring_factor(self.rings, StatKind.DEFENSE)
        )
        armor = equipment_bonus(self.armor, self.owner.class_def.strength)
        return bonus + armor

    # ============================================================================
    # WEAPON AND ARMOR
    # ============================================================================

    def equip(self, piece: Equipment) -> Equipment | None:
        """
        Wears a piece, replacing the one in its slot.

        Args:
            piece (Equipment):
                The weapon or armor to wear.

        Returns:
            Equipment | None:
                The piece previously worn in the slot.

        """
        if piece.kind == EquipmentKind.WEAPON:
            previous, self.weapon = self.weapon, piece
        else:
            previous, self.armor = self.armor, piece
        log_debug(f"{self.owner.colored_name} equips {piece}", {"previous": previous})
        return previous

    def upgrade(self, piece: Equipment | None) -> bool:
        """
        Wears a piece only if it is better than the one in its slot.

        Args:
            piece (Equipment | None):
                The candidate weapon or armor.

        Returns:
            bool:
                True if the piece was worn.

        """
        if piece is None:
            return False
        current = self.weapon if piece.kind == EquipmentKind.WEAPON else self.armor
        if not piece.is_upgrade_from(current):
            return False
        self.equip(piece)
        return True

    # ============================================================================
    # RINGS
    # ============================================================================

    def equip_ring(self, ring: Ring) -> Ring | None:
        """
        Puts a ring in the left slot, moving the previous left ring to the
        right slot.

        Wearing an HP or MP ring raises the current hp or mp by the same
        amount as the maximum, so the damage already taken is kept.

        Args:
            ring (Ring):
                The ring to wear.

        Returns:
            Ring | None:
                The ring that was in the right slot, if any was pushed out.

        """
        old_left, old_right = self.rings

        def change() -> None:
            self.left_ring = ring
            if old_left is not None:
                self.right_ring = old_left

        self._shift_current(change)
        log_debug(f"{self.owner.colored_name} wears {ring.name}")
        return old_right if old_left is not None else None

    def unequip_ring(self, ring: Ring) -> bool:
        """
        Removes one worn instance of a ring, the left one first.

        Args:
            ring (Ring):
                The ring to remove.

        Returns:
            bool:
                True if the ring was worn and has been removed.

        """
        if not self.wears(ring):
            log_warning(
                f"Cannot unequip {ring.name}: the ring is not worn",
                {"character": self.owner.name, "ring": ring.name},
            )
            return False

        def change() -> None:
            if self.left_ring == ring:
                self.left_ring = None
            else:
                self.right_ring = None

        self._shift_current(change)
        return True

    def _shift_current(self, change: Callable[[], None]) -> None:
        """
        Applies a change to the ring slots and moves the current hp and mp by
        the variation of their maximums.

        Gains raise the current value, losses lower it but never below 1.
        """
        stats = self.owner.stats
        old_max_hp, old_max_mp = self.max_hp, self.max_mp
        change()
        new_max_hp, new_max_mp = self.max_hp, self.max_mp

        stats.hp = _shifted(stats.hp, new_max_hp - old_max_hp, new_max_hp)
        stats.mp = _shifted(stats.mp, new_max_mp - old_max_mp, new_max_mp)


def _shifted(current: int, delta: int, new_max: int) -> int:
    if current == 0:
        return 0
    if delta >= 0:
        return clamp(current + delta, 0, new_max)
    return clamp(current + delta, 1, new_max)
