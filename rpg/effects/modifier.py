"""
Modifier module for the battle core.

Pure functions turning a base stat and a set of worn rings into an effective
stat. Nothing here is cached: effective stats are recomputed on every query,
so equipping and unequipping stay consistent.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from core.constants import StatKind
from items.equipment import Equipment
from items.ring import Ring

if TYPE_CHECKING:
    from character.character_class import StatCurve


def ring_factor(rings: Iterable[Ring | None], stat: StatKind) -> float:
    """
    Sums the bonus of every worn ring for a stat.

    Both slots contribute, so two identical rings double the effect.

    Args:
        rings (Iterable[Ring | None]):
            The ring slots, empty slots being None.
        stat (StatKind):
            The stat being modified.

    Returns:
        float:
            The total fractional bonus.

    """
    return sum(ring.factor(stat) for ring in rings if ring is not None)


def apply_factor(base: int, factor: float) -> int:
    """Returns round(base * (1 + factor))."""
    return round(base * (1 + factor))


def ring_bonus(base: int, factor: float) -> int:
    """Returns the extra amount round(base * factor) a factor adds on top of base."""
    return round(base * factor)


def modified_stat(base: int, rings: Iterable[Ring | None], stat: StatKind) -> int:
    """
    Applies the worn rings to a base stat.

    Args:
        base (int):
            The base value of the stat.
        rings (Iterable[Ring | None]):
            The ring slots.
        stat (StatKind):
            The stat being modified.

    Returns:
        int:
            The effective value.

    """
    return apply_factor(base, ring_factor(rings, stat))


def equipment_bonus(piece: Equipment | None, strength_curve: "StatCurve") -> int:
    """
    Returns the strength an optional equipment piece adds.

    Args:
        piece (Equipment | None):
            The worn weapon or armor, if any.
        strength_curve (StatCurve):
            The strength curve of the wearer's class.

    Returns:
        int:
            The additive bonus, 0 for an empty slot.

    """
    if piece is None:
        return 0
    return piece.strength(strength_curve)
