"""
Core system module for the battle core.

This module contains the fundamental components shared by every other
package: game constants and enumerations, the injectable randomizer, logging
setup and small utilities.
"""

from .constants import (
    Category,
    EquipmentKind,
    ItemKind,
    NiceEnum,
    RingTag,
    StatKind,
    StatusEffect,
)
from .randomizer import DefaultRandomizer, FixedRandomizer, Randomizer
from .utils import Singleton, clamp, cprint, crule, percentage_of

__all__ = [
    # Import from constants.py
    "Category",
    "EquipmentKind",
    "ItemKind",
    "NiceEnum",
    "RingTag",
    "StatKind",
    "StatusEffect",
    # Import from randomizer.py
    "DefaultRandomizer",
    "FixedRandomizer",
    "Randomizer",
    # Import from utils.py
    "Singleton",
    "clamp",
    "cprint",
    "crule",
    "percentage_of",
]
