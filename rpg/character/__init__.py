"""
Character system module for the battle core.

This module handles the data-driven character classes and the Character
combatant, with its stats, progression, equipment and status effects.
"""

from .character_class import CharacterClass, StatCurve, StatusInfliction
from .character_effects import CharacterEffects
from .character_equipment import CharacterEquipment
from .character_progression import CharacterProgression, base_stat, xp_for_next
from .character_stats import CharacterStats
from .main import Character, create_character

__all__ = [
    # Import from character_class.py
    "CharacterClass",
    "StatCurve",
    "StatusInfliction",
    # Import from character_effects.py
    "CharacterEffects",
    # Import from character_equipment.py
    "CharacterEquipment",
    # Import from character_progression.py
    "CharacterProgression",
    "base_stat",
    "xp_for_next",
    # Import from character_stats.py
    "CharacterStats",
    # Import from main.py
    "Character",
    "create_character",
]
