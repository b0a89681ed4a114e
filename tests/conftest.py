"""
Shared fixtures: small class definitions with round numbers.
"""

import pytest
from character.character_class import CharacterClass, StatCurve, StatusInfliction
from core.constants import Category, StatusEffect
from core.randomizer import FixedRandomizer


@pytest.fixture
def fixed():
    return FixedRandomizer()


@pytest.fixture
def fighter_class():
    return CharacterClass(
        name="fighter",
        category=Category.PLAYER,
        hp=StatCurve(base=20, increase=5),
        strength=StatCurve(base=10, increase=3),
        speed=StatCurve(base=5, increase=1),
    )


@pytest.fixture
def mage_class():
    return CharacterClass(
        name="sorcerer",
        category=Category.PLAYER,
        hp=StatCurve(base=20, increase=4),
        strength=StatCurve(base=10, increase=2),
        speed=StatCurve(base=5, increase=1),
        mp=StatCurve(base=9, increase=3),
    )


@pytest.fixture
def goblin_class():
    return CharacterClass(
        name="goblin",
        category=Category.COMMON,
        hp=StatCurve(base=100, increase=5),
        strength=StatCurve(base=6, increase=2),
        speed=StatCurve(base=5, increase=1),
    )


@pytest.fixture
def viper_class():
    return CharacterClass(
        name="viper",
        category=Category.RARE,
        hp=StatCurve(base=100, increase=5),
        strength=StatCurve(base=6, increase=2),
        speed=StatCurve(base=5, increase=1),
        inflicts=StatusInfliction(status=StatusEffect.POISON, ratio=5),
    )
