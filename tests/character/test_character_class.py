"""
Tests for the data-driven character class definitions.
"""

import pytest
from character.character_class import CharacterClass, StatCurve, StatusInfliction
from core.constants import Category, StatusEffect
from pydantic import ValidationError


def test_stat_curve_at():
    curve = StatCurve(base=10, increase=3)
    assert curve.at(1) == 10
    assert curve.at(2) == 13
    assert curve.at(5) == 22


def test_stat_curve_rejects_negative_values():
    with pytest.raises(ValidationError):
        StatCurve(base=-1, increase=1)
    with pytest.raises(ValidationError):
        StatCurve(base=1, increase=-1)


def test_class_defaults(fighter_class):
    assert not fighter_class.is_magic
    assert fighter_class.mp_at(3) == 0
    assert fighter_class.inflicts is None


def test_magic_class(mage_class):
    assert mage_class.is_magic
    assert mage_class.mp_at(1) == 9
    assert mage_class.mp_at(3) == 15


def test_default_infliction_ratio():
    infliction = StatusInfliction(status=StatusEffect.BURN)
    assert infliction.ratio == 20


def test_class_is_frozen(fighter_class):
    with pytest.raises(ValidationError):
        fighter_class.name = "other"


def test_class_requires_positive_hp():
    with pytest.raises(ValueError):
        CharacterClass(
            name="ghost",
            hp=StatCurve(base=0, increase=1),
            strength=StatCurve(base=1, increase=1),
            speed=StatCurve(base=1, increase=1),
        )


def test_class_requires_positive_speed():
    with pytest.raises(ValueError):
        CharacterClass(
            name="rock",
            hp=StatCurve(base=10, increase=1),
            strength=StatCurve(base=1, increase=1),
            speed=StatCurve(base=0, increase=0),
        )


def test_class_from_json_values():
    snake = CharacterClass(
        **{
            "name": "snake",
            "category": "COMMON",
            "hp": {"base": 13, "increase": 3},
            "strength": {"base": 7, "increase": 2},
            "speed": {"base": 6, "increase": 2},
            "inflicts": {"status": "POISON", "ratio": 5},
        }
    )
    assert snake.category == Category.COMMON
    assert snake.inflicts == StatusInfliction(status=StatusEffect.POISON, ratio=5)
