"""
Tests for the experience curve and the level-up loop.
"""

import pytest
from character.character_class import StatCurve
from character.character_progression import base_stat, xp_for_next
from character.main import Character
from core.randomizer import DefaultRandomizer, stat_increase_bounds


@pytest.fixture
def hero(fighter_class, fixed):
    return Character(fighter_class, 1, fixed)


def test_xp_for_next():
    assert xp_for_next(1) == 30
    assert xp_for_next(2) == 84
    assert xp_for_next(3) == 155


def test_base_stat_fixed(fixed):
    curve = StatCurve(base=10, increase=3)
    assert base_stat(curve, 1, fixed) == 10
    assert base_stat(curve, 4, fixed) == 19


def test_base_stat_rejects_level_zero(fixed):
    with pytest.raises(ValueError):
        base_stat(StatCurve(base=10, increase=3), 0, fixed)


def test_base_stat_random_growth():
    curve = StatCurve(base=10, increase=4)
    low, high = stat_increase_bounds(4)
    randomizer = DefaultRandomizer(seed=3)
    for _ in range(50):
        value = base_stat(curve, 2, randomizer)
        assert 10 + low <= value <= 10 + high


def test_character_starts_at_level(fighter_class, fixed):
    hero = Character(fighter_class, 3, fixed)
    assert hero.level == 3
    assert hero.xp == 0
    assert hero.stats.max_hp == 30
    assert hero.stats.strength == 16
    assert hero.stats.speed == 7
    assert hero.current_hp == hero.max_hp


def test_character_rejects_level_zero(fighter_class, fixed):
    with pytest.raises(ValueError):
        Character(fighter_class, 0, fixed)


def test_character_requires_randomizer(fighter_class):
    with pytest.raises(TypeError):
        Character(fighter_class, 3)  # type: ignore[call-arg]


def test_add_experience_below_threshold(hero, fixed):
    assert hero.add_experience(29, fixed) == 0
    assert hero.level == 1
    assert hero.xp == 29


def test_add_experience_single_level(hero, fixed):
    assert hero.add_experience(30, fixed) == 1
    assert hero.level == 2
    assert hero.xp == 0
    assert hero.xp_for_next() == 84


def test_add_experience_multiple_levels(hero, fixed):
    assert hero.add_experience(30 + 84 + 10, fixed) == 2
    assert hero.level == 3
    assert hero.xp == 10


def test_add_experience_rejects_negative(hero, fixed):
    with pytest.raises(ValueError):
        hero.add_experience(-1, fixed)


def test_large_grant_equals_small_grants(fighter_class, fixed):
    big = Character(fighter_class, 1, fixed)
    small = Character(fighter_class, 1, fixed)

    big.add_experience(500, fixed)
    for _ in range(50):
        small.add_experience(10, fixed)

    assert big.level == small.level
    assert big.xp == small.xp
    assert big.max_hp == small.max_hp
    assert big.effective_attack == small.effective_attack


def test_level_never_decreases(hero):
    randomizer = DefaultRandomizer(seed=11)
    previous = hero.level
    for amount in [0, 5, 40, 0, 120, 3, 300]:
        hero.add_experience(amount, randomizer)
        assert hero.level >= previous
        previous = hero.level


def test_level_up_preserves_damage(hero, fixed):
    hero.update_hp(-7)
    hero.add_experience(30, fixed)
    assert hero.max_hp == 25
    assert hero.max_hp - hero.current_hp == 7


def test_level_up_preserves_damage_with_random_growth(mage_class):
    randomizer = DefaultRandomizer(seed=5)
    mage = Character(mage_class, 1, randomizer)
    mage.update_hp(-4)
    mage.update_mp(-3)
    mage.add_experience(300, randomizer)
    assert mage.max_hp - mage.current_hp == 4
    assert mage.max_mp - mage.current_mp == 3


def test_level_up_preserves_damage_with_hp_ring(hero, fixed):
    from items.ring import Ring

    hero.equip_ring(Ring.HP)
    hero.update_hp(-6)
    hero.add_experience(30, fixed)
    assert hero.max_hp - hero.current_hp == 6
