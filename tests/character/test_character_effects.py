"""
Tests for the status effect slot and the per-turn status tick.
"""

import pytest
from character.character_class import CharacterClass, StatCurve
from character.main import Character
from core.constants import Category, StatusEffect
from core.randomizer import DefaultRandomizer
from items.ring import Ring


@pytest.fixture
def tank_class():
    return CharacterClass(
        name="tank",
        category=Category.PLAYER,
        hp=StatCurve(base=100, increase=10),
        strength=StatCurve(base=10, increase=2),
        speed=StatCurve(base=5, increase=1),
        mp=StatCurve(base=40, increase=5),
    )


@pytest.fixture
def tank(tank_class, fixed):
    return Character(tank_class, 1, fixed)


def test_receive_status(tank):
    assert tank.status_effect is None
    assert tank.receive_status_effect(StatusEffect.BURN)
    assert tank.status_effect == StatusEffect.BURN


def test_no_status_stacking(tank):
    tank.receive_status_effect(StatusEffect.POISON)
    assert not tank.receive_status_effect(StatusEffect.POISON)
    assert tank.status_effect == StatusEffect.POISON


def test_different_status_replaces(tank):
    tank.receive_status_effect(StatusEffect.POISON)
    assert tank.receive_status_effect(StatusEffect.BURN)
    assert tank.status_effect == StatusEffect.BURN


def test_protect_ring_grants_immunity(tank):
    tank.equip_ring(Ring.PROTECT)
    assert not tank.receive_status_effect(StatusEffect.BURN)
    assert tank.status_effect is None


def test_cure(tank):
    assert not tank.cure()
    tank.receive_status_effect(StatusEffect.BURN)
    assert tank.cure()
    assert tank.status_effect is None


def test_tick_without_effects_is_noop(tank, fixed):
    tick = tank.apply_status_tick(fixed)
    assert tick.is_noop
    assert tank.current_hp == 100


@pytest.mark.parametrize("status", [StatusEffect.BURN, StatusEffect.POISON])
def test_status_damage(tank, fixed, status):
    tank.receive_status_effect(status)
    tick = tank.apply_status_tick(fixed)
    assert tick.hp_delta == -5
    assert tick.mp_delta == 0
    assert tick.status == status
    assert not tick.dead
    assert tank.current_hp == 95
    # The status lasts until cured.
    assert tank.status_effect == status


def test_status_damage_variance(tank):
    randomizer = DefaultRandomizer(seed=2)
    tank.receive_status_effect(StatusEffect.BURN)
    for _ in range(10):
        before = tank.current_hp
        tick = tank.apply_status_tick(randomizer)
        assert -6 <= tick.hp_delta <= -4
        assert tank.current_hp == before + tick.hp_delta


def test_status_damage_at_least_one(fighter_class, fixed):
    hero = Character(fighter_class, 1, fixed)
    hero.receive_status_effect(StatusEffect.POISON)
    assert hero.apply_status_tick(fixed).hp_delta == -1


def test_heal_ring_regenerates(tank, fixed):
    tank.update_hp(-50)
    tank.update_mp(-20)
    tick = tank.apply_status_tick(fixed)
    assert tick.is_noop

    tank.equip_ring(Ring.HEAL)
    tick = tank.apply_status_tick(fixed)
    assert tick.hp_delta == 5
    assert tick.mp_delta == 2
    assert tank.current_hp == 55
    assert tank.current_mp == 22


def test_heal_ring_clamped_at_max(tank, fixed):
    tank.equip_ring(Ring.HEAL)
    tick = tank.apply_status_tick(fixed)
    assert tick.hp_delta == 0
    assert tank.current_hp == tank.max_hp


def test_heal_ring_offsets_status(tank, fixed):
    tank.update_hp(-50)
    tank.equip_ring(Ring.HEAL)
    tank.receive_status_effect(StatusEffect.BURN)
    tick = tank.apply_status_tick(fixed)
    assert tick.hp_delta == 0
    assert tank.current_hp == 50


def test_ruling_ring_drains(tank, fixed):
    tank.equip_ring(Ring.RULING)
    tick = tank.apply_status_tick(fixed)
    assert tick.hp_delta == -5
    assert tick.mp_delta == -2


def test_ruling_and_heal_cancel(tank, fixed):
    tank.update_hp(-10)
    tank.equip_ring(Ring.RULING)
    tank.equip_ring(Ring.HEAL)
    assert tank.apply_status_tick(fixed).is_noop


def test_tick_reports_death(tank, fixed):
    tank.update_hp(-99)
    tank.receive_status_effect(StatusEffect.BURN)
    tick = tank.apply_status_tick(fixed)
    assert tick.dead
    assert tick.hp_delta == -1
    assert tank.current_hp == 0
