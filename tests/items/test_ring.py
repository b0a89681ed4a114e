"""
Tests for the ring definitions.
"""

import pytest
from core.constants import RingTag, StatKind, StatusEffect
from items.ring import Ring


@pytest.mark.parametrize(
    "ring, stat",
    [
        (Ring.ATTACK, StatKind.ATTACK),
        (Ring.DEFENSE, StatKind.DEFENSE),
        (Ring.SPEED, StatKind.SPEED),
        (Ring.MAGIC, StatKind.MAGIC),
        (Ring.HP, StatKind.HP),
        (Ring.MP, StatKind.MP),
    ],
)
def test_stat_rings(ring, stat):
    assert ring.factor(stat) == 0.5
    assert ring.factors == {stat: 0.5}
    assert ring.tags == frozenset()


def test_void_ring_does_nothing():
    assert Ring.VOID.factors == {}
    assert Ring.VOID.tags == frozenset()
    assert Ring.VOID.inflicts is None


def test_ruling_ring():
    for stat in (StatKind.ATTACK, StatKind.DEFENSE, StatKind.SPEED, StatKind.MAGIC):
        assert Ring.RULING.factor(stat) == 0.5
    assert Ring.RULING.factor(StatKind.HP) == 0.0
    assert Ring.RULING.has_tag(RingTag.DRAIN)


@pytest.mark.parametrize(
    "ring, tag",
    [
        (Ring.EVADE, RingTag.EVASION),
        (Ring.DOUBLE, RingTag.DOUBLE_STRIKE),
        (Ring.COUNTER, RingTag.COUNTER_ATTACK),
        (Ring.REVIVE, RingTag.REVIVE),
        (Ring.PROTECT, RingTag.STATUS_IMMUNITY),
        (Ring.HEAL, RingTag.REGEN),
        (Ring.CHEST, RingTag.LOOT_DOUBLING),
        (Ring.GOLD, RingTag.GOLD_DOUBLING),
    ],
)
def test_behaviour_rings(ring, tag):
    assert ring.has_tag(tag)
    assert ring.factors == {}


def test_status_rings():
    assert Ring.FIRE.inflicts == StatusEffect.BURN
    assert Ring.POISON.inflicts == StatusEffect.POISON
    assert Ring.ATTACK.inflicts is None
