"""
Tests for the battle events and the ready-made event sinks.
"""

import pytest
from character.main import Character
from combat.attack import AttackResult, Critical, StatusTick
from core.constants import ItemKind, StatusEffect
from effects.event_system import (
    AttackEvent,
    BattleWonEvent,
    EventRecorder,
    EventType,
    ItemUsedEvent,
    ReviveEvent,
    StatusTickEvent,
    log_event,
)
from items.consumable import ItemUse


@pytest.fixture
def hero(fighter_class, fixed):
    return Character(fighter_class, 1, fixed)


@pytest.fixture
def goblin(goblin_class, fixed):
    return Character(goblin_class, 1, fixed)


def test_attack_event_defaults(hero, goblin):
    result = AttackResult(outcome=Critical(), damage=20, xp=20)
    event = AttackEvent(actor=hero, target=goblin, result=result)
    assert event.event_type == EventType.ON_ATTACK
    assert "critical" in str(event)
    assert "damage=20" in str(event)


def test_event_types(hero, goblin):
    assert ItemUsedEvent(
        actor=hero, use=ItemUse(kind=ItemKind.POTION, recovered_hp=5)
    ).event_type == EventType.ON_ITEM_USED
    assert StatusTickEvent(
        actor=hero, tick=StatusTick(hp_delta=-3, status=StatusEffect.BURN)
    ).event_type == EventType.ON_STATUS_TICK
    assert ReviveEvent(actor=hero, hp=2).event_type == EventType.ON_REVIVE
    assert BattleWonEvent(
        actor=hero, enemy=goblin, xp=10, gold=50
    ).event_type == EventType.ON_BATTLE_WON


def test_status_tick_event_str(hero):
    event = StatusTickEvent(actor=hero, tick=StatusTick(hp_delta=-3, mp_delta=0))
    assert "hp=-3" in str(event)
    assert "mp=+0" in str(event)


def test_recorder_keeps_order(hero):
    recorder = EventRecorder()
    recorder(ReviveEvent(actor=hero, hp=1))
    recorder(StatusTickEvent(actor=hero, tick=StatusTick(hp_delta=1)))
    recorder(ReviveEvent(actor=hero, hp=3))
    assert [event.event_type for event in recorder.events] == [
        EventType.ON_REVIVE,
        EventType.ON_STATUS_TICK,
        EventType.ON_REVIVE,
    ]
    assert len(recorder.of_type(EventType.ON_REVIVE)) == 2


def test_log_event_writes_debug(hero, mocker):
    mock_debug = mocker.patch("effects.event_system.log_debug")
    event = ReviveEvent(actor=hero, hp=2)
    log_event(event)
    mock_debug.assert_called_once_with(str(event))
