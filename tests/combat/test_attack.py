"""
Tests for the attack outcome and the result records.
"""

import pytest
from combat.attack import AttackResult, Miss, Regular, StatusInflicted, StatusTick
from core.constants import StatusEffect
from pydantic import ValidationError


def test_outcome_discriminator():
    result = AttackResult.model_validate(
        {"outcome": {"kind": "status", "status": "BURN"}, "damage": 4}
    )
    assert result.outcome == StatusInflicted(status=StatusEffect.BURN)
    assert not result.dead


def test_outcome_kinds():
    assert Regular().kind == "regular"
    assert Miss().kind == "miss"


def test_negative_damage_rejected():
    with pytest.raises(ValidationError):
        AttackResult(outcome=Regular(), damage=-1)


def test_status_tick_noop():
    assert StatusTick().is_noop
    assert not StatusTick(hp_delta=-1).is_noop
    assert not StatusTick(mp_delta=2).is_noop
    assert not StatusTick(dead=True).is_noop
