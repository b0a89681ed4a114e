"""
Tests for the recovery items and the inventory.
"""

import pytest
from character.main import Character
from core.constants import ItemKind, StatusEffect
from items.consumable import Consumable, Inventory


@pytest.fixture
def hero(fighter_class, fixed):
    return Character(fighter_class, 1, fixed)


@pytest.fixture
def mage(mage_class, fixed):
    return Character(mage_class, 1, fixed)


def test_potion_heals_half_class_hp(hero):
    hero.update_hp(-15)
    use = Consumable.potion(1).apply(hero)
    assert use.kind == ItemKind.POTION
    assert use.recovered_hp == 10
    assert hero.current_hp == 15


def test_potion_scales_with_level(hero):
    hero.update_hp(-19)
    use = Consumable.potion(3).apply(hero)
    assert use.recovered_hp == 15


def test_potion_clamped_at_max(hero):
    hero.update_hp(-2)
    assert Consumable.potion(1).apply(hero).recovered_hp == 2


def test_ether_restores_mp(mage):
    mage.update_mp(-9)
    use = Consumable.ether(1).apply(mage)
    assert use.recovered_mp == 9
    assert mage.current_mp == 9


def test_remedy_cures(hero):
    hero.receive_status_effect(StatusEffect.POISON)
    use = Consumable.remedy().apply(hero)
    assert use.cured
    assert hero.status_effect is None
    assert not Consumable.remedy().apply(hero).cured


def test_item_names():
    assert str(Consumable.potion(2)) == "potion[2]"
    assert str(Consumable.remedy()) == "remedy"


def test_inventory_counts():
    inventory = Inventory([Consumable.potion(), Consumable.potion(), Consumable.ether()])
    assert inventory.count(ItemKind.POTION) == 2
    assert inventory.has(ItemKind.ETHER)
    assert not inventory.has(ItemKind.REMEDY)
    assert inventory.summary() == {"potion": 2, "ether": 1}


def test_inventory_use(hero):
    inventory = Inventory()
    inventory.add(Consumable.potion(1))
    inventory.add(Consumable.potion(2))
    hero.update_hp(-19)

    use = inventory.use(ItemKind.POTION, hero)
    assert use is not None
    # The last added item is used first.
    assert use.recovered_hp == 12
    assert inventory.count(ItemKind.POTION) == 1


def test_inventory_use_empty(hero, mocker):
    mock_warning = mocker.patch("items.consumable.log_warning")
    inventory = Inventory()
    assert inventory.use(ItemKind.POTION, hero) is None
    mock_warning.assert_called_once()
    assert inventory.summary() == {}
