"""
Main entry point for the battle core demo.

This script loads the class definitions, builds a player, and fights a run of
enemies of increasing level until the player dies. Every battle event is
narrated on the console, and the rewards of each victory are applied by the
script, since the battle engine leaves that to its caller.
"""

import logging

from character.main import Character
from combat.battle_manager import Victory, run_battle
from core.constants import Category, ItemKind
from core.content import DEFAULT_DATA_DIR, ClassRepository
from core.logging import setup_logging
from core.randomizer import DefaultRandomizer
from core.utils import cprint, crule
from effects.event_system import (
    AttackEvent,
    BattleEvent,
    ItemUsedEvent,
    ReviveEvent,
    StatusTickEvent,
    log_event,
)
from items.consumable import Consumable, Inventory
from items.equipment import Equipment
from items.ring import Ring


def narrate(event: BattleEvent) -> None:
    """Prints a one line description of a battle event."""
    log_event(event)
    if isinstance(event, AttackEvent):
        outcome = event.result.outcome
        if outcome.kind == "miss":
            cprint(f"    {event.actor.colored_name} misses {event.target.colored_name}")
        else:
            extra = ""
            if outcome.kind == "critical":
                extra = " [bold]critical![/]"
            elif outcome.kind == "status":
                extra = f" {outcome.status.emoji} {outcome.status.colored_name}"
            cprint(
                f"    {event.actor.colored_name} hits {event.target.colored_name} "
                f"for {event.result.damage}{extra}"
            )
    elif isinstance(event, ItemUsedEvent):
        cprint(
            f"    {event.actor.colored_name} uses {event.use.kind.emoji} "
            f"{event.use.kind.display_name}"
        )
    elif isinstance(event, StatusTickEvent):
        cprint(
            f"    {event.actor.colored_name} hp {event.tick.hp_delta:+d} "
            f"mp {event.tick.mp_delta:+d}"
        )
    elif isinstance(event, ReviveEvent):
        cprint(f"    {event.actor.colored_name} is revived with {event.hp} hp")


def main(seed: int | None = None, max_battles: int = 10) -> None:
    """
    Runs the demo.

    Args:
        seed (int | None):
            Seed of the randomizer, for reproducible runs.
        max_battles (int):
            The number of battles to fight at most.

    """
    setup_logging(logging.INFO)
    randomizer = DefaultRandomizer(seed)

    crule("Initialize Data", style="bold green")
    repo = ClassRepository(DEFAULT_DATA_DIR)

    player_class = repo.get_class("warrior")
    assert player_class is not None, "Player class could not be loaded."
    player = Character(player_class, 1, randomizer)
    player.equip_weapon(Equipment.weapon(1))
    player.equip_armor(Equipment.armor(1))
    player.equip_ring(Ring.HP)
    player.equip_ring(Ring.REVIVE)

    inventory = Inventory([Consumable.potion(1) for _ in range(3)])
    gold = 0

    for battle in range(1, max_battles + 1):
        category = Category.COMMON if battle % 5 else Category.RARE
        enemy_class = repo.random_class(category, randomizer)
        enemy = Character(enemy_class, player.level + randomizer.range(3), randomizer)

        crule(f"Battle {battle}: {player} vs {enemy}", style="bold red")
        outcome = run_battle(player, enemy, randomizer, inventory, narrate)
        if not isinstance(outcome, Victory):
            cprint(f"{player.colored_name} was defeated.", style="bold red")
            break

        gold += outcome.gold
        levels = player.add_experience(outcome.xp, randomizer)
        cprint(
            f"Won: +{outcome.xp}xp +{outcome.gold}g, "
            f"{levels} level(s) up, {inventory.count(ItemKind.POTION)} potion(s) left",
            style="bold green",
        )
        player.upgrade_equipment(
            weapon=Equipment.weapon(enemy.level), armor=Equipment.armor(enemy.level)
        )
        player.restore()

    crule("Final Report", style="bold green")
    cprint(f"{player}, gold: {gold}, items: {inventory.summary()}")


if __name__ == "__main__":
    main()
