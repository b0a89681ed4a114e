"""
Battle manager module for the battle core.

Runs a 1v1 battle between the player and an enemy. Turns are scheduled by
speed: every tick both sides add their effective speed to an accumulator,
and the side with the higher value acts, so a fast character can act
several times before a slow one. The manager performs no output, every
action is reported to the optional event sink.
"""

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field

from core.constants import (
    ANTI_FARMING_LEVEL_GAP,
    GOLD_PER_ENEMY_LEVEL,
    LOW_HP_DIVISOR,
    REVIVE_HP_DIVISOR,
    TURN_RESET_ACCUMULATOR,
    ItemKind,
    RingTag,
)
from core.logging import log_debug, log_info
from core.randomizer import Randomizer
from effects.event_system import (
    AttackEvent,
    BattleEvent,
    BattleLostEvent,
    BattleWonEvent,
    EventSink,
    EventType,
    ItemUsedEvent,
    ReviveEvent,
    StatusTickEvent,
)
from items.consumable import Inventory

from combat.attack import AttackResult

if TYPE_CHECKING:
    from character.main import Character


class Victory(BaseModel):
    """The player won: the rewards are for the caller to apply."""

    kind: Literal["victory"] = "victory"
    xp: int = Field(
        default=0,
        description="The experience earned during the battle.",
        ge=0,
    )
    gold: int = Field(
        default=0,
        description="The gold dropped by the enemy.",
        ge=0,
    )


class Defeat(BaseModel):
    """The player died."""

    kind: Literal["defeat"] = "defeat"


BattleOutcome = Victory | Defeat


class BattleManager:
    """
    Manages the flow of a battle between the player and one enemy.

    Attributes:
        player (Character):
            The player character, who acts first on ties.
        enemy (Character):
            The opponent.
        randomizer (Randomizer):
            Source of every roll of the battle.
        inventory (Inventory):
            The recovery items the player may consume.
        on_event (EventSink | None):
            Callback receiving each battle event.
        player_acc (int):
            The speed accumulator of the player.
        enemy_acc (int):
            The speed accumulator of the enemy.
        xp (int):
            The experience accumulated by the player's attacks.
        revived (bool):
            Whether the revive ring has already been used in this battle.

    """

    def __init__(
        self,
        player: "Character",
        enemy: "Character",
        randomizer: Randomizer,
        inventory: Inventory | None = None,
        on_event: EventSink | None = None,
    ) -> None:
        self.player = player
        self.enemy = enemy
        self.randomizer = randomizer
        self.inventory = inventory if inventory is not None else Inventory()
        self.on_event = on_event
        self.player_acc: int = 0
        self.enemy_acc: int = 0
        self.xp: int = 0
        self.revived: bool = False

    def emit(self, event: BattleEvent) -> None:
        """Sends an event to the sink, if any."""
        if self.on_event is not None:
            self.on_event(event)

    # ============================================================================
    # MAIN LOOP
    # ============================================================================

    def run(self) -> BattleOutcome:
        """
        Runs the battle until one side dies.

        Returns:
            BattleOutcome:
                Victory with the rewards, or Defeat.

        """
        log_info(
            f"Battle: {self.player.colored_name} vs {self.enemy.colored_name}",
            {"player_level": self.player.level, "enemy_level": self.enemy.level},
        )
        while self.player.is_alive() and self.enemy.is_alive():
            self.player_acc += self.player.effective_speed
            self.enemy_acc += self.enemy.effective_speed

            if self.player_acc >= self.enemy_acc:
                self.player_acc = TURN_RESET_ACCUMULATOR
                if not self.player_turn():
                    return self.defeat()
            else:
                self.enemy_acc = TURN_RESET_ACCUMULATOR
                if not self.enemy_turn():
                    return self.defeat()

        if self.player.is_dead():
            return self.defeat()
        return self.victory()

    def player_turn(self) -> bool:
        """
        Plays one turn of the player.

        Returns:
            bool:
                False if the player died and could not be revived.

        """
        if not self.maybe_use_item():
            self.player_attack(EventType.ON_ATTACK)
            if self.enemy.is_alive() and self.player.has_ring_tag(
                RingTag.DOUBLE_STRIKE
            ):
                self.player_attack(EventType.ON_DOUBLE_STRIKE)

        # The battle is over, the status tick would have no effect on it.
        if self.enemy.is_dead():
            return True

        tick = self.player.apply_status_tick(self.randomizer)
        if not tick.is_noop:
            self.emit(StatusTickEvent(actor=self.player, tick=tick))
        return self.survives(tick.dead)

    def enemy_turn(self) -> bool:
        """
        Plays one turn of the enemy.

        Returns:
            bool:
                False if the player died and could not be revived.

        """
        result = self.enemy.apply_attack(self.player, self.randomizer)
        self.emit(AttackEvent(actor=self.enemy, target=self.player, result=result))
        if not self.survives(result.dead):
            return False

        if self.player.has_ring_tag(
            RingTag.COUNTER_ATTACK
        ) and self.randomizer.counter_attack():
            self.player_attack(EventType.ON_COUNTER_ATTACK)

        # A dying enemy ends the battle on the next loop check.
        tick = self.enemy.apply_status_tick(self.randomizer)
        if not tick.is_noop:
            self.emit(StatusTickEvent(actor=self.enemy, tick=tick))
        return True

    # ============================================================================
    # ACTIONS
    # ============================================================================

    def player_attack(self, event_type: EventType) -> AttackResult:
        """Attacks the enemy with the player, collecting the experience."""
        result = self.player.apply_attack(self.enemy, self.randomizer)
        self.xp += result.xp
        self.emit(
            AttackEvent(
                event_type=event_type,
                actor=self.player,
                target=self.enemy,
                result=result,
            )
        )
        return result

    def maybe_use_item(self) -> bool:
        """
        Uses a recovery item instead of attacking, when needed.

        A potion is used when the player's hp is below a third of the max,
        an ether when a magic-capable player cannot cast. No item is used if
        the player's next attack would already defeat the enemy.

        Returns:
            bool:
                True if an item was consumed.

        """
        damage, _ = self.player.damage_against(self.enemy)
        if damage >= self.enemy.current_hp:
            return False

        kind: ItemKind | None = None
        if self.player.current_hp * LOW_HP_DIVISOR < self.player.max_hp:
            kind = ItemKind.POTION
        elif self.player.class_def.is_magic and not self.player.can_cast():
            kind = ItemKind.ETHER

        if kind is None or not self.inventory.has(kind):
            return False
        use = self.inventory.use(kind, self.player)
        if use is None:
            return False
        self.emit(ItemUsedEvent(actor=self.player, use=use))
        return True

    def survives(self, dead: bool) -> bool:
        """
        Applies the revive policy to a death signal of the player.

        A revive ring brings the player back with a tenth of the max hp, once
        per battle.

        Args:
            dead (bool):
                The death signal to check.

        Returns:
            bool:
                True if the player is alive after the check.

        """
        if not dead:
            return True
        if self.revived or not self.player.has_ring_tag(RingTag.REVIVE):
            return False
        self.revived = True
        hp = max(1, self.player.max_hp // REVIVE_HP_DIVISOR)
        self.player.stats.set_hp(hp)
        log_debug(f"{self.player.colored_name} is revived", {"hp": hp})
        self.emit(ReviveEvent(actor=self.player, hp=hp))
        return True

    # ============================================================================
    # RESULTS
    # ============================================================================

    def gold_reward(self) -> int:
        """Returns the gold dropped by the enemy, doubled by gold rings."""
        if self.player.level - self.enemy.level > ANTI_FARMING_LEVEL_GAP:
            return 0
        gold = self.randomizer.gold_gained(self.enemy.level * GOLD_PER_ENEMY_LEVEL)
        return gold * self.player.gold_multiplier()

    def victory(self) -> Victory:
        outcome = Victory(xp=self.xp, gold=self.gold_reward())
        log_info(
            f"{self.player.colored_name} won the battle",
            {"xp": outcome.xp, "gold": outcome.gold},
        )
        self.emit(
            BattleWonEvent(
                actor=self.player, enemy=self.enemy, xp=outcome.xp, gold=outcome.gold
            )
        )
        return outcome

    def defeat(self) -> Defeat:
        log_info(f"{self.player.colored_name} lost the battle")
        self.emit(BattleLostEvent(actor=self.player, enemy=self.enemy))
        return Defeat()


def run_battle(
    player: "Character",
    enemy: "Character",
    randomizer: Randomizer,
    inventory: Inventory | None = None,
    on_event: EventSink | None = None,
) -> BattleOutcome:
    """
    Runs a battle between the player and an enemy.

    Both characters are mutated in place. The rewards of a victory are not
    applied, the caller decides what to do with them.

    Args:
        player (Character):
            The player character.
        enemy (Character):
            The enemy.
        randomizer (Randomizer):
            Source of every roll of the battle.
        inventory (Inventory | None):
            The recovery items the player may consume.
        on_event (EventSink | None):
            Callback receiving each battle event.

    Returns:
        BattleOutcome:
            Victory with the rewards, or Defeat.

    """
    return BattleManager(player, enemy, randomizer, inventory, on_event).run()
