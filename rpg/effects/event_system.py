"""
Event system module for the battle core.

The battle engine performs no output. Each attack, item use, status tick,
revive and the final result is emitted, one at a time, as a BattleEvent to
an optional sink callback provided by the caller.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from combat.attack import AttackResult, StatusTick
from core.logging import log_debug
from items.consumable import ItemUse


class EventType(Enum):
    """Enumeration of available event types."""

    ON_ATTACK = "on_attack"  # When a character attacks
    ON_DOUBLE_STRIKE = "on_double_strike"  # When a ring grants a second attack
    ON_COUNTER_ATTACK = "on_counter_attack"  # When a ring answers an attack
    ON_ITEM_USED = "on_item_used"  # When a recovery item is consumed
    ON_STATUS_TICK = "on_status_tick"  # When per-turn effects are applied
    ON_REVIVE = "on_revive"  # When a ring saves a character from death
    ON_BATTLE_WON = "on_battle_won"  # When the enemy is defeated
    ON_BATTLE_LOST = "on_battle_lost"  # When the player dies


class BattleEvent(BaseModel):
    """Base class for all battle events."""

    event_type: EventType = Field(
        description="The type of battle event.",
    )
    actor: Any = Field(description="The character the event is about.")


class AttackEvent(BattleEvent):
    """Event data for ON_ATTACK, ON_DOUBLE_STRIKE and ON_COUNTER_ATTACK."""

    event_type: EventType = Field(
        default=EventType.ON_ATTACK,
        description="The type of battle event.",
    )
    target: Any = Field(description="The receiver of the attack.")
    result: AttackResult = Field(description="How the attack resolved.")

    def __str__(self) -> str:
        return (
            f"AttackEvent({self.actor.colored_name} on {self.target.colored_name}, "
            f"outcome={self.result.outcome.kind}, damage={self.result.damage})"
        )


class ItemUsedEvent(BattleEvent):
    """Event data for ON_ITEM_USED."""

    event_type: EventType = Field(
        default=EventType.ON_ITEM_USED,
        description="The type of battle event.",
    )
    use: ItemUse = Field(description="What the item restored.")

    def __str__(self) -> str:
        return (
            f"ItemUsedEvent({self.actor.colored_name}, item={self.use.kind}, "
            f"hp=+{self.use.recovered_hp}, mp=+{self.use.recovered_mp})"
        )


class StatusTickEvent(BattleEvent):
    """Event data for ON_STATUS_TICK."""

    event_type: EventType = Field(
        default=EventType.ON_STATUS_TICK,
        description="The type of battle event.",
    )
    tick: StatusTick = Field(description="The applied per-turn deltas.")

    def __str__(self) -> str:
        return (
            f"StatusTickEvent({self.actor.colored_name}, status={self.tick.status}, "
            f"hp={self.tick.hp_delta:+d}, mp={self.tick.mp_delta:+d})"
        )


class ReviveEvent(BattleEvent):
    """Event data for ON_REVIVE."""

    event_type: EventType = Field(
        default=EventType.ON_REVIVE,
        description="The type of battle event.",
    )
    hp: int = Field(description="The hit points the character came back with.")

    def __str__(self) -> str:
        return f"ReviveEvent({self.actor.colored_name}, hp={self.hp})"


class BattleWonEvent(BattleEvent):
    """Event data for ON_BATTLE_WON."""

    event_type: EventType = Field(
        default=EventType.ON_BATTLE_WON,
        description="The type of battle event.",
    )
    enemy: Any = Field(description="The defeated enemy.")
    xp: int = Field(description="The experience earned.")
    gold: int = Field(description="The gold earned.")

    def __str__(self) -> str:
        return (
            f"BattleWonEvent({self.actor.colored_name} beat {self.enemy.colored_name}, "
            f"xp={self.xp}, gold={self.gold})"
        )


class BattleLostEvent(BattleEvent):
    """Event data for ON_BATTLE_LOST."""

    event_type: EventType = Field(
        default=EventType.ON_BATTLE_LOST,
        description="The type of battle event.",
    )
    enemy: Any = Field(description="The enemy that won.")

    def __str__(self) -> str:
        return (
            f"BattleLostEvent({self.actor.colored_name} killed by "
            f"{self.enemy.colored_name})"
        )


EventSink = Callable[[BattleEvent], None]


def log_event(event: BattleEvent) -> None:
    """Event sink that writes every battle event to the debug log."""
    log_debug(str(event))


class EventRecorder:
    """
    Event sink that keeps every received event, in order.

    Attributes:
        events (list[BattleEvent]):
            The received events.

    """

    def __init__(self) -> None:
        self.events: list[BattleEvent] = []

    def __call__(self, event: BattleEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: EventType) -> list[BattleEvent]:
        """Returns the received events of the given type."""
        return [event for event in self.events if event.event_type == event_type]
