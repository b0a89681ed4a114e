"""
Ring module for the battle core.

Rings are immutable value identities carrying a declarative effect: a set of
multiplicative stat factors, a set of behaviour tags consumed by the battle
engine and by the orchestration layer, or both. Rings have no mutable state;
per-battle bookkeeping (such as a revive already spent) lives in the battle.
"""

from core.constants import RING_FACTOR, NiceEnum, RingTag, StatKind, StatusEffect

_STAT_FACTORS: dict[str, dict[StatKind, float]] = {
    "ATTACK": {StatKind.ATTACK: RING_FACTOR},
    "DEFENSE": {StatKind.DEFENSE: RING_FACTOR},
    "SPEED": {StatKind.SPEED: RING_FACTOR},
    "MAGIC": {StatKind.MAGIC: RING_FACTOR},
    "HP": {StatKind.HP: RING_FACTOR},
    "MP": {StatKind.MP: RING_FACTOR},
    "RULING": {
        StatKind.ATTACK: RING_FACTOR,
        StatKind.DEFENSE: RING_FACTOR,
        StatKind.SPEED: RING_FACTOR,
        StatKind.MAGIC: RING_FACTOR,
    },
}

_TAGS: dict[str, frozenset[RingTag]] = {
    "EVADE": frozenset({RingTag.EVASION}),
    "DOUBLE": frozenset({RingTag.DOUBLE_STRIKE}),
    "COUNTER": frozenset({RingTag.COUNTER_ATTACK}),
    "REVIVE": frozenset({RingTag.REVIVE}),
    "FIRE": frozenset({RingTag.INFLICT_BURN}),
    "POISON": frozenset({RingTag.INFLICT_POISON}),
    "PROTECT": frozenset({RingTag.STATUS_IMMUNITY}),
    "HEAL": frozenset({RingTag.REGEN}),
    "RULING": frozenset({RingTag.DRAIN}),
    "CHEST": frozenset({RingTag.LOOT_DOUBLING}),
    "GOLD": frozenset({RingTag.GOLD_DOUBLING}),
}


class Ring(NiceEnum):
    """
    Defines every ring of the game.

    The VOID ring does nothing, stat rings boost one stat by 50%, and the
    remaining rings hook a behaviour into the game. The RULING ring boosts
    all combat stats but drains its wearer every turn.
    """

    VOID = "VOID"
    ATTACK = "ATTACK"
    DEFENSE = "DEFENSE"
    SPEED = "SPEED"
    MAGIC = "MAGIC"
    HP = "HP"
    MP = "MP"
    EVADE = "EVADE"
    DOUBLE = "DOUBLE"
    COUNTER = "COUNTER"
    REVIVE = "REVIVE"
    FIRE = "FIRE"
    POISON = "POISON"
    PROTECT = "PROTECT"
    HEAL = "HEAL"
    RULING = "RULING"
    CHEST = "CHEST"
    GOLD = "GOLD"

    @property
    def factors(self) -> dict[StatKind, float]:
        """Returns the multiplicative stat bonuses granted by the ring."""
        return _STAT_FACTORS.get(self.name, {})

    @property
    def tags(self) -> frozenset[RingTag]:
        """Returns the behaviours the ring hooks into the game."""
        return _TAGS.get(self.name, frozenset())

    def factor(self, stat: StatKind) -> float:
        """Returns the bonus granted to the given stat, 0.0 if none."""
        return self.factors.get(stat, 0.0)

    def has_tag(self, tag: RingTag) -> bool:
        return tag in self.tags

    @property
    def inflicts(self) -> StatusEffect | None:
        """Returns the status effect the ring adds to its wearer's attacks."""
        if RingTag.INFLICT_BURN in self.tags:
            return StatusEffect.BURN
        if RingTag.INFLICT_POISON in self.tags:
            return StatusEffect.POISON
        return None
