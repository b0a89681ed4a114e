"""
Constants and enumerations for the battle core.

Defines the tunable numeric constants of the progression and combat rules,
and the enumerations for character categories, status effects, stat kinds,
ring behaviours and consumable items.
"""

from enum import Enum

# =============================================================================
# PROGRESSION
# =============================================================================

# Experience needed for the next level is floor(XP_BASE * level ** XP_EXPONENT).
XP_BASE = 30.0
XP_EXPONENT = 1.5

# =============================================================================
# COMBAT POLICY (tunable, not load-bearing)
# =============================================================================

# One attack in CRITICAL_RATIO is a critical hit.
CRITICAL_RATIO = 20
# One attack in STATUS_RING_RATIO inflicts the status of a worn FIRE/POISON ring.
STATUS_RING_RATIO = 4
# One enemy attack in COUNTER_RATIO is answered by a COUNTER ring.
COUNTER_RATIO = 2
# A faster receiver dodges one attack in max(MIN_MISS_RATIO, 5 - speed ratio).
MIN_MISS_RATIO = 2
# No experience nor gold when the attacker is this many levels above.
ANTI_FARMING_LEVEL_GAP = 10
# Burn, poison, regen and drain each move this percentage of the max stat.
STATUS_TICK_PERCENT = 5
# A revived character comes back with max_hp // REVIVE_HP_DIVISOR hp (at least 1).
REVIVE_HP_DIVISOR = 10
# Speed accumulator value assigned to the side that just acted.
TURN_RESET_ACCUMULATOR = -1
# The player drinks potions below max_hp // LOW_HP_DIVISOR.
LOW_HP_DIVISOR = 3

# =============================================================================
# EQUIPMENT AND MAGIC
# =============================================================================

# Multiplicative bonus granted by a stat ring.
RING_FACTOR = 0.5
# Weapons and armors add this fraction of the class strength at their level.
EQUIPMENT_STRENGTH_FACTOR = 0.5
# Magic attack is strength * MAGIC_MULTIPLIER.
MAGIC_MULTIPLIER = 3
# Physical strength of magic classes is divided by this value.
MAGIC_PHYSICAL_ATTENUATION = 3
# A spell costs mp.at(level) // MP_COST_DIVISOR.
MP_COST_DIVISOR = 3
# Gold dropped by an enemy, before randomization.
GOLD_PER_ENEMY_LEVEL = 50


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class Category(NiceEnum):
    """Defines the category of a character class."""

    PLAYER = "PLAYER"
    COMMON = "COMMON"
    RARE = "RARE"
    LEGENDARY = "LEGENDARY"

    @property
    def xp_multiplier(self) -> int:
        """Returns the experience multiplier for beating this category."""
        return {
            Category.PLAYER: 1,
            Category.COMMON: 1,
            Category.RARE: 3,
            Category.LEGENDARY: 5,
        }[self]

    @property
    def color(self) -> str:
        """Returns the color string associated with this category."""
        return {
            Category.PLAYER: "bold blue",
            Category.COMMON: "bold yellow",
            Category.RARE: "bold magenta",
            Category.LEGENDARY: "bold red",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies category color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class StatusEffect(NiceEnum):
    """Defines the status effects a character can suffer."""

    BURN = "BURN"
    POISON = "POISON"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this status effect."""
        return {
            StatusEffect.BURN: "🔥",
            StatusEffect.POISON: "☠️",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this status effect."""
        return {
            StatusEffect.BURN: "bold red",
            StatusEffect.POISON: "bold green",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies status effect color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class StatKind(NiceEnum):
    """Defines the stats a ring can multiply."""

    ATTACK = "ATTACK"
    DEFENSE = "DEFENSE"
    SPEED = "SPEED"
    MAGIC = "MAGIC"
    HP = "HP"
    MP = "MP"


class RingTag(NiceEnum):
    """Defines the behaviours a ring can hook into the game."""

    EVASION = "EVASION"
    DOUBLE_STRIKE = "DOUBLE_STRIKE"
    COUNTER_ATTACK = "COUNTER_ATTACK"
    REVIVE = "REVIVE"
    INFLICT_BURN = "INFLICT_BURN"
    INFLICT_POISON = "INFLICT_POISON"
    STATUS_IMMUNITY = "STATUS_IMMUNITY"
    REGEN = "REGEN"
    DRAIN = "DRAIN"
    LOOT_DOUBLING = "LOOT_DOUBLING"
    GOLD_DOUBLING = "GOLD_DOUBLING"


class EquipmentKind(NiceEnum):
    """Defines the equipment slots."""

    WEAPON = "WEAPON"
    ARMOR = "ARMOR"


class ItemKind(NiceEnum):
    """Defines the consumable items usable during a battle."""

    POTION = "POTION"
    ETHER = "ETHER"
    REMEDY = "REMEDY"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this item."""
        return {
            ItemKind.POTION: "🧪",
            ItemKind.ETHER: "🔮",
            ItemKind.REMEDY: "🌿",
        }.get(self, "❔")
