"""
Character management module for the battle core.

Defines the Character class, the combatant shared by the player and the
enemies. A Character references its class definition instead of subclassing
it, and delegates stats, progression, equipment and status effects to its
management modules.
"""

from catchery import log_warning
from combat.attack import (
    AttackOutcome,
    AttackResult,
    Critical,
    Miss,
    Regular,
    StatusInflicted,
    StatusTick,
)
from core.constants import (
    ANTI_FARMING_LEVEL_GAP,
    MP_COST_DIVISOR,
    STATUS_RING_RATIO,
    Category,
    EquipmentKind,
    RingTag,
    StatusEffect,
)
from core.logging import log_debug
from core.randomizer import Randomizer
from items.equipment import Equipment
from items.ring import Ring

from .character_class import CharacterClass
from .character_effects import CharacterEffects
from .character_equipment import CharacterEquipment
from .character_progression import CharacterProgression
from .character_stats import CharacterStats


class Character:
    """
    Represents a combatant, including stats, level, equipment, rings and
    status effect, together with the rules of one attack.

    Attributes:
        class_def (CharacterClass):
            The class definition the character was built from.
        stats (CharacterStats):
            The base stats and the current hp/mp.
        progression (CharacterProgression):
            The level and the accumulated experience.
        equipment (CharacterEquipment):
            The weapon, armor and ring slots.
        effects (CharacterEffects):
            The status effect slot.

    """

    # === Static properties ===

    class_def: CharacterClass

    # === Management Modules ===

    stats: CharacterStats
    progression: CharacterProgression
    equipment: CharacterEquipment
    effects: CharacterEffects

    def __init__(
        self,
        class_def: CharacterClass,
        level: int,
        randomizer: Randomizer,
    ) -> None:
        if level < 1:
            raise ValueError(f"Level must be at least 1, got {level}.")

        # Initialize static properties.
        self.class_def = class_def

        # Initialize modules.
        self.stats = CharacterStats(owner=self, class_def=class_def)
        self.progression = CharacterProgression(owner=self)
        self.equipment = CharacterEquipment(owner=self)
        self.effects = CharacterEffects(owner=self)

        # Grow from level 1, one randomized increase per level.
        for _ in range(level - 1):
            self.progression.increase_level(randomizer)

    # ============================================================================
    # DELEGATED PROPERTIES
    # ============================================================================

    @property
    def name(self) -> str:
        return self.class_def.name

    @property
    def category(self) -> Category:
        return self.class_def.category

    @property
    def colored_name(self) -> str:
        """Returns the character's name with color coding based on category."""
        return self.category.colorize(self.name)

    @property
    def level(self) -> int:
        return self.progression.level

    @property
    def xp(self) -> int:
        return self.progression.xp

    @property
    def max_hp(self) -> int:
        """Returns the effective maximum HP, rings included."""
        return self.equipment.max_hp

    @property
    def current_hp(self) -> int:
        return self.stats.hp

    @property
    def max_mp(self) -> int:
        """Returns the effective maximum MP, rings included."""
        return self.equipment.max_mp

    @property
    def current_mp(self) -> int:
        return self.stats.mp

    @property
    def effective_speed(self) -> int:
        return self.equipment.speed

    @property
    def effective_attack(self) -> int:
        return self.equipment.attack

    @property
    def effective_defense(self) -> int:
        return self.equipment.defense

    @property
    def effective_magic(self) -> int:
        return self.equipment.magic

    @property
    def status_effect(self) -> StatusEffect | None:
        return self.effects.status

    # ============================================================================
    # HEALTH AND MAGIC POINTS
    # ============================================================================

    def is_alive(self) -> bool:
        """
        Check if the character is alive.

        Returns:
            bool: True if the character has more than 0 HP, False otherwise.

        """
        return self.stats.hp > 0

    def is_dead(self) -> bool:
        """
        Check if the character is dead.

        Returns:
            bool: True if the character has 0 HP, False otherwise.

        """
        return self.stats.hp <= 0

    def update_hp(self, delta: int) -> bool:
        """
        Adds (or removes, if negative) hit points, clamped into [0, max_hp].

        Args:
            delta (int):
                The change to apply.

        Returns:
            bool:
                True if the character is dead after the update.

        """
        self.stats.adjust_hp(delta)
        return self.is_dead()

    def update_mp(self, delta: int) -> int:
        """Adds (or removes) magic points, returning the applied change."""
        return self.stats.adjust_mp(delta)

    def heal(self, amount: int) -> int:
        """
        Heals the character by the given amount, up to max_hp.

        Args:
            amount (int):
                The amount of HP to restore.

        Returns:
            int:
                The actual amount healed.

        """
        return self.stats.adjust_hp(max(0, amount))

    def restore(self) -> tuple[int, int]:
        """
        Fully restores hp and mp and cures the status effect.

        Returns:
            tuple[int, int]:
                The hp and mp recovered.

        """
        recovered_hp = self.stats.adjust_hp(self.max_hp)
        recovered_mp = self.stats.adjust_mp(self.max_mp)
        self.cure()
        return recovered_hp, recovered_mp

    # ============================================================================
    # STATUS EFFECTS
    # ============================================================================

    def receive_status_effect(self, status: StatusEffect) -> bool:
        """Inflicts a status effect, returning True if it was applied."""
        return self.effects.receive(status)

    def cure(self) -> bool:
        """Removes the status effect, returning True if there was one."""
        return self.effects.cure()

    def apply_status_tick(self, randomizer: Randomizer) -> StatusTick:
        """Applies the per-turn status damage and ring regen/drain."""
        return self.effects.tick(randomizer)

    # ============================================================================
    # PROGRESSION
    # ============================================================================

    def xp_for_next(self) -> int:
        """Returns the experience required to reach the next level."""
        return self.progression.xp_for_next

    def add_experience(self, amount: int, randomizer: Randomizer) -> int:
        """
        Adds experience, levelling up as many times as the total allows.

        Args:
            amount (int):
                The experience gained.
            randomizer (Randomizer):
                Source of the stat growth rolls.

        Returns:
            int:
                The number of level-ups.

        """
        return self.progression.add_experience(amount, randomizer)

    # ============================================================================
    # ATTACK RULES
    # ============================================================================

    def mp_cost(self) -> int:
        """Returns the mp spent by one magic attack at the current level."""
        return self.class_def.mp_at(self.level) // MP_COST_DIVISOR

    def can_cast(self) -> bool:
        """Returns True if the class is magic-capable and has enough mp."""
        return self.class_def.is_magic and self.current_mp >= self.mp_cost()

    def damage_against(self, other: "Character") -> tuple[int, int]:
        """
        Computes the nominal damage of an attack against another character.

        Magic is used whenever the character can cast, otherwise the attack
        is physical and costs nothing. The damage is never lower than 1, even
        against a defense higher than the attack.

        Args:
            other (Character):
                The receiver of the attack.

        Returns:
            tuple[int, int]:
                The damage and the mp cost of the attack.

        """
        if self.can_cast():
            raw, cost = self.effective_magic, self.mp_cost()
        else:
            raw, cost = self.effective_attack, 0
        return max(1, raw - other.effective_defense), cost

    def _status_source(self) -> tuple[StatusEffect, int] | None:
        """Returns the status the attacks inflict and its 1-in-N ratio."""
        for ring in self.equipment.rings:
            if ring is not None and ring.inflicts is not None:
                return ring.inflicts, STATUS_RING_RATIO
        if self.class_def.inflicts is not None:
            return self.class_def.inflicts.status, self.class_def.inflicts.ratio
        return None

    def resolve_attack_outcome(
        self, other: "Character", randomizer: Randomizer
    ) -> AttackOutcome:
        """
        Decides how an attack against another character resolves.

        A miss takes priority, then a critical hit. A status effect is only
        inflicted on non-critical hits, and only if the receiver is not
        immune and does not already suffer that exact status.

        Args:
            other (Character):
                The receiver of the attack.
            randomizer (Randomizer):
                Source of the miss, critical and status rolls.

        Returns:
            AttackOutcome:
                One of Miss, Critical, StatusInflicted or Regular.

        """
        if randomizer.is_miss(self.effective_speed, other.effective_speed):
            return Miss()
        if randomizer.is_critical():
            return Critical()
        source = self._status_source()
        if source is not None:
            status, ratio = source
            if other.effects.can_receive(status) and randomizer.inflicts_status(ratio):
                return StatusInflicted(status=status)
        return Regular()

    def xp_gained(self, other: "Character", damage: int) -> int:
        """
        Computes the experience earned by inflicting damage on a character.

        The damage counts up to the receiver's remaining hp and is scaled by
        its category. Beating a higher level receiver multiplies the reward by
        one plus the level gap, beating a lower level one divides it. Nothing
        is earned when the attacker is too far above the receiver.

        Args:
            other (Character):
                The receiver of the damage.
            damage (int):
                The damage inflicted.

        Returns:
            int:
                The experience earned.

        """
        gap = self.level - other.level
        if gap > ANTI_FARMING_LEVEL_GAP:
            return 0
        xp = min(damage, other.current_hp) * other.category.xp_multiplier
        if gap < 0:
            return xp * (1 - gap)
        return xp // (1 + gap)

    def apply_attack(self, other: "Character", randomizer: Randomizer) -> AttackResult:
        """
        Attacks another character.

        Spends the mp cost, applies the damage (doubled on a critical hit,
        none on a miss) and inflicts the status effect, if any.

        Args:
            other (Character):
                The receiver of the attack.
            randomizer (Randomizer):
                Source of every roll of the attack.

        Returns:
            AttackResult:
                The outcome, with `dead` set if the receiver's hp reached zero.

        """
        outcome = self.resolve_attack_outcome(other, randomizer)
        nominal, mp_cost = self.damage_against(other)
        self.update_mp(-mp_cost)

        damage = 0
        if not isinstance(outcome, Miss):
            damage = randomizer.damage(nominal)
            if isinstance(outcome, Critical):
                damage *= 2
        xp = self.xp_gained(other, damage)

        dead = other.update_hp(-damage)
        if isinstance(outcome, StatusInflicted):
            other.receive_status_effect(outcome.status)

        log_debug(
            f"{self.colored_name} attacks {other.colored_name}",
            {"outcome": outcome.kind, "damage": damage, "mp_cost": mp_cost},
        )
        return AttackResult(
            outcome=outcome, damage=damage, mp_cost=mp_cost, xp=xp, dead=dead
        )

    # ============================================================================
    # EQUIPMENT
    # ============================================================================

    def equip_weapon(self, weapon: Equipment) -> Equipment | None:
        """Wears a weapon, returning the one it replaces."""
        if weapon.kind != EquipmentKind.WEAPON:
            raise ValueError(f"{weapon} is not a weapon.")
        return self.equipment.equip(weapon)

    def equip_armor(self, armor: Equipment) -> Equipment | None:
        """Wears an armor, returning the one it replaces."""
        if armor.kind != EquipmentKind.ARMOR:
            raise ValueError(f"{armor} is not an armor.")
        return self.equipment.equip(armor)

    def upgrade_equipment(
        self,
        weapon: Equipment | None = None,
        armor: Equipment | None = None,
    ) -> tuple[bool, bool]:
        """
        Wears the given pieces only where they improve the current ones.

        Returns:
            tuple[bool, bool]:
                Whether the weapon and the armor were worn.

        """
        return self.equipment.upgrade(weapon), self.equipment.upgrade(armor)

    def equip_ring(self, ring: Ring) -> Ring | None:
        """Wears a ring in the left slot, returning any ring pushed out."""
        return self.equipment.equip_ring(ring)

    def unequip_ring(self, ring: Ring) -> bool:
        """Removes a worn ring, returning False if it was not worn."""
        return self.equipment.unequip_ring(ring)

    def has_ring_tag(self, tag: RingTag) -> bool:
        return self.equipment.has_tag(tag)

    # ============================================================================
    # OUT OF BATTLE QUERIES
    # ============================================================================

    def enemies_evaded(self) -> bool:
        """Returns True if a worn ring keeps random encounters away."""
        return self.has_ring_tag(RingTag.EVASION)

    def gold_multiplier(self) -> int:
        """Returns the gold reward multiplier, doubled for each gold ring."""
        return 2 ** self.equipment.count_tag(RingTag.GOLD_DOUBLING)

    def loot_multiplier(self) -> int:
        """Returns the chest loot multiplier, doubled for each chest ring."""
        return 2 ** self.equipment.count_tag(RingTag.LOOT_DOUBLING)

    def __str__(self) -> str:
        return (
            f"{self.name}[{self.level}] hp:{self.current_hp}/{self.max_hp} "
            f"mp:{self.current_mp}/{self.max_mp}"
        )

    def __repr__(self) -> str:
        return (
            f"Character(name={self.name!r}, level={self.level}, "
            f"hp={self.current_hp}/{self.max_hp}, status={self.status_effect})"
        )


def create_character(
    class_name: str,
    level: int,
    randomizer: Randomizer,
) -> Character:
    """
    Creates a character from a class stored in the class repository.

    Args:
        class_name (str):
            The name of the class.
        level (int):
            The starting level.
        randomizer (Randomizer):
            Source of the stat growth rolls.

    Returns:
        Character:
            The new character.

    Raises:
        ValueError: If no class with that name exists.

    """
    from core.content import ClassRepository

    class_def = ClassRepository().get_class(class_name)
    if class_def is None:
        log_warning(
            f"Cannot create character: unknown class {class_name}",
            {"class_name": class_name, "level": level},
        )
        raise ValueError(f"Unknown character class: {class_name}")
    return Character(class_def, level, randomizer)
