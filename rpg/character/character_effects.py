"""
Character effects module for the battle core.

Manages the single status effect slot of a Character (burn or poison, they
never stack) and the per-turn tick that combines status damage with the
regen and drain behaviours of the worn rings.
"""

from typing import Any

from combat.attack import StatusTick
from core.constants import STATUS_TICK_PERCENT, RingTag, StatusEffect
from core.logging import log_debug
from core.randomizer import Randomizer
from core.utils import percentage_of
from typing_extensions import assert_never


class CharacterEffects:
    """
    Manages the status effect of a character.

    Attributes:
        owner (Any):
            The character that owns this effects module.
        status (StatusEffect | None):
            The active status effect, None when healthy.

    """

    def __init__(self, owner: Any) -> None:
        self.owner: Any = owner
        self.status: StatusEffect | None = None

    def is_immune(self) -> bool:
        """Returns True if a worn ring protects from status effects."""
        return self.owner.equipment.has_tag(RingTag.STATUS_IMMUNITY)

    def can_receive(self, status: StatusEffect) -> bool:
        """
        Check if a status effect can be inflicted on the owner.

        Args:
            status (StatusEffect):
                The status effect to inflict.

        Returns:
            bool:
                False if the owner is immune or already suffers that exact
                status, True otherwise.

        """
        return not self.is_immune() and self.status != status

    def receive(self, status: StatusEffect) -> bool:
        """
        Inflicts a status effect, replacing any different one.

        Returns:
            bool:
                True if the status was applied.

        """
        if not self.can_receive(status):
            return False
        self.status = status
        log_debug(f"{self.owner.colored_name} suffers {status.colored_name}")
        return True

    def cure(self) -> bool:
        """Removes the active status effect, returning True if there was one."""
        cured = self.status is not None
        self.status = None
        return cured

    def _status_damage(self, randomizer: Randomizer) -> int:
        status = self.status
        if status is None:
            return 0
        if status == StatusEffect.BURN or status == StatusEffect.POISON:
            base = percentage_of(self.owner.max_hp, STATUS_TICK_PERCENT)
            return randomizer.damage(base)
        assert_never(status)

    def tick(self, randomizer: Randomizer) -> StatusTick:
        """
        Applies the per-turn status effects of the owner.

        Burn and poison remove about 5% of the max hp, each regen ring
        restores 5% of the max hp and mp, each drain ring removes as much.
        All contributions are combined into a single hp update and a single
        mp update.

        Args:
            randomizer (Randomizer):
                Source of the status damage variance.

        Returns:
            StatusTick:
                The applied deltas, with `dead` set if hp reached zero.

        """
        equipment = self.owner.equipment
        max_hp, max_mp = self.owner.max_hp, self.owner.max_mp
        # Net count of regen against drain rings.
        rings = equipment.count_tag(RingTag.REGEN) - equipment.count_tag(RingTag.DRAIN)

        hp_delta = rings * percentage_of(max_hp, STATUS_TICK_PERCENT)
        hp_delta -= self._status_damage(randomizer)
        mp_delta = 0
        if max_mp > 0:
            mp_delta = rings * percentage_of(max_mp, STATUS_TICK_PERCENT)

        hp_delta = self.owner.stats.adjust_hp(hp_delta)
        mp_delta = self.owner.stats.adjust_mp(mp_delta)

        return StatusTick(
            hp_delta=hp_delta,
            mp_delta=mp_delta,
            status=self.status,
            dead=self.owner.is_dead(),
        )
