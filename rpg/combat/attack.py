"""
Attack module for the battle core.

Defines the attack outcome sum type (regular, critical, status inflicted,
miss) and the records returned by an attack and by a status tick. Death is
reported through the `dead` flag of these records, never raised.
"""

from typing import Literal

from pydantic import BaseModel, Field

from core.constants import StatusEffect


class Regular(BaseModel):
    """A regular hit."""

    kind: Literal["regular"] = "regular"


class Critical(BaseModel):
    """A critical hit, dealing double damage."""

    kind: Literal["critical"] = "critical"


class StatusInflicted(BaseModel):
    """A hit that also inflicts a status effect on the receiver."""

    kind: Literal["status"] = "status"
    status: StatusEffect = Field(
        description="The status effect inflicted.",
    )


class Miss(BaseModel):
    """A missed attack, dealing no damage."""

    kind: Literal["miss"] = "miss"


AttackOutcome = Regular | Critical | StatusInflicted | Miss


class AttackResult(BaseModel):
    """The result of one attack from one character to another."""

    outcome: AttackOutcome = Field(
        discriminator="kind",
        description="How the attack resolved.",
    )
    damage: int = Field(
        default=0,
        description="The hit points removed from the receiver.",
        ge=0,
    )
    mp_cost: int = Field(
        default=0,
        description="The magic points spent by the attacker.",
        ge=0,
    )
    xp: int = Field(
        default=0,
        description="The experience the attacker earns if the battle is won.",
        ge=0,
    )
    dead: bool = Field(
        default=False,
        description="Whether the receiver's hp reached zero.",
    )


class StatusTick(BaseModel):
    """The result of applying a character's per-turn status effects."""

    hp_delta: int = Field(
        default=0,
        description="The change applied to the current hp.",
    )
    mp_delta: int = Field(
        default=0,
        description="The change applied to the current mp.",
    )
    status: StatusEffect | None = Field(
        default=None,
        description="The status effect active during the tick.",
    )
    dead: bool = Field(
        default=False,
        description="Whether the character's hp reached zero.",
    )

    @property
    def is_noop(self) -> bool:
        """Returns True when the tick changed nothing."""
        return self.hp_delta == 0 and self.mp_delta == 0 and not self.dead
