"""
Randomizer module for the battle core.

Every random decision of the game goes through a Randomizer instance, which
is passed explicitly to the functions that need it. The DefaultRandomizer
draws from its own seedable random.Random, while the FixedRandomizer returns
nominal values so tests are deterministic.
"""

import math
import random
from abc import ABC, abstractmethod

from core.constants import COUNTER_RATIO, CRITICAL_RATIO, MIN_MISS_RATIO


class Randomizer(ABC):
    """Interface for every source of randomness used by the game rules."""

    @abstractmethod
    def stat_increase(self, increase: int) -> int:
        """
        Returns the realized growth of a stat for one level-up.

        Args:
            increase (int):
                The nominal per-level increase of the stat.

        Returns:
            int:
                The realized increase, never lower than 1.

        """

    @abstractmethod
    def damage(self, value: int) -> int:
        """Returns the damage value with variance applied, never lower than 1."""

    @abstractmethod
    def is_miss(self, attacker_speed: int, receiver_speed: int) -> bool:
        """Returns True if an attack between the given speeds misses."""

    @abstractmethod
    def is_critical(self) -> bool:
        """Returns True if an attack is a critical hit."""

    @abstractmethod
    def inflicts_status(self, ratio: int) -> bool:
        """Returns True, with probability 1/ratio, if a status is inflicted."""

    @abstractmethod
    def counter_attack(self) -> bool:
        """Returns True if a counter-attack ring triggers."""

    @abstractmethod
    def gold_gained(self, base: int) -> int:
        """Returns the randomized gold reward for the given base amount."""

    @abstractmethod
    def range(self, maximum: int) -> int:
        """Returns an integer in [0, maximum)."""


def stat_increase_bounds(increase: int) -> tuple[int, int]:
    """
    Returns the inclusive bounds of the realized growth for a nominal
    increase.

    Args:
        increase (int):
            The nominal per-level increase.

    Returns:
        tuple[int, int]:
            The (low, high) bounds, both at least 1.

    """
    low = max(1, round(increase * 0.5))
    high = max(1, round(increase * 1.5))
    return low, high


def damage_bounds(value: int) -> tuple[int, int]:
    """Returns the inclusive (low, high) bounds of a damage roll, +/- 20%."""
    low = max(1, math.floor(value * 0.8))
    high = max(low, math.ceil(value * 1.2))
    return low, high


class DefaultRandomizer(Randomizer):
    """
    Randomizer backed by a private random.Random instance.

    Attributes:
        rng (random.Random):
            The generator every draw is taken from.

    """

    def __init__(self, seed: int | None = None) -> None:
        self.rng = random.Random(seed)

    def _one_in(self, ratio: int) -> bool:
        return self.rng.randint(1, max(1, ratio)) == 1

    def stat_increase(self, increase: int) -> int:
        low, high = stat_increase_bounds(increase)
        return self.rng.randint(low, high)

    def damage(self, value: int) -> int:
        low, high = damage_bounds(value)
        return self.rng.randint(low, high)

    def is_miss(self, attacker_speed: int, receiver_speed: int) -> bool:
        # Only a faster receiver can dodge, and never every time.
        if receiver_speed <= attacker_speed:
            return False
        ratio = receiver_speed // max(1, attacker_speed)
        return self._one_in(max(MIN_MISS_RATIO, 5 - ratio))

    def is_critical(self) -> bool:
        return self._one_in(CRITICAL_RATIO)

    def inflicts_status(self, ratio: int) -> bool:
        return self._one_in(ratio)

    def counter_attack(self) -> bool:
        return self._one_in(COUNTER_RATIO)

    def gold_gained(self, base: int) -> int:
        return self.rng.randint(int(base * 0.6), int(base * 1.3))

    def range(self, maximum: int) -> int:
        return self.rng.randrange(maximum)


class FixedRandomizer(Randomizer):
    """
    Deterministic randomizer for tests.

    Numeric draws return their nominal value, while the outcome of each
    boolean roll is fixed at construction.

    Attributes:
        miss (bool):
            Returned by is_miss.
        critical (bool):
            Returned by is_critical.
        status (bool):
            Returned by inflicts_status.
        counter (bool):
            Returned by counter_attack.

    """

    def __init__(
        self,
        miss: bool = False,
        critical: bool = False,
        status: bool = False,
        counter: bool = False,
    ) -> None:
        self.miss = miss
        self.critical = critical
        self.status = status
        self.counter = counter

    def stat_increase(self, increase: int) -> int:
        return max(1, increase)

    def damage(self, value: int) -> int:
        return max(1, value)

    def is_miss(self, attacker_speed: int, receiver_speed: int) -> bool:
        return self.miss

    def is_critical(self) -> bool:
        return self.critical

    def inflicts_status(self, ratio: int) -> bool:
        return self.status

    def counter_attack(self) -> bool:
        return self.counter

    def gold_gained(self, base: int) -> int:
        return base

    def range(self, maximum: int) -> int:
        return maximum - 1
