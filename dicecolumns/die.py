"""A six-sided die backed by a PCG32 generator."""

from __future__ import annotations

import time

from .pcg import Pcg32


class Die:
    """A die whose value is 0 until first rolled."""

    def __init__(self, rng: Pcg32 | None = None) -> None:
        self.value = 0
        self._rng = rng if rng is not None else Pcg32(int(time.time()), id(self))

    def roll(self) -> int:
        """Roll a value from 1 to 6 and return it."""
        return self.roll_between(1, 6)

    def roll_between(self, low: int, high: int) -> int:
        """Roll a value from low to high inclusive and return it."""
        self.value = self._rng.bounded(high - low + 1) + low
        return self.value