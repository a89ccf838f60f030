"""Minimal PCG32 random number generator (XSH-RR variant)."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_MULTIPLIER = 6364136223846793005


class Pcg32:
    """A PCG32 generator seeded with a state initializer and a stream id."""

    __slots__ = ("_state", "_inc")

    def __init__(self, initstate: int, initseq: int) -> None:
        self._state = 0
        self._inc = ((initseq << 1) | 1) & _MASK64
        self.random()
        self._state = (self._state + initstate) & _MASK64
        self.random()

    def random(self) -> int:
        """Return a uniformly distributed 32-bit unsigned integer."""
        old = self._state
        self._state = (old * _MULTIPLIER + self._inc) & _MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _MASK32

    def bounded(self, bound: int) -> int:
        """Return a uniformly distributed integer r with 0 <= r < bound."""
        if not 0 < bound <= _MASK32:
            raise ValueError(f"bound must be in 1..{_MASK32}, got {bound}")
        threshold = ((1 << 32) - bound) % bound
        while True:
            r = self.random()
            if r >= threshold:
                return r % bound