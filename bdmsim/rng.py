"""Deterministic pseudo-random numbers following the classic C runtime ``rand()``."""

from __future__ import annotations

RAND_MAX = 0x7FFF

_MULTIPLIER = 214013
_INCREMENT = 2531011
_STATE_MASK = 0xFFFFFFFF


class CRandom:
    """Linear congruential generator producing the classic ``rand()`` sequence.

    Values lie in ``0..RAND_MAX`` (32767). All derived draws consume values
    in the same order as the simulation model expects, so runs with the same
    seed are reproducible.
    """

    def __init__(self, seed):
        self._state = int(seed) & _STATE_MASK

    def rand(self):
        """Return the next raw value in ``0..RAND_MAX``."""
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _STATE_MASK
        return (self._state >> 16) & RAND_MAX

    def coin(self):
        """Return True with probability about one half (``rand() >= RAND_MAX/2``)."""
        return self.rand() >= RAND_MAX // 2

    def sign(self):
        """Return +1 or -1 (``+1`` when ``rand() > RAND_MAX/2``)."""
        return 1 if self.rand() > RAND_MAX // 2 else -1

    def wide_index(self, n):
        """Return an index in ``0..n-1`` built from two consecutive draws."""
        if n <= 0:
            raise ValueError(f"index range must be positive, got {n}")
        high = self.rand()
        low = self.rand()
        return (high * 0x10000 + low) % n

    def uniform_unit(self):
        """Return ``rand()/RAND_MAX`` nudged away from zero, in ``(0, 1 + 1e-8]``."""
        return self.rand() / RAND_MAX + 0.00000001

    def bernoulli(self, p):
        """Return True when a draw falls below ``p * RAND_MAX``."""
        return self.rand() < p * RAND_MAX