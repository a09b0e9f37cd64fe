"""Choice of parents around a focal position in a ring-shaped population."""

from __future__ import annotations

import math
from enum import Enum


class MatingScheme(Enum):
    """How parents are drawn while trying to produce one viable offspring.

    ``SYMPATRIC``: both parents are drawn again after every inviable offspring.
    ``ASSORTATIVE``: the first parent is drawn once per offspring and kept;
    only the second parent is drawn again after every inviable offspring.
    """

    SYMPATRIC = "sympatric"
    ASSORTATIVE = "assortative"

    @property
    def redraws_first_parent(self):
        """True when the first parent is drawn again on every attempt."""
        return self is MatingScheme.SYMPATRIC


class ParentPicker:
    """Draws parent positions near a focal index in a ring of individuals.

    With ``theta == 0`` the distance is uniform over the population. Otherwise
    it follows an exponential decay with rate ``theta``, truncated below half
    the population size.
    """

    def __init__(self, population_size, theta, rng):
        if population_size <= 0:
            raise ValueError(
                f"population size must be positive, got {population_size}"
            )
        if theta < 0:
            raise ValueError(f"theta must not be negative, got {theta}")
        if theta != 0 and population_size // 2 == 0:
            raise ValueError(
                "a distance-dependent choice needs a population of at least 2"
            )
        self.population_size = population_size
        self.theta = theta
        self.rng = rng

    @property
    def _limit(self):
        return self.population_size // 2

    def _distance(self):
        if self.theta == 0:
            return self.rng.wide_index(self.population_size)
        while True:
            distance = int(-math.log(self.rng.uniform_unit()) / self.theta)
            if distance < self._limit:
                return distance

    def _distance_pair(self):
        if self.theta == 0:
            first = self.rng.wide_index(self.population_size)
            second = self.rng.wide_index(self.population_size)
            return first, second
        while True:
            u1 = self.rng.uniform_unit()
            u2 = self.rng.uniform_unit()
            first = int(-math.log(u1) / self.theta)
            second = int(-math.log(u2) / self.theta)
            if first < self._limit and second < self._limit:
                return first, second

    def _position(self, i, offset):
        return (i + offset + self.population_size) % self.population_size

    def offset(self):
        """Draw a signed offset: the sign first, then the distance."""
        sign = self.rng.sign()
        return sign * self._distance()

    def pick(self, i):
        """Return the position of one parent chosen around index ``i``."""
        return self._position(i, self.offset())

    def pick_pair(self, i):
        """Return positions of two parents chosen together around index ``i``.

        Both signs are drawn before the distances; with ``theta > 0`` the two
        distances are redrawn together until both fall within range.
        """
        sign1 = self.rng.sign()
        sign2 = self.rng.sign()
        first, second = self._distance_pair()
        return self._position(i, sign1 * first), self._position(i, sign2 * second)