"""Diploid genomes, Dobzhansky-Muller incompatibilities and mating."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import combinations

HASH_MASK = 0xFFFF
_WORD_MASK = 0xFFFFFFFF


def mutation_hash(mutation):
    """Return the 32-bit hash value attached to a mutation number."""
    value = 32347 * (mutation + 12343) + 42347 * (mutation + 12433)
    return value & _WORD_MASK


@dataclass(frozen=True)
class Genome:
    """Sorted distinct mutations of an individual and which of them are homozygous."""

    mutations: tuple = ()
    two_copies: tuple = ()

    def __post_init__(self):
        if len(self.mutations) != len(self.two_copies):
            raise ValueError("mutations and two_copies must have the same length")
        if any(a >= b for a, b in zip(self.mutations, self.mutations[1:])):
            raise ValueError("mutations must be strictly increasing")

    def __len__(self):
        return len(self.mutations)

    def with_new_mutation(self, mutation):
        """Return a copy carrying one extra mutation in a single copy."""
        if self.mutations and mutation <= self.mutations[-1]:
            raise ValueError(
                f"new mutation {mutation} must exceed {self.mutations[-1]}"
            )
        return Genome(self.mutations + (mutation,), self.two_copies + (False,))

    @property
    def hashes(self):
        """Hash values of the mutations, in order."""
        return tuple(mutation_hash(m) for m in self.mutations)


@dataclass(frozen=True)
class IncompatibilityRule:
    """Decides whether two heterozygous mutations are incompatible."""

    cont_prob: float
    threshold: int

    def __init__(self, cont_prob):
        object.__setattr__(self, "cont_prob", cont_prob)
        object.__setattr__(self, "threshold", int(cont_prob * (HASH_MASK + 1)))

    def contradict(self, hash1, hash2):
        """Return True if the two hashed mutations are incompatible."""
        if hash1 == hash2:
            return False
        return ((hash1 + hash2) & HASH_MASK) < self.threshold


@dataclass(frozen=True)
class MatingResult:
    """Offspring of a mating and the first incompatible pair, if any."""

    offspring: Genome
    cause: tuple | None = None

    @property
    def viable(self):
        return self.cause is None

    def __bool__(self):
        return self.viable


def draw_transmission(genome, rng):
    """Decide, per mutation, whether a gamete carries it.

    Homozygous mutations are always passed on; the others with a coin toss.
    """
    return tuple(both or rng.coin() for both in genome.two_copies)


def combine(parent1, parent2, transmit1, transmit2):
    """Build the offspring genome from two parents' transmitted mutations."""
    if len(transmit1) != len(parent1) or len(transmit2) != len(parent2):
        raise ValueError("transmission flags must match the parents' genomes")
    copies = Counter(m for m, passed in zip(parent1.mutations, transmit1) if passed)
    copies.update(m for m, passed in zip(parent2.mutations, transmit2) if passed)
    ordered = tuple(sorted(copies))
    return Genome(ordered, tuple(copies[m] == 2 for m in ordered))


def find_incompatibility(genome, rule):
    """Return the first incompatible pair of heterozygous mutations, or None."""
    single = [
        (mutation, mutation_hash(mutation))
        for mutation, both in zip(genome.mutations, genome.two_copies)
        if not both
    ]
    for (m1, h1), (m2, h2) in combinations(single, 2):
        if rule.contradict(h1, h2):
            return (m1, m2)
    return None


def mate(parent1, parent2, rule, rng):
    """Produce one offspring of two parents and check it for viability."""
    transmit2 = draw_transmission(parent2, rng)
    transmit1 = draw_transmission(parent1, rng)
    offspring = combine(parent1, parent2, transmit1, transmit2)
    return MatingResult(offspring, find_incompatibility(offspring, rule))