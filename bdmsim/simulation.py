"""Population of diploid individuals evolving under Dobzhansky-Muller incompatibilities."""

from __future__ import annotations

from dataclasses import dataclass

from .genetics import Genome, IncompatibilityRule, mate
from .rng import RAND_MAX, CRandom
from .selection import MatingScheme, ParentPicker

DEFAULT_DISTANCES = (1, 10, 50, 100, 500)


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one simulation run."""

    population_size: int = 1000
    cont_prob: float = 0.1
    generations: int = 60000
    mut_prob: float = 0.1
    theta: float = 0.0
    seed: int = 0
    scheme: MatingScheme = MatingScheme.SYMPATRIC

    def __post_init__(self):
        if self.population_size <= 0:
            raise ValueError(
                f"population size must be positive, got {self.population_size}"
            )
        if self.generations < 0:
            raise ValueError(
                f"number of generations must not be negative, got {self.generations}"
            )
        if not 0 <= self.cont_prob <= 1:
            raise ValueError(f"cont_prob must lie in [0, 1], got {self.cont_prob}")
        if not 0 <= self.mut_prob <= 1:
            raise ValueError(f"mut_prob must lie in [0, 1], got {self.mut_prob}")
        if self.theta < 0:
            raise ValueError(f"theta must not be negative, got {self.theta}")


@dataclass(frozen=True)
class GenerationReport:
    """Summary of one completed generation."""

    generation: int
    failures: int
    total_mutations: int


class Simulation:
    """A ring of individuals replaced each generation by viable offspring."""

    def __init__(self, config, distances=DEFAULT_DISTANCES):
        distances = tuple(distances)
        if not distances:
            raise ValueError("at least one test distance is required")
        if any(d < 0 for d in distances):
            raise ValueError(f"test distances must not be negative, got {distances}")
        self.config = config
        self.distances = distances
        self.rng = CRandom(config.seed)
        self.rule = IncompatibilityRule(config.cont_prob)
        self.picker = ParentPicker(config.population_size, config.theta, self.rng)
        self.population = [Genome() for _ in range(config.population_size)]
        self.total_mutations = 0

    def _breed_sympatric(self, i):
        failures = 0
        while True:
            p1, p2 = self.picker.pick_pair(i)
            result = mate(self.population[p1], self.population[p2], self.rule, self.rng)
            if result:
                return result.offspring, failures
            failures += 1

    def _breed_assortative(self, i):
        failures = 0
        first = self.population[self.picker.pick(i)]
        while True:
            second = self.population[self.picker.pick(i)]
            result = mate(first, second, self.rule, self.rng)
            if result:
                return result.offspring, failures
            failures += 1

    def next_generation(self):
        """Replace the population with viable offspring; return the failed attempts."""
        breed = (
            self._breed_sympatric
            if self.config.scheme.redraws_first_parent
            else self._breed_assortative
        )
        offspring = []
        failures = 0
        for i in range(self.config.population_size):
            child, failed = breed(i)
            offspring.append(child)
            failures += failed
        self.population = offspring
        return failures

    def mutate(self):
        """Give each individual a new, uniquely numbered mutation with probability mut_prob."""
        for i, genome in enumerate(self.population):
            if self.rng.bernoulli(self.config.mut_prob):
                self.total_mutations += 1
                self.population[i] = genome.with_new_mutation(self.total_mutations)

    def sample_successes(self, trials):
        """For each test distance, count viable offspring among random couples."""
        if trials < 0:
            raise ValueError(f"number of trials must not be negative, got {trials}")
        size = self.config.population_size
        counts = []
        for distance in self.distances:
            success = 0
            for _ in range(trials):
                high = self.rng.rand()
                low = self.rng.rand()
                loc = (high * RAND_MAX + low) % size
                partner = (loc + distance) % size
                if mate(self.population[loc], self.population[partner], self.rule, self.rng):
                    success += 1
            counts.append(success)
        return counts

    def pair_outcomes(self, distance):
        """Mate every individual with the one ``distance`` positions further on."""
        size = self.config.population_size
        return [
            mate(genome, self.population[(r + distance) % size], self.rule, self.rng)
            for r, genome in enumerate(self.population)
        ]

    def run(self):
        """Run all configured generations, yielding a report after each one."""
        for generation in range(self.config.generations):
            failures = self.next_generation()
            self.mutate()
            yield GenerationReport(generation, failures, self.total_mutations)