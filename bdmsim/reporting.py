"""Output files and console progress for simulation runs."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from .selection import MatingScheme
from .simulation import SimulationConfig

_PRINT_LIMIT = 118000

_SYMPATRIC_DISTANCES = (1, 10, 50, 100, 500)
_LOCAL_DISTANCES = (1, 10, 50, 100, 500, 1000, 5000)


class Variant(Enum):
    """The flavours of the model, each with its own output names and defaults."""

    SYMPATRIC = "sympatric"
    SYMPATRIC_ASSORTATIVE = "sympatric_assortative_mating"
    LOCAL_ASSORTATIVE = "with_selection_assortative_mating"

    @property
    def prefix(self):
        """Leading part of every output file name."""
        return self.value

    @property
    def scheme(self):
        """How parents are drawn in this variant."""
        if self is Variant.SYMPATRIC:
            return MatingScheme.SYMPATRIC
        return MatingScheme.ASSORTATIVE

    @property
    def distances(self):
        """Distances between couples tested for compatibility."""
        if self is Variant.LOCAL_ASSORTATIVE:
            return _LOCAL_DISTANCES
        return _SYMPATRIC_DISTANCES

    @property
    def trials(self):
        """Random couples sampled per distance every tenth generation."""
        return 10000 if self is Variant.LOCAL_ASSORTATIVE else 1000

    @property
    def individual_step(self):
        """Stride through the population when listing mutations."""
        return 10 if self is Variant.LOCAL_ASSORTATIVE else 1

    @property
    def prints_successes(self):
        """Whether sampled success counts are echoed to the console."""
        return self is not Variant.SYMPATRIC

    def default_config(self):
        """The parameters this variant runs with when none are given."""
        if self is Variant.SYMPATRIC:
            return SimulationConfig(
                population_size=1000, cont_prob=0.1, generations=60000,
                mut_prob=0.1, theta=0.0, seed=0, scheme=self.scheme,
            )
        if self is Variant.SYMPATRIC_ASSORTATIVE:
            return SimulationConfig(
                population_size=1000, cont_prob=0.1, generations=150000,
                mut_prob=0.1, theta=0.0, seed=2, scheme=self.scheme,
            )
        return SimulationConfig(
            population_size=10000, cont_prob=0.1, generations=60000,
            mut_prob=0.1, theta=0.2, seed=0, scheme=self.scheme,
        )


def file_name(variant, config, generation, suffix):
    """Return the name of an output file for one generation."""
    return (
        f"{variant.prefix}_NCH{config.population_size}"
        f"CONT_PROB{config.cont_prob:.6f}"
        f"NGEN{config.generations}"
        f"MUT_PROB{config.mut_prob:.6f}"
        f"theta{config.theta:.6f}"
        f"seed_for_rand{config.seed}"
        f"gen{generation}_{suffix}.txt"
    )


class ReportWriter:
    """Writes the periodic output files of a run and prints its progress.

    Every tenth generation the failure count is logged and random couples
    are sampled; every thousandth generation a full snapshot is written.
    """

    def __init__(self, variant, config, directory):
        self.variant = variant
        self.config = config
        self.directory = Path(directory)
        self._failures = None
        self._successes = None

    def _path(self, generation, suffix):
        return self.directory / file_name(self.variant, self.config, generation, suffix)

    def _close_series(self):
        for handle in (self._failures, self._successes):
            if handle is not None:
                handle.close()
        self._failures = None
        self._successes = None

    def _open_series(self, generation):
        self._close_series()
        self._failures = open(self._path(generation, "number_of_failures"), "w")
        self._successes = open(self._path(generation, "number_of_successes"), "w")

    def _log_progress(self, simulation, report):
        generation = report.generation
        if generation % 1000 == 9 or self._failures is None:
            self._open_series(generation)
        self._failures.write(
            f"{generation} {report.failures} {report.total_mutations}\n"
        )
        if self.variant.prints_successes or generation < _PRINT_LIMIT:
            print(f"gen {generation}:")
            print(f"{report.failures} failures ")
        trials = self.variant.trials
        counts = simulation.sample_successes(trials)
        if self.variant.prints_successes:
            for distance, count in zip(simulation.distances, counts):
                print(f"{distance}: {count}/{trials}")
        self._successes.write("".join(f"{count} " for count in counts) + "\n")

    def _write_snapshot(self, simulation, generation):
        with open(self._path(generation, "just_0_1"), "w") as out:
            for distance in simulation.distances:
                outcomes = simulation.pair_outcomes(distance)
                out.write("".join("1 " if r else "0 " for r in outcomes) + "\n")

        with open(self._path(generation, "causative"), "w") as out:
            for distance in simulation.distances:
                outcomes = simulation.pair_outcomes(distance)
                out.write(
                    "".join(
                        "0 0 " if r else f"{r.cause[0]} {r.cause[1]} "
                        for r in outcomes
                    )
                    + "\n"
                )

        listed = simulation.population[:: self.variant.individual_step]
        with open(self._path(generation, "all_mutations"), "w") as out:
            for genome in listed:
                out.write("".join(f"{m} " for m in genome.mutations) + "\n")

        with open(self._path(generation, "two_copies"), "w") as out:
            for genome in listed:
                out.write(
                    "".join("1 " if both else "0 " for both in genome.two_copies)
                    + "\n"
                )

    def record(self, simulation, report):
        """Write whatever output falls due after the reported generation."""
        generation = report.generation
        if generation % 10 == 9:
            self._log_progress(simulation, report)
        if generation % 1000 == 8 and generation > 8:
            self._close_series()
        if generation % 1000 == 999:
            self._write_snapshot(simulation, generation)

    def close(self):
        """Close any series files still open."""
        self._close_series()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False