"""Command-line entry points for the incompatibility simulations."""

from __future__ import annotations

import argparse
import sys

from .reporting import ReportWriter, Variant
from .simulation import Simulation, SimulationConfig


def _build_parser(variant, prog=None):
    defaults = variant.default_config()
    parser = argparse.ArgumentParser(
        prog=prog or f"bdmsim-{variant.value}",
        description=(
            "Simulate a diploid population accumulating Dobzhansky-Muller "
            f"incompatibilities ({variant.value} model)."
        ),
    )
    parser.add_argument(
        "population_size", nargs="?", type=int, default=defaults.population_size,
        help="number of individuals (NCH)",
    )
    parser.add_argument(
        "cont_prob", nargs="?", type=float, default=defaults.cont_prob,
        help="probability that two mutations are incompatible",
    )
    parser.add_argument(
        "generations", nargs="?", type=int, default=defaults.generations,
        help="number of generations to run",
    )
    parser.add_argument(
        "mut_prob", nargs="?", type=float, default=defaults.mut_prob,
        help="probability of a new mutation per individual and generation",
    )
    parser.add_argument(
        "theta", nargs="?", type=float, default=defaults.theta,
        help="decay rate of the parent distance; 0 picks parents uniformly",
    )
    parser.add_argument(
        "seed", nargs="?", type=int, default=defaults.seed,
        help="seed of the random number generator",
    )
    return parser


def parse_args(argv=None, variant=Variant.SYMPATRIC):
    """Turn positional command-line parameters into a SimulationConfig.

    Parameters come in the order: population size, incompatibility
    probability, generations, mutation probability, theta, seed. Missing
    trailing parameters take the variant's defaults.
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser(variant)
    args = parser.parse_args(list(argv))
    try:
        return SimulationConfig(
            population_size=args.population_size,
            cont_prob=args.cont_prob,
            generations=args.generations,
            mut_prob=args.mut_prob,
            theta=args.theta,
            seed=args.seed,
            scheme=variant.scheme,
        )
    except ValueError as exc:
        parser.error(str(exc))


def run_variant(variant, argv=None, directory="."):
    """Run one variant of the model with the given parameters; return the simulation."""
    config = parse_args(argv, variant)
    print(
        f"NCH {config.population_size}, CONT_PROB {config.cont_prob:.6f}, "
        f"NGEN {config.generations}, MUT_PROB {config.mut_prob:.6f}, "
        f"theta {config.theta:.6f}, seed_for_rand {config.seed} "
    )
    simulation = Simulation(config, variant.distances)
    with ReportWriter(variant, config, directory) as writer:
        for report in simulation.run():
            writer.record(simulation, report)
    return simulation


def main(argv=None):
    """Run the variant named by the first argument with the remaining parameters."""
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    parser = argparse.ArgumentParser(
        prog="bdmsim",
        description="Simulate speciation through Dobzhansky-Muller incompatibilities.",
    )
    parser.add_argument("variant", choices=[v.value for v in Variant])
    parser.add_argument("parameters", nargs=argparse.REMAINDER)
    args = parser.parse_args(argv)
    run_variant(Variant(args.variant), args.parameters)
    return 0


def main_sympatric(argv=None):
    """Run the sympatric model: both parents redrawn on every attempt."""
    run_variant(Variant.SYMPATRIC, argv)
    return 0


def main_assortative(argv=None):
    """Run the sympatric model with assortative mating."""
    run_variant(Variant.SYMPATRIC_ASSORTATIVE, argv)
    return 0


def main_local_assortative(argv=None):
    """Run the spatially structured model with assortative mating."""
    run_variant(Variant.LOCAL_ASSORTATIVE, argv)
    return 0