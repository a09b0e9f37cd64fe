"""Simulation of Bateson-Dobzhansky-Muller incompatibilities in a diploid ring population, with output files and commands."""

__version__ = "0.1.0"