# bdmsim

`bdmsim` simulates the build-up of Bateson-Dobzhansky-Muller (BDM)
incompatibilities in a diploid population whose individuals sit on a ring.

Every new mutation gets its own number. Each mutation number has a fixed
hash value. For any two mutations that an offspring carries in a single
copy, the pair's two hashes decide whether the pair is incompatible.
About `CONT_PROB` of all pairs turn out to be incompatible. Mutations held
in two copies are never checked. One incompatible pair makes the offspring
inviable, and the mating is tried again.

Each generation, the whole population is replaced by viable offspring.
Afterwards, each individual gains one new mutation with probability
`MUT_PROB`. During the run the package counts the failed matings in each
generation. It also measures how often two individuals a fixed distance
apart on the ring can still produce viable offspring.

## Installation

```
pip install .
```

## Commands

Three variants are available, each with its own command:

| Command | Parent choice | Distances tested | Defaults (NCH, CONT_PROB, NGEN, MUT_PROB, THETA, SEED) |
|---|---|---|---|
| `bdmsim-sympatric` | both parents drawn again for every attempt | 1, 10, 50, 100, 500 | 1000, 0.1, 60000, 0.1, 0, 0 |
| `bdmsim-assortative` | first parent kept; second redrawn until the offspring is viable | 1, 10, 50, 100, 500 | 1000, 0.1, 150000, 0.1, 0, 2 |
| `bdmsim-local-assortative` | first parent kept; second redrawn | 1, 10, 50, 100, 500, 1000, 5000 | 10000, 0.1, 60000, 0.1, 0.2, 0 |

Each command takes up to six positional arguments. Any argument left off
keeps the variant's default:

```
bdmsim-sympatric [NCH [CONT_PROB [NGEN [MUT_PROB [THETA [SEED]]]]]]
```

- `NCH`: population size
- `CONT_PROB`: share of mutation pairs that are incompatible (0 to 1)
- `NGEN`: number of generations
- `MUT_PROB`: probability that an individual gains a new mutation in a generation (0 to 1)
- `THETA`: rate of the exponential parent-distance law (0 means uniform)
- `SEED`: seed of the random number generator

When `THETA` is 0, parents are drawn uniformly from the whole population.
When `THETA` is greater than 0, the distance from the child's position to
a parent follows an exponential law with rate `THETA`. The distance must
stay below half the population size.

The general command `bdmsim` takes the variant name first, followed by
the same parameters. The variant name is one of `sympatric`,
`sympatric_assortative_mating` and `with_selection_assortative_mating`:

```
bdmsim sympatric_assortative_mating 1000 0.1 5000 0.1 0 2
```

Runs with the same parameters and seed give the same results.

## Output

The parameters are printed first. Output files go to the current
directory. Each file name is built from the variant prefix, the
parameters and a generation number.

Every tenth generation (generations 9, 19, 29, …):

- A line `gen N:` and the number of failures are printed. The sympatric
  variant prints these only before generation 118000.
- The assortative variants also print, for each tested distance, the
  number of viable matings out of the trials.
- `..._number_of_failures.txt` gets a line with the generation, the
  failed matings in it, and the total number of mutations so far.
- `..._number_of_successes.txt` gets the number of viable matings for
  each tested distance. This is out of 1000 random couples per distance,
  or 10000 for the local assortative variant.

A new pair of these series files is started at generations 9, 1009,
2009, and so on.

Every 1000 generations (generations 999, 1999, …) a snapshot is written:

- `..._just_0_1.txt`: one line per tested distance, with `1` or `0` for
  each individual. It shows whether a mating with the individual that far
  along the ring gave a viable offspring.
- `..._causative.txt`: the same kind of matings, each drawn afresh. Each
  entry gives the first incompatible pair of mutations, or `0 0` where the
  offspring was viable.
- `..._all_mutations.txt`: one line per individual with its mutation
  numbers.
- `..._two_copies.txt`: one line per individual, with `1` for each
  mutation held in two copies and `0` for each held in one. The local
  assortative variant writes only every tenth individual.

## Library use

```python
from bdmsim.simulation import Simulation, SimulationConfig
from bdmsim.selection import MatingScheme
from bdmsim.reporting import ReportWriter, Variant

config = SimulationConfig(population_size=200, generations=50,
                          scheme=MatingScheme.ASSORTATIVE, seed=1)
sim = Simulation(config, distances=(1, 10, 50))
for report in sim.run():
    print(report.generation, report.failures, report.total_mutations)

print(sim.sample_successes(100))            # viable counts per distance
results = sim.pair_outcomes(10)             # MatingResult per individual
```

- `Simulation.run()` yields one `GenerationReport` per generation.
- `Simulation.next_generation()` and `Simulation.mutate()` carry out the
  two halves of a generation step by step.
- `ReportWriter(variant, config, directory)` is a context manager. Its
  `record(simulation, report)` method writes the files listed above.
- `bdmsim.genetics` provides `Genome`, `IncompatibilityRule`, `mate`,
  `combine` and `find_incompatibility` for working with single matings.
- `bdmsim.rng.CRandom` is the seeded generator behind every random draw.

## Limits

The package writes plain text files only. It does not plot or summarise
results. It cannot save the state of a run and resume it later. The
distances tested and the number of trials are fixed by each variant.
The commands do not take them as options.