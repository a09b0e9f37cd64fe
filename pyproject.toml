[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bdmsim"
version = "0.1.0"
description = "Forward simulation of Bateson-Dobzhansky-Muller incompatibilities in a diploid ring population"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "population genetics",
    "speciation",
    "simulation",
    "Dobzhansky-Muller",
    "incompatibility",
    "assortative mating",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bdmsim = "bdmsim.cli:main"
bdmsim-sympatric = "bdmsim.cli:main_sympatric"
bdmsim-assortative = "bdmsim.cli:main_assortative"
bdmsim-local-assortative = "bdmsim.cli:main_local_assortative"

[tool.hatch.build.targets.wheel]
packages = ["bdmsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
