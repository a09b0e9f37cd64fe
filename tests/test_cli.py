import pytest

from bdmsim.cli import (
    main,
    main_assortative,
    main_local_assortative,
    main_sympatric,
    parse_args,
    run_variant,
)
from bdmsim.reporting import Variant, file_name
from bdmsim.selection import MatingScheme

SMALL = ["20", "0.1", "20", "0.5", "0", "1"]


def test_parse_args_defaults_match_variant():
    for variant in Variant:
        assert parse_args([], variant) == variant.default_config()


def test_parse_args_partial_overrides():
    config = parse_args(["50", "0.2", "30"], Variant.SYMPATRIC)
    assert config.population_size == 50
    assert config.cont_prob == 0.2
    assert config.generations == 30
    defaults = Variant.SYMPATRIC.default_config()
    assert config.mut_prob == defaults.mut_prob
    assert config.theta == defaults.theta
    assert config.seed == defaults.seed


def test_parse_args_all_values_and_scheme():
    config = parse_args(SMALL, Variant.SYMPATRIC_ASSORTATIVE)
    assert config.mut_prob == 0.5
    assert config.theta == 0.0
    assert config.seed == 1
    assert config.scheme is MatingScheme.ASSORTATIVE


def test_parse_args_rejects_non_number():
    with pytest.raises(SystemExit):
        parse_args(["many"], Variant.SYMPATRIC)


def test_parse_args_rejects_too_many():
    with pytest.raises(SystemExit):
        parse_args(SMALL + ["7"], Variant.SYMPATRIC)


def test_parse_args_rejects_invalid_config():
    with pytest.raises(SystemExit):
        parse_args(["0"], Variant.SYMPATRIC)


def test_run_variant_prints_parameters(tmp_path, capsys):
    run_variant(Variant.SYMPATRIC, SMALL, tmp_path)
    first = capsys.readouterr().out.splitlines()[0]
    assert first == (
        "NCH 20, CONT_PROB 0.100000, NGEN 20, MUT_PROB 0.500000, "
        "theta 0.000000, seed_for_rand 1 "
    )


def test_run_variant_writes_series(tmp_path):
    simulation = run_variant(Variant.SYMPATRIC, SMALL, tmp_path)
    config = parse_args(SMALL, Variant.SYMPATRIC)
    failures = tmp_path / file_name(Variant.SYMPATRIC, config, 9, "number_of_failures")
    lines = failures.read_text().splitlines()
    assert [line.split()[0] for line in lines] == ["9", "19"]
    assert int(lines[-1].split()[2]) == simulation.total_mutations
    successes = tmp_path / file_name(Variant.SYMPATRIC, config, 9, "number_of_successes")
    rows = successes.read_text().splitlines()
    assert len(rows) == 2
    for row in rows:
        counts = [int(v) for v in row.split()]
        assert len(counts) == len(Variant.SYMPATRIC.distances)
        assert all(0 <= c <= Variant.SYMPATRIC.trials for c in counts)


def test_run_variant_is_deterministic(tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.mkdir()
    b.mkdir()
    first = run_variant(Variant.SYMPATRIC_ASSORTATIVE, SMALL, a)
    second = run_variant(Variant.SYMPATRIC_ASSORTATIVE, SMALL, b)
    assert first.population == second.population
    for path in a.iterdir():
        assert path.read_text() == (b / path.name).read_text()


def test_main_dispatches_variant(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["sympatric"] + SMALL) == 0
    config = parse_args(SMALL, Variant.SYMPATRIC)
    assert (tmp_path / file_name(Variant.SYMPATRIC, config, 9, "number_of_failures")).exists()


def test_main_rejects_unknown_variant():
    with pytest.raises(SystemExit):
        main(["allopatric"])


def test_variant_entry_points(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    args = ["20", "0.1", "10", "0.5", "0.2", "3"]
    assert main_sympatric(args) == 0
    assert main_assortative(args) == 0
    assert main_local_assortative(args) == 0
    for variant in Variant:
        config = parse_args(args, variant)
        path = tmp_path / file_name(variant, config, 9, "number_of_failures")
        assert path.read_text().startswith("9 ")


def test_local_variant_prints_success_counts(tmp_path, capsys):
    args = ["20", "0.1", "10", "0.5", "0.2", "3"]
    run_variant(Variant.LOCAL_ASSORTATIVE, args, tmp_path)
    out = capsys.readouterr().out.splitlines()
    assert "gen 9:" in out
    reported = [line for line in out if line.endswith("/10000")]
    assert [line.split(":")[0] for line in reported] == [
        str(d) for d in Variant.LOCAL_ASSORTATIVE.distances
    ]