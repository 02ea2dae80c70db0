import pytest

from adventsolve.cli import ConfigError, build_registry, main, parse_config
from adventsolve.config import RealInput, TestInput
from adventsolve.y2024.day14 import Solver as Day14Solver


@pytest.fixture
def registry():
    return build_registry()


def test_registry_holds_all_days(registry):
    assert registry.years() == [2023, 2024]
    assert registry.days(2023) == [1]
    assert registry.days(2024) == list(range(1, 16))
    assert isinstance(registry.get(2024, 14), Day14Solver)


def test_defaults_pick_latest_puzzle(registry):
    config = parse_config([], registry)
    assert (config.year, config.day, config.part) == (2024, 15, 1)
    assert config.input_type == RealInput()
    assert config.hyper_params == ()


def test_explicit_arguments(registry):
    config = parse_config(
        ["--year", "2024", "--day", "14", "--part", "2", "--input", "test-1", "11", "7"],
        registry,
    )
    assert (config.year, config.day, config.part) == (2024, 14, 2)
    assert config.input_type == TestInput(1)
    assert config.hyper_params == ("11", "7")


def test_single_dash_flags(registry):
    config = parse_config(["-year", "2023"], registry)
    assert (config.year, config.day) == (2023, 1)


@pytest.mark.parametrize(
    "argv",
    [
        ["--year", "1999"],
        ["--day", "30"],
        ["--part", "3"],
        ["--input", "sample"],
    ],
)
def test_invalid_arguments_raise(registry, argv):
    with pytest.raises(ConfigError):
        parse_config(argv, registry)


def test_main_solves_input(tmp_path, monkeypatch, capsys):
    inputs = tmp_path / "internal" / "years" / "2024" / "01" / "inputs"
    inputs.mkdir(parents=True)
    (inputs / "test-1.txt").write_text("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
    monkeypatch.setenv("AOC_HOME", str(tmp_path))
    status = main(["--year", "2024", "--day", "1", "--input", "test-1"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Solving year 2024, day 1, part 1 with test-1 input:" in out
    assert "Solution for part 1: 11" in out


def test_main_part2(tmp_path, monkeypatch, capsys):
    inputs = tmp_path / "internal" / "years" / "2024" / "01" / "inputs"
    inputs.mkdir(parents=True)
    (inputs / "test-1.txt").write_text("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
    monkeypatch.setenv("AOC_HOME", str(tmp_path))
    status = main(["--day", "1", "--part", "2", "--input", "test-1"])
    assert status == 0
    assert "Solution for part 2: 31" in capsys.readouterr().out


def test_main_missing_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("AOC_HOME", str(tmp_path))
    assert main([]) == 1
    assert "Input file not found" in capsys.readouterr().out


def test_main_invalid_year(capsys):
    assert main(["--year", "1999"]) == 1
    assert "Year: 1999 is not in possible values: [2023 2024]" in capsys.readouterr().out