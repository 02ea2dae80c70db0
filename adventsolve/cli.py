"""Command line entry point: pick a puzzle, read its input and solve it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from adventsolve.config import Config, parse_input_type
from adventsolve.registry import DayNotFound, Registry, YearNotFound
from adventsolve.y2023 import day01 as y2023_day01
from adventsolve.y2024 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
)

FIRST_YEAR = 2015

_SOLVERS = {
    2023: (y2023_day01.Solver,),
    2024: (
        day01.Solver,
        day02.Solver,
        day03.Solver,
        day04.Solver,
        day05.Solver,
        day06.Solver,
        day07.Solver,
        day08.Solver,
        day09.Solver,
        day10.Solver,
        day11.Solver,
        day12.Solver,
        day13.Solver,
        day14.Solver,
        day15.Solver,
    ),
}


class ConfigError(ValueError):
    """The command line names a puzzle or input that does not exist."""


def build_registry() -> Registry:
    """A registry holding every available solver."""
    registry = Registry()
    for year, solvers in _SOLVERS.items():
        for day, solver_class in enumerate(solvers, start=1):
            registry.add(year, day, solver_class())
    return registry


def _validate(value: int, allowed: Iterable[int], name: str) -> None:
    allowed = list(allowed)
    if value not in allowed:
        values = " ".join(str(item) for item in allowed)
        raise ConfigError(f"{name}: {value} is not in possible values: [{values}]")


def _build_parser(default_year: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adventsolve", description="Solve a puzzle with a registered solver."
    )
    parser.add_argument("-year", "--year", type=int, default=default_year,
                        help="the year of the puzzle")
    parser.add_argument("-day", "--day", type=int, default=-1,
                        help="the day of the puzzle")
    parser.add_argument("-part", "--part", type=int, default=1,
                        help="the part of the puzzle")
    parser.add_argument("-input", "--input", default="real",
                        help="the input type to use: real or test-N")
    parser.add_argument("hyper_params", nargs="*",
                        help="extra parameters passed to the solver")
    return parser


def parse_config(argv: Sequence[str] | None, registry: Registry) -> Config:
    """Parse and validate the arguments; raise ConfigError when they are invalid."""
    years = registry.years()
    parser = _build_parser(years[-1] if years else FIRST_YEAR)
    args = parser.parse_args(argv)
    year = args.year
    day = args.day
    if day == -1:
        days = registry.days(year)
        day = days[-1] if days else 0
    _validate(year, years, "Year")
    _validate(day, registry.days(year), "Day")
    _validate(args.part, (1, 2), "Part")
    try:
        input_type = parse_input_type(args.input)
    except ValueError:
        raise ConfigError(
            "Input must be either 'real' or a 'test-n' where n is a number"
        ) from None
    return Config(year, day, args.part, input_type, tuple(args.hyper_params))


def main(argv: Sequence[str] | None = None) -> int:
    print("Welcome to taskat's Advent of Code solutions!")
    registry = build_registry()
    try:
        config = parse_config(argv, registry)
    except ConfigError as error:
        print(error)
        return 1
    print(
        f"Solving year {config.year}, day {config.day}, part {config.part} "
        f"with {config.input_type} input:"
    )
    try:
        solver = registry.get(config.year, config.day)
    except YearNotFound:
        print("Year not found")
        return 1
    except DayNotFound:
        print("Day not found")
        return 1
    try:
        lines = config.read_input_file()
    except OSError:
        print("Input file not found")
        return 1
    solver.add_hyper_params(*config.hyper_params)
    solve = solver.solve_part1 if config.part == 1 else solver.solve_part2
    print(f"Solution for part {config.part}: {solve(lines)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())