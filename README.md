# adventsolve

Solvers for Advent of Code puzzles (2023 day 1 and 2024 days 1–15), together
with a command that picks a puzzle, reads its input file and prints the answer.

## Installation

```
pip install .
```

## Input files

Puzzle inputs are not included. They are looked up under the directory named
by the `AOC_HOME` environment variable, or under the current directory when it
is not set:

```
$AOC_HOME/internal/years/<year>/<day, two digits>/inputs/<input>.txt
```

`<input>` is `real` for the real puzzle input, or `test-N` for the N-th
example input, for instance `test-1`.

## Usage

```
adventsolve -year 2024 -day 6 -part 2 -input test-1
```

Options (each also accepts the `--` form, such as `--year`):

- `-year`: the puzzle year; defaults to the latest year with solvers.
- `-day`: the puzzle day; defaults to the latest day with a solver in that year.
- `-part`: `1` or `2`; defaults to `1`.
- `-input`: `real` or `test-N`; defaults to `real`.

An unknown year, day or part, or a malformed input name, is reported with the
allowed values and the command exits with status 1. A missing input file is
reported as `Input file not found`, also with status 1.

Any further positional arguments are passed to the solver as hyper parameters.
Day 14 of 2024 takes the room's width and height this way (it uses 101 by 103
unless exactly two values are given):

```
adventsolve -year 2024 -day 14 -input test-1 11 7
```

## Using the solvers from Python

Every day module (`adventsolve.y2023.day01`, `adventsolve.y2024.day01` to
`adventsolve.y2024.day15`) has a `Solver` class with `add_hyper_params`,
`solve_part1` and `solve_part2`. Solutions are returned as strings.

```python
from adventsolve.y2024.day01 import Solver

solver = Solver()
solver.add_hyper_params()
print(solver.solve_part1(["3   4", "4   3", "2   5", "1   3", "3   9", "3   3"]))  # 11
```

Other pieces:

- `adventsolve.cli.build_registry()` returns a `Registry` with a solver for
  every available year and day. `Registry.get(year, day)` looks one up and
  raises `YearNotFound` or `DayNotFound` (both `KeyError`s) when it is
  missing; `Registry.years()` and `Registry.days(year)` list what is there.
- `adventsolve.cli.parse_config(argv, registry)` turns command-line arguments
  into a `Config`, raising `ConfigError` when they are invalid.
- `adventsolve.config.Config` holds year, day, part, input type and hyper
  parameters; `input_file_name()` gives the path above and `read_input_file()`
  reads it. `parse_input_type` turns `real` / `test-N` into `RealInput` /
  `TestInput`, and `read_input_lines(path)` reads any file as a list of lines.

## What it does not do

The package only runs existing solvers. It has no command for creating the
files or folders of a new year or day, and it does not download puzzle inputs.

## Tests

```
pip install .[test]
pytest
```