"""Run configuration: which puzzle to solve and which input file to read."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

_TEST_INPUT = re.compile(r"test-([+-]?\d+)")


@dataclass(frozen=True)
class RealInput:
    """The personal puzzle input."""

    def __str__(self) -> str:
        return "real"


@dataclass(frozen=True)
class TestInput:
    """A numbered example input."""

    __test__ = False

    number: int

    def __str__(self) -> str:
        return f"test-{self.number}"


InputType = Union[RealInput, TestInput]


def parse_input_type(text: str) -> InputType:
    """Parse ``real`` or ``test-N``; raise ValueError for anything else."""
    if text == "real":
        return RealInput()
    match = _TEST_INPUT.match(text)
    if match is None:
        raise ValueError(
            f"input must be either 'real' or 'test-n' where n is a number, got {text!r}"
        )
    return TestInput(int(match.group(1)))


def read_input_lines(filename: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a file without their line endings."""
    path = Path(filename).resolve()
    with path.open(encoding="utf-8", newline="") as handle:
        content = handle.read()
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass(frozen=True)
class Config:
    """The puzzle to solve: year, day, part, input and extra parameters."""

    year: int
    day: int
    part: int
    input_type: InputType
    hyper_params: tuple[str, ...] = field(default_factory=tuple)

    def input_file_name(self) -> Path:
        """Path of the input file, rooted at ``$AOC_HOME`` (or the current directory)."""
        home = Path(os.environ.get("AOC_HOME", ""))
        return (
            home
            / "internal"
            / "years"
            / str(self.year)
            / f"{self.day:02d}"
            / "inputs"
            / f"{self.input_type}.txt"
        )

    def read_input_file(self) -> list[str]:
        """Read the configured input file as a list of lines."""
        return read_input_lines(self.input_file_name())

    def __str__(self) -> str:
        params = " ".join(str(param) for param in self.hyper_params)
        return (
            f"Config{{Year: {self.year}, Day: {self.day}, Part: {self.part}, "
            f"InputType: {self.input_type}, HyperParams: [{params}]}}"
        )