"""Mull It Over: summing the products of uncorrupted multiplications."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

MUL_PATTERN = r"mul\(\d{1,3},\d{1,3}\)"
DO_PATTERN = r"do\(\)"
DONT_PATTERN = r"don't\(\)"

_MUL_OPERANDS = re.compile(r"mul\((\d+),(\d+)\)")


@dataclass(frozen=True)
class _Mul:
    left: int
    right: int


@dataclass(frozen=True)
class _Do:
    pass


@dataclass(frozen=True)
class _Dont:
    pass


_Operation = Union[_Mul, _Do, _Dont]


def _parse_operation(text: str) -> _Operation:
    if text.startswith("m"):
        match = _MUL_OPERANDS.match(text)
        if match is None:
            raise ValueError(f"malformed multiplication {text!r}")
        return _Mul(int(match.group(1)), int(match.group(2)))
    if text.startswith("do("):
        return _Do()
    if text.startswith("don"):
        return _Dont()
    raise ValueError(f"unknown operation {text!r}")


def _operations(lines: Iterable[str], patterns: Iterable[str]) -> Iterator[_Operation]:
    """Every operation matched by the patterns, in order, across all lines."""
    regex = re.compile("|".join(patterns))
    for line in lines:
        for match in regex.finditer(line):
            yield _parse_operation(match.group(0))


def _evaluate(operations: Iterable[_Operation]) -> int:
    """Sum the enabled multiplications; do() and don't() toggle enabling."""
    enabled = True
    total = 0
    for operation in operations:
        if isinstance(operation, _Do):
            enabled = True
        elif isinstance(operation, _Dont):
            enabled = False
        elif enabled:
            total += operation.left * operation.right
    return total


class Solver:
    """Solver for 2024 day 3."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        return str(_evaluate(_operations(lines, [MUL_PATTERN])))

    def solve_part2(self, lines: list[str]) -> str:
        patterns = [MUL_PATTERN, DO_PATTERN, DONT_PATTERN]
        return str(_evaluate(_operations(lines, patterns)))