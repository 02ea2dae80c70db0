"""Bridge Repair: finding operator placements that make equations true."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import reduce
from itertools import product

_Operator = Callable[[int, int], int]


def concat(left: int, right: int) -> int:
    """Join the decimal digits of two numbers: concat(12, 345) == 12345."""
    return left * 10 ** len(str(abs(right))) + right


@dataclass(frozen=True)
class _Equation:
    result: int
    operands: tuple[int, ...]

    def is_possible(self, operators: Sequence[_Operator]) -> bool:
        """Evaluate left to right with the given operators and compare."""
        first, *rest = self.operands
        value = reduce(
            lambda acc, pair: pair[0](acc, pair[1]), zip(operators, rest), first
        )
        return value == self.result

    def can_produce(self, possible: Sequence[_Operator]) -> bool:
        slots = len(self.operands) - 1
        return any(self.is_possible(ops) for ops in product(possible, repeat=slots))


def _parse_equation(line: str) -> _Equation:
    result, operands = line.split(": ")
    return _Equation(int(result), tuple(int(part) for part in operands.split(" ")))


def _total(lines: list[str], operators: Sequence[_Operator]) -> str:
    equations = (_parse_equation(line) for line in lines)
    return str(sum(e.result for e in equations if e.can_produce(operators)))


class Solver:
    """Solver for 2024 day 7."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        return _total(lines, (operator.add, operator.mul))

    def solve_part2(self, lines: list[str]) -> str:
        return _total(lines, (operator.add, operator.mul, concat))