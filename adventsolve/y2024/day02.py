"""Red-Nosed Reports: checking level sequences for safety."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def _parse_report(line: str) -> list[int]:
    return [int(part) for part in line.split()]


def is_safe(report: Sequence[int]) -> bool:
    """Strictly monotonic with every step between neighbours at most 3."""
    steps = [b - a for a, b in pairwise(report)]
    monotonic = all(step < 0 for step in steps) or all(step > 0 for step in steps)
    return monotonic and all(abs(step) <= 3 for step in steps)


def is_tolerable(report: Sequence[int]) -> bool:
    """Safe once any single level is removed."""
    values = list(report)
    return any(
        is_safe(values[:index] + values[index + 1 :]) for index in range(len(values))
    )


class Solver:
    """Solver for 2024 day 2."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        reports = map(_parse_report, lines)
        return str(sum(1 for report in reports if is_safe(report)))

    def solve_part2(self, lines: list[str]) -> str:
        reports = map(_parse_report, lines)
        return str(sum(1 for report in reports if is_tolerable(report)))