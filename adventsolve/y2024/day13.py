"""Claw Contraption: the cheapest button presses to reach each prize."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_Coord = tuple[int, int]

_NUMBERS = re.compile(r"[+-]?\d+")

PART2_OFFSET = 10_000_000_000_000


def _parse_coord(line: str) -> _Coord:
    numbers = _NUMBERS.findall(line)
    if len(numbers) < 2:
        raise ValueError(f"expected two numbers in {line!r}")
    return int(numbers[0]), int(numbers[1])


def _is_positive_integer(nom: int, denom: int) -> bool:
    return nom % denom == 0 and nom // denom >= 0


@dataclass(frozen=True)
class _Machine:
    button_a: _Coord
    button_b: _Coord
    prize: _Coord

    def with_offset(self, offset: int) -> _Machine:
        return replace(self, prize=(self.prize[0] + offset, self.prize[1] + offset))

    def solve(self) -> tuple[int, int]:
        """Non-negative integer presses of A and B that hit the prize, else (0, 0)."""
        (ax, ay), (bx, by), (px, py) = self.button_a, self.button_b, self.prize
        nom_b = ax * py - ay * px
        denom_b = ax * by - ay * bx
        if not _is_positive_integer(nom_b, denom_b):
            return 0, 0
        b = nom_b // denom_b
        nom_a = px - bx * b
        if not _is_positive_integer(nom_a, ax):
            return 0, 0
        return nom_a // ax, b

    def cost(self) -> int:
        a, b = self.solve()
        return a * 3 + b


def _parse(lines: list[str]) -> list[_Machine]:
    return [
        _Machine(
            _parse_coord(lines[i]),
            _parse_coord(lines[i + 1]),
            _parse_coord(lines[i + 2]),
        )
        for i in range(0, len(lines), 4)
    ]


class Solver:
    """Solver for 2024 day 13."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        return str(sum(machine.cost() for machine in _parse(lines)))

    def solve_part2(self, lines: list[str]) -> str:
        machines = (m.with_offset(PART2_OFFSET) for m in _parse(lines))
        return str(sum(machine.cost() for machine in machines))