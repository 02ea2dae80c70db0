"""Historian Hysteria: comparing two location lists."""

from __future__ import annotations

from collections import Counter


def _parse(lines: list[str]) -> tuple[list[int], list[int]]:
    """Split the two columns and sort each of them."""
    pairs = [line.split() for line in lines]
    left = sorted(int(pair[0]) for pair in pairs)
    right = sorted(int(pair[1]) for pair in pairs)
    return left, right


class Solver:
    """Solver for 2024 day 1."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        left, right = _parse(lines)
        return str(sum(abs(a - b) for a, b in zip(left, right)))

    def solve_part2(self, lines: list[str]) -> str:
        left, right = _parse(lines)
        counts = Counter(right)
        return str(sum(value * counts[value] for value in left))