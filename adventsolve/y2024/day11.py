"""Plutonian Pebbles: counting stones that split as you blink."""

from __future__ import annotations

from collections import Counter


def next_values(value: int) -> list[int]:
    """The stones one stone turns into after a single blink."""
    if value == 0:
        return [1]
    digits = str(value)
    if len(digits) % 2 == 0:
        divider = 10 ** (len(digits) // 2)
        return [value // divider, value % divider]
    return [value * 2024]


def _parse(lines: list[str]) -> Counter[int]:
    return Counter(int(part) for part in lines[0].split(" "))


def _blink(stones: Counter[int]) -> Counter[int]:
    result: Counter[int] = Counter()
    for stone, count in stones.items():
        for value in next_values(stone):
            result[value] += count
    return result


def _simulate(stones: Counter[int], blinks: int) -> int:
    for _ in range(blinks):
        stones = _blink(stones)
    return sum(stones.values())


class Solver:
    """Solver for 2024 day 11."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        return str(_simulate(_parse(lines), 25))

    def solve_part2(self, lines: list[str]) -> str:
        return str(_simulate(_parse(lines), 75))