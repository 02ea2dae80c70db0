"""Resonant Collinearity: antinodes of same-frequency antennas."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import combinations

_Coord = tuple[int, int]


@dataclass(frozen=True)
class _AntennaMap:
    width: int
    height: int
    antennas: dict[str, list[_Coord]]

    def in_bounds(self, coord: _Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def _pairs(self) -> Iterator[tuple[_Coord, _Coord]]:
        for positions in self.antennas.values():
            yield from combinations(positions, 2)

    def antinodes(self) -> set[_Coord]:
        found = set()
        for a, b in self._pairs():
            for point in ((2 * a[0] - b[0], 2 * a[1] - b[1]), (2 * b[0] - a[0], 2 * b[1] - a[1])):
                if self.in_bounds(point):
                    found.add(point)
        return found

    def antinodes_with_harmonics(self) -> set[_Coord]:
        found = set()
        for a, b in self._pairs():
            for origin, other in ((a, b), (b, a)):
                dx, dy = origin[0] - other[0], origin[1] - other[1]
                point = origin
                while self.in_bounds(point):
                    found.add(point)
                    point = (point[0] + dx, point[1] + dy)
        return found


def _parse(lines: list[str]) -> _AntennaMap:
    antennas: dict[str, list[_Coord]] = defaultdict(list)
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char != ".":
                antennas[char].append((x, y))
    return _AntennaMap(len(lines[0]), len(lines), dict(antennas))


class Solver:
    """Solver for 2024 day 8."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        return str(len(_parse(lines).antinodes()))

    def solve_part2(self, lines: list[str]) -> str:
        return str(len(_parse(lines).antinodes_with_harmonics()))