"""Hoof It: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterable

_Coord = tuple[int, int]

_STRAIGHTS: tuple[_Coord, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


class _Mountains:
    def __init__(self, lines: list[str]) -> None:
        self.grid = [[int(char) for char in line] for line in lines]

    def height(self, coord: _Coord) -> int:
        return self.grid[coord[1]][coord[0]]

    def neighbors(self, coord: _Coord) -> list[_Coord]:
        x, y = coord
        width, rows = len(self.grid[0]), len(self.grid)
        return [
            (x + dx, y + dy)
            for dx, dy in _STRAIGHTS
            if 0 <= x + dx < width and 0 <= y + dy < rows
        ]

    def next_steps(self, currents: Iterable[_Coord]) -> list[_Coord]:
        steps = []
        for coord in currents:
            target = self.height(coord) + 1
            steps.extend(n for n in self.neighbors(coord) if self.height(n) == target)
        return steps

    def trailheads(self) -> list[_Coord]:
        return [
            (x, y)
            for y, row in enumerate(self.grid)
            for x, cell in enumerate(row)
            if cell == 0
        ]

    def score(self, start: _Coord) -> int:
        """Number of distinct peaks reachable from the start."""
        currents = {start}
        for _ in range(self.height(start), 9):
            currents = set(self.next_steps(currents))
            if not currents:
                return 0
        return len(currents)

    def rating(self, start: _Coord) -> int:
        """Number of distinct trails from the start to any peak."""
        currents = [start]
        for _ in range(self.height(start), 9):
            currents = self.next_steps(currents)
            if not currents:
                return 0
        return len(currents)


class Solver:
    """Solver for 2024 day 10."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        mountains = _Mountains(lines)
        return str(sum(mountains.score(head) for head in mountains.trailheads()))

    def solve_part2(self, lines: list[str]) -> str:
        mountains = _Mountains(lines)
        return str(sum(mountains.rating(head) for head in mountains.trailheads()))