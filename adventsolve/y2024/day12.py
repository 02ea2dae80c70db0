"""Garden Groups: pricing fences around garden regions."""

from __future__ import annotations

from collections import deque

_Coord = tuple[int, int]
_Fence = tuple[_Coord, _Coord]

_STRAIGHTS: tuple[_Coord, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))
_HORIZONTALS: tuple[_Coord, ...] = ((1, 0), (-1, 0))
_VERTICALS: tuple[_Coord, ...] = ((0, -1), (0, 1))


def _step(coord: _Coord, direction: _Coord) -> _Coord:
    return coord[0] + direction[0], coord[1] + direction[1]


def _regions(lines: list[str]) -> list[set[_Coord]]:
    """Split the garden into connected regions of the same plant."""
    plants = {(x, y): char for y, line in enumerate(lines) for x, char in enumerate(line)}
    seen: set[_Coord] = set()
    regions = []
    for start, plant in plants.items():
        if start in seen:
            continue
        region = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for direction in _STRAIGHTS:
                neighbour = _step(current, direction)
                if neighbour not in region and plants.get(neighbour) == plant:
                    region.add(neighbour)
                    queue.append(neighbour)
        seen |= region
        regions.append(region)
    return regions


def _fences(region: set[_Coord]) -> set[_Fence]:
    return {
        (coord, direction)
        for coord in region
        for direction in _STRAIGHTS
        if _step(coord, direction) not in region
    }


def _perimeter(region: set[_Coord]) -> int:
    return len(_fences(region))


def _fence_neighbours(fence: _Fence) -> list[_Fence]:
    coord, direction = fence
    along = _HORIZONTALS if direction[0] == 0 else _VERTICALS
    return [(_step(coord, step), direction) for step in along]


def _sides(region: set[_Coord]) -> int:
    """Number of straight fence sections around the region."""
    remaining = _fences(region)
    count = 0
    while remaining:
        stack = [remaining.pop()]
        while stack:
            for neighbour in _fence_neighbours(stack.pop()):
                if neighbour in remaining:
                    remaining.remove(neighbour)
                    stack.append(neighbour)
        count += 1
    return count


def _cost(lines: list[str], bulk: bool) -> int:
    measure = _sides if bulk else _perimeter
    return sum(len(region) * measure(region) for region in _regions(lines))


class Solver:
    """Solver for 2024 day 12."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        return str(_cost(lines, bulk=False))

    def solve_part2(self, lines: list[str]) -> str:
        return str(_cost(lines, bulk=True))