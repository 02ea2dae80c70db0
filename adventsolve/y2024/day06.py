"""Guard Gallivant: tracing a patrolling guard through a lab."""

from __future__ import annotations

from dataclasses import dataclass

EMPTY = "."
OBSTRUCTION = "#"
VISITED = "X"
GUARD_START = "^"

_FIELDS = {EMPTY, OBSTRUCTION, VISITED, GUARD_START}

# up, right, down, left: turning right is the next entry
_STEPS: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))

_Coord = tuple[int, int]


@dataclass
class _Guard:
    position: _Coord
    facing: int = 0

    def next(self) -> _Coord:
        dx, dy = _STEPS[self.facing]
        return self.position[0] + dx, self.position[1] + dy


class _Lab:
    def __init__(self, grid: list[list[str]]) -> None:
        self.grid = grid

    def __getitem__(self, coord: _Coord) -> str:
        return self.grid[coord[1]][coord[0]]

    def __setitem__(self, coord: _Coord, value: str) -> None:
        self.grid[coord[1]][coord[0]] = value

    def out_of_bounds(self, coord: _Coord) -> bool:
        x, y = coord
        return x < 0 or y < 0 or y >= len(self.grid) or x >= len(self.grid[0])

    def advance(self, guard: _Guard) -> bool:
        """Step or turn the guard; False once the next step leaves the lab."""
        target = guard.next()
        if self.out_of_bounds(target):
            return False
        if self[target] != OBSTRUCTION:
            guard.position = target
        else:
            guard.facing = (guard.facing + 1) % 4
        return True

    def patrol(self, guard: _Guard) -> bool:
        """Move the guard, marking the field it leaves as visited."""
        self[guard.position] = VISITED
        return self.advance(guard)

    def leads_to_circle(self, position: _Coord, facing: int) -> bool:
        """Whether a guard starting here ends up walking in a loop."""
        ghost = _Guard(position, facing)
        seen = {(position, facing)}
        while self.advance(ghost):
            state = (ghost.position, ghost.facing)
            if state in seen:
                return True
            seen.add(state)
        return False

    def count(self, value: str) -> int:
        return sum(row.count(value) for row in self.grid)


def _parse(lines: list[str]) -> tuple[_Lab, _Guard]:
    grid = []
    for line in lines:
        row = list(line)
        invalid = set(row) - _FIELDS
        if invalid:
            raise ValueError(f"invalid field {sorted(invalid)[0]!r}")
        grid.append(row)
    for y, row in enumerate(grid):
        if GUARD_START in row:
            return _Lab(grid), _Guard((row.index(GUARD_START), y))
    raise ValueError("the lab has no guard")


class Solver:
    """Solver for 2024 day 6."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        lab, guard = _parse(lines)
        while lab.patrol(guard):
            pass
        return str(lab.count(VISITED))

    def solve_part2(self, lines: list[str]) -> str:
        lab, guard = _parse(lines)
        start = guard.position
        loops = 0
        while True:
            target = guard.next()
            if lab.out_of_bounds(target):
                break
            if target == start or lab[target] in (VISITED, OBSTRUCTION):
                lab.patrol(guard)
                continue
            original = lab[target]
            lab[target] = OBSTRUCTION
            if lab.leads_to_circle(guard.position, guard.facing):
                loops += 1
            lab[target] = original
            if not lab.patrol(guard):
                break
        return str(loops)