"""Warehouse Woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from dataclasses import dataclass, field

_Coord = tuple[int, int]

UP: _Coord = (0, -1)
RIGHT: _Coord = (1, 0)
DOWN: _Coord = (0, 1)
LEFT: _Coord = (-1, 0)

_MOVES: dict[str, _Coord] = {"^": UP, ">": RIGHT, "v": DOWN, "<": LEFT}


def _step(coord: _Coord, direction: _Coord, times: int = 1) -> _Coord:
    return coord[0] + direction[0] * times, coord[1] + direction[1] * times


def _gps(coord: _Coord) -> int:
    return 100 * coord[1] + coord[0]


@dataclass
class _Warehouse:
    walls: set[_Coord] = field(default_factory=set)
    boxes: set[_Coord] = field(default_factory=set)
    limit: _Coord = (0, 0)
    robot: _Coord = (0, 0)
    moves: list[_Coord] = field(default_factory=list)

    def move_robot(self, direction: _Coord) -> None:
        """One step, pushing any row of boxes unless a wall is behind them."""
        robot_next = _step(self.robot, direction)
        target = robot_next
        while target in self.boxes:
            target = _step(target, direction)
        if target in self.walls:
            return
        self.robot = robot_next
        if target != robot_next:
            self.boxes.discard(robot_next)
            self.boxes.add(target)

    def move_robot_wide(self, direction: _Coord) -> None:
        """One step in the upscaled warehouse, where boxes are two cells wide."""
        robot_next = _step(self.robot, direction)
        to_push: list[_Coord] = []
        if direction[1] == 0:
            target = robot_next
            while True:
                if target in self.walls:
                    return
                if target in self.boxes:
                    to_push.append(target)
                    target = _step(target, direction, 2)
                elif direction == LEFT and _step(target, LEFT) in self.boxes:
                    to_push.append(_step(target, LEFT))
                    target = _step(target, LEFT, 2)
                else:
                    break
        else:
            frontier = [robot_next]
            while frontier:
                following: list[_Coord] = []
                for cell in frontier:
                    if cell in self.walls:
                        return
                    if cell in self.boxes:
                        box = cell
                    elif _step(cell, LEFT) in self.boxes:
                        box = _step(cell, LEFT)
                    else:
                        continue
                    to_push.append(box)
                    ahead = _step(box, direction)
                    following.extend((ahead, _step(ahead, RIGHT)))
                frontier = list(dict.fromkeys(following))
        self.robot = robot_next
        for box in reversed(list(dict.fromkeys(to_push))):
            self.boxes.discard(box)
            self.boxes.add(_step(box, direction))

    def upscale(self, factor: int) -> None:
        """Stretch the warehouse horizontally, filling the gaps in the walls."""
        def scaled(coord: _Coord) -> _Coord:
            return coord[0] * factor, coord[1]

        self.limit = scaled(self.limit)
        self.robot = scaled(self.robot)
        walls = {scaled(wall) for wall in self.walls}
        self.walls = walls | {(x + 1, y) for x, y in walls}
        self.boxes = {scaled(box) for box in self.boxes}

    def gps_sum(self) -> int:
        return sum(_gps(box) for box in self.boxes)

    def __str__(self) -> str:
        width, height = self.limit
        grid = [["."] * width for _ in range(height)]
        for x, y in self.walls:
            grid[y][x] = "#"
        for x, y in self.boxes:
            grid[y][x] = "O"
        grid[self.robot[1]][self.robot[0]] = "@"
        return "\n".join("".join(row) for row in grid)


def _parse_warehouse(lines: list[str]) -> _Warehouse:
    try:
        separator = lines.index("")
    except ValueError:
        raise ValueError("input has no blank line between map and moves") from None
    warehouse = _Warehouse()
    for y, line in enumerate(lines[:separator]):
        for x, char in enumerate(line):
            if char == "#":
                warehouse.walls.add((x, y))
            elif char == "O":
                warehouse.boxes.add((x, y))
            elif char == "@":
                warehouse.robot = (x, y)
    warehouse.limit = (len(lines[0]), separator)
    for line in lines[separator + 1 :]:
        for char in line:
            try:
                warehouse.moves.append(_MOVES[char])
            except KeyError:
                raise ValueError(f"invalid move {char!r}") from None
    return warehouse


class Solver:
    """Solver for 2024 day 15."""

    def add_hyper_params(self, *args: str) -> None:
        """This puzzle takes no hyper parameters."""

    def solve_part1(self, lines: list[str]) -> str:
        warehouse = _parse_warehouse(lines)
        for move in warehouse.moves:
            warehouse.move_robot(move)
        return str(warehouse.gps_sum())

    def solve_part2(self, lines: list[str]) -> str:
        warehouse = _parse_warehouse(lines)
        warehouse.upscale(2)
        for move in warehouse.moves:
            warehouse.move_robot_wide(move)
        return str(warehouse.gps_sum())