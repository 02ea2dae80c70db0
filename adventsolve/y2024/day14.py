"""Restroom Redoubt: robots wandering a wrapping lobby."""

from __future__ import annotations

import math
import re
from collections import Counter
from dataclasses import dataclass

DEFAULT_WIDTH = 101
DEFAULT_HEIGHT = 103

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)")


@dataclass
class _Robot:
    x: int
    y: int
    vx: int
    vy: int

    def move(self, seconds: int, width: int, height: int) -> None:
        self.x = (self.x + self.vx * seconds) % width
        self.y = (self.y + self.vy * seconds) % height


def _parse_robot(line: str) -> _Robot:
    match = _ROBOT.match(line)
    if match is None:
        raise ValueError(f"malformed robot {line!r}")
    return _Robot(*(int(group) for group in match.groups()))


@dataclass
class _Lobby:
    width: int
    height: int
    robots: list[_Robot]

    def elapse(self, seconds: int) -> None:
        for robot in self.robots:
            robot.move(seconds, self.width, self.height)

    def robots_in_quadrants(self) -> list[int]:
        """Robots per quadrant, ignoring those on the middle row or column."""
        mid_x, mid_y = self.width // 2, self.height // 2
        quadrants = [0, 0, 0, 0]
        for robot in self.robots:
            if robot.x == mid_x or robot.y == mid_y:
                continue
            index = (2 if robot.y > mid_y else 0) + (1 if robot.x > mid_x else 0)
            quadrants[index] += 1
        return quadrants

    def safety_factor(self) -> int:
        return math.prod(self.robots_in_quadrants())

    def __str__(self) -> str:
        counts = Counter((robot.x, robot.y) for robot in self.robots)
        return "\n".join(
            "".join(
                str(counts[(x, y)]) if (x, y) in counts else "."
                for x in range(self.width)
            )
            for y in range(self.height)
        )


class Solver:
    """Solver for 2024 day 14; hyper parameters are the lobby width and height."""

    def __init__(self) -> None:
        self.width = DEFAULT_WIDTH
        self.height = DEFAULT_HEIGHT

    def add_hyper_params(self, *args: str) -> None:
        """Take width and height; anything but exactly two values restores the defaults."""
        if len(args) != 2:
            self.width, self.height = DEFAULT_WIDTH, DEFAULT_HEIGHT
            return
        self.width, self.height = int(args[0]), int(args[1])

    def _lobby(self, lines: list[str]) -> _Lobby:
        return _Lobby(self.width, self.height, [_parse_robot(line) for line in lines])

    def solve_part1(self, lines: list[str]) -> str:
        lobby = self._lobby(lines)
        lobby.elapse(100)
        return str(lobby.safety_factor())

    def solve_part2(self, lines: list[str]) -> str:
        """The first second, within one full cycle, with the lowest safety factor."""
        lobby = self._lobby(lines)
        factors = []
        for _ in range(self.width * self.height):
            lobby.elapse(1)
            factors.append(lobby.safety_factor())
        best = min(range(len(factors)), key=factors.__getitem__)
        return str(best + 1)