"""Ceres Search: finding XMAS in a word search."""

from __future__ import annotations

from collections import defaultdict
from enum import IntEnum

_Coord = tuple[int, int]
_Letters = dict[str, set[_Coord]]


class Direction(IntEnum):
    """The eight compass directions on the grid."""

    UP = 0
    UP_RIGHT = 1
    RIGHT = 2
    DOWN_RIGHT = 3
    DOWN = 4
    DOWN_LEFT = 5
    LEFT = 6
    UP_LEFT = 7

    @property
    def unit(self) -> _Coord:
        """The (x, y) step for this direction; y grows downwards."""
        return _UNITS[self]


_UNITS: dict[Direction, _Coord] = {
    Direction.UP: (0, -1),
    Direction.UP_RIGHT: (1, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN_RIGHT: (1, 1),
    Direction.DOWN: (0, 1),
    Direction.DOWN_LEFT: (-1, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP_LEFT: (-1, -1),
}


def _step(coord: _Coord, direction: Direction) -> _Coord:
    dx, dy = direction.unit
    return coord[0] + dx, coord[1] + dy


def _parse(lines: list[str]) -> _Letters:
    letters: _Letters = defaultdict(set)
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            letters[char].add((x, y))
    return letters


def _contains_word(letters: _Letters, start: _Coord, word: str, direction: Direction) -> bool:
    position = start
    for letter in word:
        if position not in letters.get(letter, ()):
            return False
        position = _step(position, direction)
    return True


def _count_words(letters: _Letters, start: _Coord, word: str) -> int:
    return sum(1 for direction in Direction if _contains_word(letters, start, word, direction))


def _is_x(letters: _Letters, centre: _Coord) -> bool:
    """Both diagonals through the centre hold one M and one S."""
    m_cells = letters.get("M", set())
    s_cells = letters.get("S", set())
    diagonals = (
        (Direction.UP_LEFT, Direction.DOWN_RIGHT),
        (Direction.UP_RIGHT, Direction.DOWN_LEFT),
    )
    for first_dir, second_dir in diagonals:
        first, second = _step(centre, first_dir), _step(centre, second_dir)
        ends = {first, second}
        if not ends <= (m_cells | s_cells):
            return False
        if ends <= m_cells or ends <= s_cells:
            return False
    return True


class Solver:
    """Solver for 2024 day 4."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        letters = _parse(lines)
        return str(sum(_count_words(letters, start, "XMAS") for start in letters.get("X", ())))

    def solve_part2(self, lines: list[str]) -> str:
        letters = _parse(lines)
        return str(sum(1 for centre in letters.get("A", ()) if _is_x(letters, centre)))