import pytest

from adventsolve.y2024.day06 import Solver

EXAMPLE = [
    "....#.....",
    ".........#",
    "..........",
    "..#.......",
    ".......#..",
    "..........",
    ".#..^.....",
    "........#.",
    "#.........",
    "......#...",
]


def test_part1_example():
    assert Solver().solve_part1(EXAMPLE) == "41"


def test_part2_example():
    assert Solver().solve_part2(EXAMPLE) == "6"


def test_part1_straight_exit():
    assert Solver().solve_part1([".", ".", "^"]) == "3"


def test_part2_no_loop_possible():
    assert Solver().solve_part2([".", ".", "^"]) == "0"


def test_invalid_field_raises():
    with pytest.raises(ValueError):
        Solver().solve_part1(["..?", ".^."])


def test_missing_guard_raises():
    with pytest.raises(ValueError):
        Solver().solve_part1(["...", "..."])


def test_part1_does_not_change_input():
    lines = list(EXAMPLE)
    Solver().solve_part1(lines)
    assert lines == EXAMPLE