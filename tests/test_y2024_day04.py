import pytest

from adventsolve.y2024.day04 import Direction, Solver

EXAMPLE = [
    "MMMSXXMASM",
    "MSAMXMSMSA",
    "AMXSXMAAMM",
    "MSAMASMSMX",
    "XMASAMXAMM",
    "XXAMMXXAMA",
    "SMSMSASXSS",
    "SAXAMASAAA",
    "MAMMMXMMMM",
    "MXMXAXMASX",
]


def test_part1_example():
    assert Solver().solve_part1(EXAMPLE) == "18"


def test_part2_example():
    assert Solver().solve_part2(EXAMPLE) == "9"


@pytest.mark.parametrize(
    "direction, unit",
    [
        (Direction.UP, (0, -1)),
        (Direction.DOWN_RIGHT, (1, 1)),
        (Direction.LEFT, (-1, 0)),
        (Direction.UP_LEFT, (-1, -1)),
    ],
)
def test_direction_units(direction, unit):
    assert direction.unit == unit


def test_part1_word_both_ways():
    assert Solver().solve_part1(["XMASAMX"]) == "2"


def test_part2_rejects_same_letters_on_diagonal():
    assert Solver().solve_part2(["M.S", ".A.", "M.S"]) == "1"
    assert Solver().solve_part2(["M.M", ".A.", "M.M"]) == "0"


def test_part1_empty_grid():
    assert Solver().solve_part1([]) == "0"