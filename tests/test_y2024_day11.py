import pytest

from adventsolve.y2024.day11 import Solver, next_values

EXAMPLE = ["125 17"]


def test_part1_example():
    assert Solver().solve_part1(EXAMPLE) == "55312"


def test_part2_example():
    assert Solver().solve_part2(EXAMPLE) == "65601038650482"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, [1]),
        (1, [2024]),
        (10, [1, 0]),
        (99, [9, 9]),
        (999, [2021976]),
        (1000, [10, 0]),
        (253000, [253, 0]),
    ],
)
def test_next_values(value, expected):
    assert next_values(value) == expected


def test_single_zero_stone_part1_is_positive_and_deterministic():
    first = Solver().solve_part1(["0"])
    assert first == Solver().solve_part1(["0"])
    assert int(first) > 1