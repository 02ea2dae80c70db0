from adventsolve.y2024.day08 import Solver

EXAMPLE = [
    "............",
    "........0...",
    ".....0......",
    ".......0....",
    "....0.......",
    "......A.....",
    "............",
    "............",
    "........A...",
    ".........A..",
    "............",
    "............",
]


def test_part1_example():
    assert Solver().solve_part1(EXAMPLE) == "14"


def test_part2_example():
    assert Solver().solve_part2(EXAMPLE) == "34"


def test_single_row_pair():
    assert Solver().solve_part1([".a.a..."]) == "1"
    assert Solver().solve_part2([".a.a..."]) == "3"


def test_no_antennas():
    assert Solver().solve_part1(["....", "...."]) == "0"
    assert Solver().solve_part2(["....", "...."]) == "0"


def test_different_frequencies_do_not_pair():
    assert Solver().solve_part1([".a.b..."]) == "0"