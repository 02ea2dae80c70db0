import pytest

from adventsolve.y2024.day14 import Solver

EXAMPLE = [
    "p=0,4 v=3,-3",
    "p=6,3 v=-1,-3",
    "p=10,3 v=-1,2",
    "p=2,0 v=2,-1",
    "p=0,0 v=1,3",
    "p=3,0 v=-2,-2",
    "p=7,6 v=-1,-3",
    "p=3,0 v=-1,-2",
    "p=9,3 v=2,3",
    "p=7,3 v=-1,2",
    "p=2,4 v=2,-3",
    "p=9,5 v=-3,-3",
]


def _example_solver():
    solver = Solver()
    solver.add_hyper_params("11", "7")
    return solver


def test_part1_example():
    assert _example_solver().solve_part1(EXAMPLE) == "12"


def test_hyper_params_set_dimensions():
    solver = _example_solver()
    assert (solver.width, solver.height) == (11, 7)


def test_wrong_number_of_hyper_params_restores_defaults():
    solver = _example_solver()
    solver.add_hyper_params()
    assert (solver.width, solver.height) == (101, 103)


def test_non_numeric_hyper_params_raise():
    with pytest.raises(ValueError):
        Solver().add_hyper_params("wide", "7")


def test_part2_result_within_one_cycle():
    result = int(_example_solver().solve_part2(EXAMPLE))
    assert 1 <= result <= 11 * 7


def test_part2_finds_zero_factor_second():
    # A robot stays on the middle column forever, so every factor is zero
    # and the first second is the minimum.
    solver = _example_solver()
    assert solver.solve_part2(["p=5,0 v=0,1"]) == "1"


def test_malformed_robot_raises():
    with pytest.raises(ValueError):
        _example_solver().solve_part1(["p=1 v=2"])