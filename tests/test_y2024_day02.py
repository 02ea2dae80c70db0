import pytest

from adventsolve.y2024.day02 import Solver, is_safe, is_tolerable

EXAMPLE = [
    "7 6 4 2 1",
    "1 2 7 8 9",
    "9 7 6 2 1",
    "1 3 2 4 5",
    "8 6 4 4 1",
    "1 3 6 7 9",
]


def test_part1_example():
    solver = Solver()
    solver.add_hyper_params()
    assert solver.solve_part1(EXAMPLE) == "2"


def test_part2_example():
    solver = Solver()
    solver.add_hyper_params()
    assert solver.solve_part2(EXAMPLE) == "4"


@pytest.mark.parametrize(
    "report, safe",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
    ],
)
def test_is_safe(report, safe):
    assert is_safe(report) is safe


@pytest.mark.parametrize(
    "report, tolerable",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], True),
        ([8, 6, 4, 4, 1], True),
        ([1, 3, 6, 7, 9], True),
    ],
)
def test_is_tolerable(report, tolerable):
    assert is_tolerable(report) is tolerable


def test_safe_report_is_tolerable():
    assert all(is_tolerable(r) for r in ([1, 2, 3], [9, 8, 6], [5]))


def test_empty_report_is_not_tolerable():
    assert is_tolerable([]) is False


def test_bad_number_raises():
    with pytest.raises(ValueError):
        Solver().solve_part1(["1 x 3"])