import pytest

from adventsolve.y2024.day15 import Solver, _parse_warehouse

SMALL_MAP = [
    "########",
    "#..O.O.#",
    "##@.O..#",
    "#...O..#",
    "#.#.O..#",
    "#...O..#",
    "#......#",
    "########",
]
SMALL = SMALL_MAP + ["", "<^^>>>vv<v>>v<<"]

WIDE = [
    "#######",
    "#...#.#",
    "#.....#",
    "#..OO@#",
    "#..O..#",
    "#.....#",
    "#######",
    "",
    "<vv<<^^<<^^",
]


def test_part1_small_example():
    assert Solver().solve_part1(SMALL) == "2028"


def test_part2_wide_example():
    assert Solver().solve_part2(WIDE) == "618"


def test_part1_box_stops_at_wall():
    lines = ["#####", "#@O.#", "#####", "", ">>>"]
    assert Solver().solve_part1(lines) == "103"


def test_part1_without_moves_is_initial_gps():
    lines = ["#####", "#@O.#", "#####", ""]
    assert Solver().solve_part1(lines) == "102"


def test_render_round_trip():
    warehouse = _parse_warehouse(SMALL)
    assert str(warehouse) == "\n".join(SMALL_MAP)


def test_moves_preserve_box_count():
    warehouse = _parse_warehouse(SMALL)
    count = len(warehouse.boxes)
    for move in warehouse.moves:
        warehouse.move_robot(move)
    assert len(warehouse.boxes) == count
    assert not warehouse.boxes & warehouse.walls


def test_upscale_doubles_width():
    warehouse = _parse_warehouse(WIDE)
    warehouse.upscale(2)
    assert warehouse.limit == (14, 7)
    assert warehouse.robot == (10, 3)
    assert warehouse.boxes == {(6, 3), (8, 3), (6, 4)}


def test_invalid_move_raises():
    with pytest.raises(ValueError):
        Solver().solve_part1(["###", "#@#", "###", "", "^x"])


def test_missing_separator_raises():
    with pytest.raises(ValueError):
        Solver().solve_part1(["###", "#@#", "###"])