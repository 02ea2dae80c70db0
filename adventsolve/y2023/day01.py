"""Trebuchet calibration values."""

from __future__ import annotations

from collections.abc import Mapping

DIGITS: dict[str, int] = {str(value): value for value in range(10)}

WORD_DIGITS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _digits(line: str, possible_digits: Mapping[str, int]) -> list[int]:
    """All digits found in the line, including overlapping spelled-out ones."""
    found = []
    for start in range(len(line)):
        for spelling, value in possible_digits.items():
            if line.startswith(spelling, start):
                found.append(value)
                break
    return found


def calibration_value(line: str, possible_digits: Mapping[str, int]) -> int:
    """First digit times ten plus last digit; ValueError if the line has none."""
    digits = _digits(line, possible_digits)
    if not digits:
        raise ValueError(f"no digit in line {line!r}")
    return digits[0] * 10 + digits[-1]


class Solver:
    """Solver for 2023 day 1."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        return str(sum(calibration_value(line, DIGITS) for line in lines))

    def solve_part2(self, lines: list[str]) -> str:
        digits = {**DIGITS, **WORD_DIGITS}
        return str(sum(calibration_value(line, digits) for line in lines))