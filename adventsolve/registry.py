"""The solver interface and the registry of solvers by year and day."""

from __future__ import annotations

from typing import Protocol


class Solver(Protocol):
    """What every daily puzzle solver provides."""

    def add_hyper_params(self, *args: str) -> None:
        """Receive extra command-line parameters."""

    def solve_part1(self, lines: list[str]) -> str:
        """Solve the first part of the puzzle."""

    def solve_part2(self, lines: list[str]) -> str:
        """Solve the second part of the puzzle."""


class YearNotFound(KeyError):
    """No solvers are registered for the requested year."""


class DayNotFound(KeyError):
    """No solver is registered for the requested day."""


class Registry:
    """Solvers keyed by year and then by day."""

    def __init__(self) -> None:
        self._years: dict[int, dict[int, Solver]] = {}

    def add(self, year: int, day: int, solver: Solver) -> None:
        """Register ``solver`` for the given year and day, replacing any earlier one."""
        self._years.setdefault(year, {})[day] = solver

    def get(self, year: int, day: int) -> Solver:
        """Return the solver for the given year and day."""
        try:
            days = self._years[year]
        except KeyError:
            raise YearNotFound(year) from None
        try:
            return days[day]
        except KeyError:
            raise DayNotFound(day) from None

    def years(self) -> list[int]:
        """All registered years in ascending order."""
        return sorted(self._years)

    def days(self, year: int) -> list[int]:
        """All registered days of a year in ascending order; empty if the year is unknown."""
        return sorted(self._years.get(year, {}))