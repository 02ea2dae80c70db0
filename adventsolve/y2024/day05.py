"""Print Queue: checking and fixing page orderings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class _Rule:
    before: int
    after: int


def _parse_rule(text: str) -> _Rule:
    before, after = text.split("|")
    return _Rule(int(before), int(after))


def _parse_manual(text: str) -> list[int]:
    return [int(page) for page in text.split(",")]


def _parse(lines: list[str]) -> tuple[list[_Rule], list[list[int]]]:
    try:
        separator = lines.index("")
    except ValueError:
        raise ValueError("input has no blank line between rules and manuals") from None
    rules = [_parse_rule(line) for line in lines[:separator]]
    manuals = [_parse_manual(line) for line in lines[separator + 1 :]]
    return rules, manuals


def _problematic_pages(manual: list[int], rules: list[_Rule]) -> tuple[int, int] | None:
    """Indices of the first pair of pages that breaks a rule, or None."""
    for i, page in enumerate(manual):
        for rule in rules:
            if rule.after != page:
                continue
            for j in range(i + 1, len(manual)):
                if manual[j] == rule.before:
                    return i, j
    return None


def _is_correct(manual: list[int], rules: list[_Rule]) -> bool:
    return _problematic_pages(manual, rules) is None


def _fixed(manual: list[int], rules: list[_Rule]) -> list[int]:
    """A copy of the manual with offending pages swapped until every rule holds."""
    pages = list(manual)
    while (pair := _problematic_pages(pages, rules)) is not None:
        i, j = pair
        pages[i], pages[j] = pages[j], pages[i]
    return pages


def _middle(manual: list[int]) -> int:
    return manual[len(manual) // 2]


class Solver:
    """Solver for 2024 day 5."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        rules, manuals = _parse(lines)
        return str(sum(_middle(m) for m in manuals if _is_correct(m, rules)))

    def solve_part2(self, lines: list[str]) -> str:
        rules, manuals = _parse(lines)
        return str(
            sum(_middle(_fixed(m, rules)) for m in manuals if not _is_correct(m, rules))
        )