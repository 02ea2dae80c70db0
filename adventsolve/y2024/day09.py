"""Disk Fragmenter: compacting a dense disk map and computing its checksum."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class _File:
    id: int
    start: int
    length: int

    def checksum(self) -> int:
        return self.id * (self.length * self.start + self.length * (self.length - 1) // 2)


@dataclass
class _Space:
    start: int
    length: int


def _parse(lines: list[str]) -> tuple[list[_File], list[_Space]]:
    files: list[_File] = []
    spaces: list[_Space] = []
    position = 0
    for index, char in enumerate(lines[0]):
        length = int(char)
        if index % 2 == 0:
            files.append(_File(index // 2, position, length))
        else:
            spaces.append(_Space(position, length))
        position += length
    return files, spaces


def _compact(files: list[_File]) -> int:
    """Move file blocks one at a time from the end into the leftmost gaps."""
    disk: list[int | None] = []
    for file in files:
        gap = (files[file.id + 1].start if file.id + 1 < len(files) else 0) - file.start - file.length
        disk.extend([file.id] * file.length)
        disk.extend([None] * max(gap, 0))
    left, right = 0, len(disk) - 1
    while True:
        while left < len(disk) and disk[left] is not None:
            left += 1
        while right >= 0 and disk[right] is None:
            right -= 1
        if left >= right:
            break
        disk[left], disk[right] = disk[right], None
    return sum(position * file_id for position, file_id in enumerate(disk) if file_id is not None)


def _compact_whole_files(files: list[_File], spaces: list[_Space]) -> int:
    """Move each whole file, highest id first, into the leftmost gap that fits."""
    for file in reversed(files):
        for space in spaces:
            if space.start >= file.start:
                break
            if space.length >= file.length:
                file.start = space.start
                space.start += file.length
                space.length -= file.length
                break
    return sum(file.checksum() for file in files)


class Solver:
    """Solver for 2024 day 9."""

    hyper_params: tuple[str, ...] = ()

    def add_hyper_params(self, *args: str) -> None:
        """Record the hyper parameters; this puzzle does not use them."""
        self.hyper_params = tuple(args)

    def solve_part1(self, lines: list[str]) -> str:
        files, _ = _parse(lines)
        return str(_compact(files))

    def solve_part2(self, lines: list[str]) -> str:
        files, spaces = _parse(lines)
        return str(_compact_whole_files(files, spaces))