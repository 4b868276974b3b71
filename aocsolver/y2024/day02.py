"""Red-Nosed Reports: levels that change steadily in one direction."""

from __future__ import annotations

from collections.abc import Sequence

_MAX_STEP = 3


def _reports(text: str) -> list[list[int]]:
    return [[int(value) for value in line.split()] for line in text.splitlines() if line.strip()]


def is_safe(numbers: Sequence[int], ignored_index: int | None = None) -> bool:
    """Whether the levels, leaving out ``ignored_index``, all rise or all fall by 1 to 3.

    An ``ignored_index`` of None or ``len(numbers)`` leaves out nothing.
    """
    if len(numbers) < 3:
        raise ValueError("a report needs at least three levels")
    levels = [value for index, value in enumerate(numbers) if index != ignored_index]
    steps = [later - earlier for earlier, later in zip(levels, levels[1:])]
    increasing = steps[0] > 0
    return all(1 <= abs(step) <= _MAX_STEP and (step > 0) == increasing for step in steps)


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(is_safe(report) for report in _reports(text))


def part2(text: str) -> int:
    """Number of reports that are safe once at most one level is removed."""
    return sum(
        any(is_safe(report, index) for index in range(len(report) + 1))
        for report in _reports(text)
    )