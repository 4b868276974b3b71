"""Boat races: count the button hold times that beat the record."""

from __future__ import annotations

import math
import re

_NUMBER = re.compile(r"\d+")


def count_ways(time: int, distance: int) -> int:
    """Hold times in ``[0, time]`` whose travelled distance beats ``distance``."""
    if time < 0:
        return 0
    discriminant = time * time - 4 * distance
    if discriminant < 0:
        return 0
    low = max(0, (time - math.isqrt(discriminant)) // 2)
    while low <= time and low * (time - low) <= distance:
        low += 1
    while low > 0 and (low - 1) * (time - low + 1) > distance:
        low -= 1
    high = time - low
    return high - low + 1 if low <= high else 0


def _two_lines(text: str) -> tuple[str, str]:
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("expected a line of times and a line of distances")
    return lines[0], lines[1]


def part1(text: str) -> int:
    """Product of the ways to win each race."""
    time_line, distance_line = _two_lines(text)
    times = [int(value) for value in _NUMBER.findall(time_line)]
    distances = [int(value) for value in _NUMBER.findall(distance_line)]
    if len(times) != len(distances):
        raise ValueError("times and distances differ in count")
    return math.prod(count_ways(time, distance) for time, distance in zip(times, distances))


def part2(text: str) -> int:
    """Ways to win the single race read with spaces removed."""
    time_line, distance_line = _two_lines(text)
    digits = [re.findall(r"\d", line) for line in (time_line, distance_line)]
    if not all(digits):
        raise ValueError("a line holds no digits")
    time, distance = (int("".join(found)) for found in digits)
    return count_ways(time, distance)