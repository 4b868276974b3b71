"""Overlapping hydrothermal vent lines."""

from collections import Counter
from collections.abc import Iterator


def _point(text: str) -> tuple[int, int]:
    x, y = (int(value) for value in text.split(","))
    return x, y


def _segments(text: str) -> Iterator[tuple[tuple[int, int], tuple[int, int]]]:
    for line in text.splitlines():
        if line.strip():
            start, _, end = line.partition(" -> ")
            yield _point(start), _point(end)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def part1(text: str) -> int:
    """Points covered by at least two horizontal or vertical lines."""
    covered: Counter[tuple[int, int]] = Counter()
    for (x1, y1), (x2, y2) in _segments(text):
        if x1 != x2 and y1 != y2:
            continue
        dx, dy = _sign(x2 - x1), _sign(y2 - y1)
        length = max(abs(x2 - x1), abs(y2 - y1))
        covered.update((x1 + dx * step, y1 + dy * step) for step in range(length + 1))
    return sum(count >= 2 for count in covered.values())