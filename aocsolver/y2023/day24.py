"""Hailstone paths: count pairwise crossings inside a test area."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NUMBER = re.compile(r"-?\d+")

TEST_AREA_LOW = 200000000000000
TEST_AREA_HIGH = 400000000000000


@dataclass(frozen=True)
class Hailstone:
    position: tuple[int, int, int]
    velocity: tuple[int, int, int]


def _triple(text: str, line: str) -> tuple[int, int, int]:
    numbers = [int(value) for value in _NUMBER.findall(text)]
    if len(numbers) != 3:
        raise ValueError(f"expected three coordinates: {line!r}")
    return numbers[0], numbers[1], numbers[2]


def parse_hailstones(text: str) -> list[Hailstone]:
    """Read lines of the form ``px, py, pz @ vx, vy, vz``."""
    hailstones = []
    for line in text.splitlines():
        if not line.strip():
            continue
        position, separator, velocity = line.partition("@")
        if not separator:
            raise ValueError(f"hailstone has no velocity: {line!r}")
        hailstones.append(Hailstone(_triple(position, line), _triple(velocity, line)))
    return hailstones


def collide(a: Hailstone, b: Hailstone, low: float, high: float) -> bool:
    """Whether the two paths cross in the x-y plane inside the area, in the future."""
    xa0, ya0 = float(a.position[0]), float(a.position[1])
    xat, yat = float(a.velocity[0]), float(a.velocity[1])
    xb0, yb0 = float(b.position[0]), float(b.position[1])
    xbt, ybt = float(b.velocity[0]), float(b.velocity[1])
    if xat == 0 or xbt == 0:
        return False

    ma = ((ya0 + yat) - ya0) / ((xa0 + xat) - xa0)
    mb = ((yb0 + ybt) - yb0) / ((xb0 + xbt) - xb0)
    if mb - ma == 0:
        return False

    x = (-ma * xa0 + ya0 - yb0 + mb * xb0) / (mb - ma)
    y = ma * (x - xa0) + ya0
    if not (low <= x <= high and low <= y <= high):
        return False

    time_a = (x - xa0) / xat
    time_b = (x - xb0) / xbt
    return time_a >= 0 and time_b >= 0


def part1(text: str, low: float = TEST_AREA_LOW, high: float = TEST_AREA_HIGH) -> int:
    """Number of hailstone pairs whose paths cross inside the test area."""
    hailstones = parse_hailstones(text)
    return sum(
        collide(first, second, low, high)
        for index, first in enumerate(hailstones)
        for second in hailstones[index + 1:]
    )