"""Trick shot: launch velocities that land a probe in a target area."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

_TARGET = re.compile(r"x=(-?\d+)\.\.(-?\d+),\s*y=(-?\d+)\.\.(-?\d+)")


@dataclass(frozen=True)
class TargetArea:
    x_start: int
    x_stop: int
    y_top: int
    y_bottom: int

    def contains(self, x: int, y: int) -> bool:
        return self.x_start <= x <= self.x_stop and self.y_bottom <= y <= self.y_top


def parse_target(text: str) -> TargetArea:
    """Read ``target area: x=a..b, y=c..d``."""
    match = _TARGET.search(text)
    if match is None:
        raise ValueError(f"not a target area description: {text!r}")
    x_start, x_stop, y_bottom, y_top = (int(value) for value in match.groups())
    return TargetArea(x_start, x_stop, y_top, y_bottom)


def _is_before(x: int, y: int, vx: int, area: TargetArea) -> bool:
    if vx > 0:
        x_before = x != area.x_start and x < area.x_start
    else:
        x_before = x != area.x_start and x > area.x_start
    y_before = y > area.y_top
    return (x_before and vx != 0) or y_before


def check_velocity(vx: int, vy: int, area: TargetArea) -> tuple[bool, int]:
    """Whether the launch hits the area, and the highest y reached."""
    x, y = vx, vy
    highest = y
    while not area.contains(x, y) and _is_before(x, y, vx, area):
        vx -= (vx > 0) - (vx < 0)
        vy -= 1
        x += vx
        y += vy
        highest = max(highest, y)
    return area.contains(x, y), highest


def _candidates(area: TargetArea) -> Iterator[tuple[int, int]]:
    for vx in range(area.x_stop, -1, -1):
        for vy in range(area.y_bottom, area.x_stop):
            yield vx, vy


def part1(text: str) -> int:
    """Highest y position of any launch that hits the area."""
    area = parse_target(text)
    highest = area.y_bottom
    for vx, vy in _candidates(area):
        hit, peak = check_velocity(vx, vy, area)
        if hit:
            highest = max(highest, peak)
    return highest


def part2(text: str) -> int:
    """Number of distinct launch velocities that hit the area."""
    area = parse_target(text)
    return sum(check_velocity(vx, vy, area)[0] for vx, vy in _candidates(area))