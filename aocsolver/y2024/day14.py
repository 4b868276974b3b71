"""Restroom Redoubt: robots wrapping around a rectangular area."""

from __future__ import annotations

import math
import re
from collections.abc import Iterator

Point = tuple[int, int]

WIDTH = 101
HEIGHT = 103
PREDICTION_SECONDS = 100

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+)\s+v=(-?\d+),(-?\d+)")


class Area:
    """Robot positions after a fixed number of seconds, by quadrant."""

    def __init__(self, seconds: int, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("the area needs a positive width and height")
        self.seconds = seconds
        self.width = width
        self.height = height
        self._blind_column = width // 2
        self._blind_line = height // 2
        self.quadrants = [0, 0, 0, 0]
        self._picture = [[0] * width for _ in range(height)]

    def add_robot(self, position: Point, velocity: Point) -> Point:
        """Place a robot where it is after ``seconds``; return that location."""
        x = (position[0] + velocity[0] * self.seconds) % self.width
        y = (position[1] + velocity[1] * self.seconds) % self.height
        self._picture[y][x] += 1
        if x != self._blind_column and y != self._blind_line:
            right = x >= self._blind_column
            bottom = y >= self._blind_line
            self.quadrants[2 * bottom + right] += 1
        return x, y

    def safety_factor(self) -> int:
        """Product of the quadrant counts, an empty quadrant counting as one."""
        return math.prod(count or 1 for count in self.quadrants)

    def render(self) -> str:
        """The area with '*' where at least one robot stands."""
        return "".join(
            "".join("*" if count else " " for count in row) + "\n" for row in self._picture
        )


def parse_robots(text: str) -> list[tuple[Point, Point]]:
    """Robots as ``(position, velocity)`` pairs from ``p=x,y v=dx,dy`` lines."""
    robots = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _ROBOT.search(line)
        if match is None:
            raise ValueError(f"not a robot description: {line!r}")
        px, py, vx, vy = (int(value) for value in match.groups())
        robots.append(((px, py), (vx, vy)))
    return robots


def _area(robots: list[tuple[Point, Point]], seconds: int, width: int, height: int) -> Area:
    area = Area(seconds, width, height)
    for position, velocity in robots:
        area.add_robot(position, velocity)
    return area


def part1(text: str, width: int = WIDTH, height: int = HEIGHT) -> int:
    """Safety factor after a hundred seconds."""
    return _area(parse_robots(text), PREDICTION_SECONDS, width, height).safety_factor()


def tree_frames(
    text: str,
    start: int = 50 + HEIGHT,
    step: int = HEIGHT,
    limit: int = 10_000,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> Iterator[tuple[int, str]]:
    """Pictures of the robots at ``start`` and every ``step`` seconds after, up past ``limit``."""
    robots = parse_robots(text)
    seconds = start
    yield seconds, _area(robots, seconds, width, height).render()
    while seconds < limit:
        seconds += step
        yield seconds, _area(robots, seconds, width, height).render()