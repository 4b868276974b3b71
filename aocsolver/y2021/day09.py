"""Smoke basins: low points and basin sizes of a height map."""

from __future__ import annotations

import math

_WALL = 9
_DIGITS = frozenset("0123456789")
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def parse_heightmap(text: str) -> list[list[int]]:
    """Rows of single-digit heights."""
    rows = []
    for line in text.split():
        if not set(line) <= _DIGITS:
            raise ValueError(f"height map row holds a non-digit: {line!r}")
        rows.append([int(char) for char in line])
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("height map rows differ in length")
    return rows


def _height(heightmap: list[list[int]], row: int, column: int) -> int:
    if 0 <= row < len(heightmap) and 0 <= column < len(heightmap[row]):
        return heightmap[row][column]
    return _WALL


def low_points(heightmap: list[list[int]]) -> list[tuple[int, int]]:
    """Locations strictly lower than all four neighbours."""
    return [
        (row, column)
        for row, heights in enumerate(heightmap)
        for column, height in enumerate(heights)
        if all(
            height < _height(heightmap, row + d_row, column + d_column)
            for d_row, d_column in _NEIGHBOURS
        )
    ]


def basin_size(heightmap: list[list[int]], row: int, column: int) -> int:
    """Number of cells reachable from a location without crossing a 9."""
    visited: set[tuple[int, int]] = set()
    pending = [(row, column)]
    while pending:
        location = pending.pop()
        if location in visited or _height(heightmap, *location) == _WALL:
            continue
        visited.add(location)
        current_row, current_column = location
        pending.extend(
            (current_row + d_row, current_column + d_column) for d_row, d_column in _NEIGHBOURS
        )
    return len(visited)


def part1(text: str) -> int:
    """Sum of the risk levels of all low points."""
    heightmap = parse_heightmap(text)
    return sum(heightmap[row][column] + 1 for row, column in low_points(heightmap))


def part2(text: str) -> int:
    """Product of the three largest basin sizes."""
    heightmap = parse_heightmap(text)
    sizes = sorted(
        (basin_size(heightmap, row, column) for row, column in low_points(heightmap)),
        reverse=True,
    )
    largest = (sizes + [0, 0, 0])[:3]
    return math.prod(largest)