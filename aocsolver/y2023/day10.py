"""Pipe maze: the loop through the start tile and the tiles it encloses."""

from __future__ import annotations

import copy
import math

from aocsolver.grid import Grid

Point = tuple[int, int]

_CONNECTIONS: dict[str, tuple[Point, ...]] = {
    "F": ((1, 0), (0, 1)),
    "L": ((1, 0), (0, -1)),
    "7": ((-1, 0), (0, 1)),
    "J": ((-1, 0), (0, -1)),
    "|": ((0, -1), (0, 1)),
    "-": ((1, 0), (-1, 0)),
    "S": ((0, 1), (0, -1), (1, 0), (-1, 0)),
}
_CROSSINGS = frozenset("|JL")
_EMPTY = "."


def parse_map(text: str) -> tuple[Grid, Point]:
    """The map surrounded by one ring of empty tiles, and the start location."""
    rows = text.split()
    if not rows:
        raise ValueError("empty map")
    width = len(rows[0]) + 2
    grid = Grid()
    blank = _EMPTY * width
    grid.insert_line(blank)
    start: Point | None = None
    for y, row in enumerate(rows, start=1):
        if len(row) + 2 != width:
            raise ValueError(f"map row has a different width: {row!r}")
        grid.insert_line(f"{_EMPTY}{row}{_EMPTY}")
        if start is None and "S" in row:
            start = (row.index("S") + 1, y)
    grid.insert_line(blank)
    if start is None:
        raise ValueError("the map has no start tile")
    return grid, start


def trace_loop(grid: Grid, start: Point) -> tuple[int, list[Point]]:
    """Steps to the farthest loop tile, and the loop's tiles ending with the start."""
    steps: dict[Point, int] = {start: 0}
    frames = [(start, None, 0, iter(_CONNECTIONS.get(grid[start], ())))]
    while frames:
        (x, y), previous, current, directions = frames[-1]
        for dx, dy in directions:
            following = (x + dx, y + dy)
            if following == previous:
                continue
            if steps.get(following, math.inf) > current + 1:
                steps[following] = current + 1
                frames.append(
                    (following, (x, y), current + 1,
                     iter(_CONNECTIONS.get(grid[following], ())))
                )
                break
            if grid[following] == "S":
                border = [frame[0] for frame in reversed(frames)]
                return current // 2 + 1, border
        else:
            frames.pop()
    raise ValueError("no loop returns to the start tile")


def detect_start_shape(grid: Grid, border_points: list[Point]) -> str:
    """The pipe shape hidden under the start tile."""
    if len(border_points) < 2:
        raise ValueError("a loop needs at least two tiles")
    one_side = border_points[0]
    second_side = border_points[-2]
    start = border_points[-1]

    if one_side[0] == second_side[0]:
        return "|"
    if one_side[1] == second_side[1]:
        return "-"

    x_offset = one_side[0] - second_side[0]
    y_offset = one_side[1] - second_side[1]
    start_is_high = start[1] <= one_side[1] or start[1] <= second_side[1]
    if x_offset == y_offset and abs(y_offset) == 1:
        return "7" if start_is_high else "L"
    return "F" if start_is_high else "J"


def _clear_non_loop(grid: Grid, loop: set[Point]) -> Grid:
    cleared = copy.copy(grid)
    for y in range(1, grid.size_y() - 1):
        for x in range(1, grid.size_x() - 1):
            if (x, y) not in loop:
                cleared[x, y] = _EMPTY
    return cleared


def count_enclosed(grid: Grid, border_points: list[Point]) -> int:
    """Tiles inside the loop, ignoring every pipe that is not part of it."""
    cleared = _clear_non_loop(grid, set(border_points))
    start_shape = detect_start_shape(grid, border_points)
    count = 0
    crossings = 0
    for tile, x, _ in cleared.cells():
        if x == 0:
            crossings = 0
        if tile == "S":
            tile = start_shape
        crossings += tile in _CROSSINGS
        if crossings % 2 == 1 and tile == _EMPTY:
            count += 1
    return count


def part1(text: str) -> int:
    """Steps from the start to the farthest point of the loop."""
    grid, start = parse_map(text)
    steps, _ = trace_loop(grid, start)
    return steps


def part2(text: str) -> int:
    """Number of tiles enclosed by the loop."""
    grid, start = parse_map(text)
    _, border = trace_loop(grid, start)
    return count_enclosed(grid, border)