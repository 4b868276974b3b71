"""Hoof It: hiking trails climbing from height 0 to height 9."""

from __future__ import annotations

from aocsolver.grid import Grid

Point = tuple[int, int]

_PAD = "Y"
_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def parse_trail_map(text: str) -> tuple[Grid, list[Point]]:
    """The map padded by one ring of blocked cells, and the trailhead locations."""
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty map")
    width = len(rows[0])
    grid = Grid()
    starts: list[Point] = []
    for y, row in enumerate(rows, start=1):
        if len(row) != width:
            raise ValueError(f"map row has a different width: {row!r}")
        grid.insert_line(_PAD + row + _PAD)
        starts.extend((x, y) for x, char in enumerate(row, start=1) if char == "0")
    grid.insert_padding_lines(_PAD)
    return grid, starts


def _uphill(grid: Grid, location: Point) -> list[Point]:
    x, y = location
    height = ord(grid[location])
    return [
        (x + dx, y + dy)
        for dx, dy in _DIRECTIONS
        if ord(grid[x + dx, y + dy]) - height == 1
    ]


def trail_score(grid: Grid, start: Point) -> int:
    """Number of distinct height-9 cells reachable from ``start``."""
    visited = {start}
    pending = [start]
    while pending:
        location = pending.pop()
        for following in _uphill(grid, location):
            if following not in visited:
                visited.add(following)
                pending.append(following)
    return sum(grid[location] == "9" for location in visited)


def trail_rating(grid: Grid, start: Point) -> int:
    """Number of distinct uphill trails from ``start`` to a height-9 cell."""
    memo: dict[Point, int] = {}

    def paths(location: Point) -> int:
        if location not in memo:
            memo[location] = sum(paths(following) for following in _uphill(grid, location)) + (
                grid[location] == "9"
            )
        return memo[location]

    return paths(start)


def part1(text: str) -> int:
    """Sum of the scores of all trailheads."""
    grid, starts = parse_trail_map(text)
    return sum(trail_score(grid, start) for start in starts)


def part2(text: str) -> int:
    """Sum of the ratings of all trailheads."""
    grid, starts = parse_trail_map(text)
    return sum(trail_rating(grid, start) for start in starts)