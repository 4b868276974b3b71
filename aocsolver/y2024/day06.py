"""Guard Gallivant: follow a patrolling guard and find spots that trap it."""

from __future__ import annotations

from aocsolver.grid import Grid

Point = tuple[int, int]

# Up, right, down, left: the guard turns right by moving to the next entry.
_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))
_OBSTACLE = "#"
_FLOOR = "."
_GUARD = "^"


def parse_lab(text: str) -> tuple[Grid, Point]:
    """The lab map and the guard's starting location."""
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty map")
    grid = Grid()
    start: Point | None = None
    for y, row in enumerate(rows):
        if len(row) != len(rows[0]):
            raise ValueError(f"map row has a different width: {row!r}")
        grid.insert_line(row)
        if start is None and _GUARD in row:
            start = (row.index(_GUARD), y)
    if start is None:
        raise ValueError("the map has no guard")
    return grid, start


def _advance(
    grid: Grid, location: Point, heading: int, block: Point | None
) -> tuple[Point, int]:
    dx, dy = _DIRECTIONS[heading]
    following = (location[0] + dx, location[1] + dy)
    if grid[following] == _OBSTACLE or following == block:
        return location, (heading + 1) % len(_DIRECTIONS)
    return following, heading


def guard_escapes(grid: Grid, start: Point, block: Point | None = None) -> bool:
    """Whether the guard reaches the edge with an extra obstacle at ``block``."""
    block = tuple(block) if block is not None else None
    location, heading = tuple(start), 0
    seen: set[tuple[Point, int]] = set()
    while not grid.is_border_location(location):
        state = (location, heading)
        if state in seen:
            return False
        seen.add(state)
        location, heading = _advance(grid, location, heading, block)
    return True


def _never_leaves() -> ValueError:
    return ValueError("the guard walks in a loop and never leaves")


def part1(text: str) -> int:
    """Distinct locations the guard visits before leaving the map."""
    grid, start = parse_lab(text)
    location, heading = start, 0
    visited: set[Point] = set()
    states: set[tuple[Point, int]] = set()
    while not grid.is_border_location(location):
        if (location, heading) in states:
            raise _never_leaves()
        states.add((location, heading))
        visited.add(location)
        location, heading = _advance(grid, location, heading, None)
    visited.add(location)
    return len(visited)


def part2(text: str) -> int:
    """Locations on the guard's route where one new obstacle traps the guard."""
    grid, start = parse_lab(text)
    location, heading = start, 0
    visited: set[Point] = set()
    states: set[tuple[Point, int]] = set()
    options = 0
    while not grid.is_border_location(location):
        if (location, heading) in states:
            raise _never_leaves()
        states.add((location, heading))
        if location not in visited and grid[location] == _FLOOR:
            options += not guard_escapes(grid, start, location)
        visited.add(location)
        location, heading = _advance(grid, location, heading, None)
    options += not guard_escapes(grid, start, location)
    return options