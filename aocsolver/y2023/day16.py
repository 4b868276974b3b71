"""Light beams bouncing through mirrors and splitters."""

from __future__ import annotations

from collections.abc import Sequence

Point = tuple[int, int]

# Headings in degrees: 180 right, 270 down, 0 left, 90 up.
_STEPS: dict[int, Point] = {180: (0, 1), 270: (1, 0), 0: (0, -1), 90: (-1, 0)}


def parse_map(text: str) -> list[str]:
    """The contraption layout as a list of rows."""
    layout = text.split()
    if not layout:
        raise ValueError("empty layout")
    return layout


def _next_degrees(tile: str, degrees: int) -> tuple[int, ...]:
    horizontal = degrees in (180, 0)
    if tile == "/":
        return (degrees - 90 if horizontal else degrees + 90,)
    if tile == "\\":
        return (degrees + 90 if horizontal else degrees - 90,)
    if tile == "-" and not horizontal:
        return (180, 0)
    if tile == "|" and horizontal:
        return (270, 90)
    return (degrees,)


def energize(layout: Sequence[str], start: Point, degrees: int) -> set[Point]:
    """Tiles ``(row, column)`` a beam entering at ``start`` passes through."""
    degrees %= 360
    if degrees not in _STEPS:
        raise ValueError(f"heading must be a multiple of 90 degrees: {degrees}")
    height = len(layout)
    width = len(layout[0]) if layout else 0
    seen: set[tuple[Point, int]] = set()
    tiles: set[Point] = set()
    pending = [((start[0], start[1]), degrees)]
    while pending:
        location, heading = pending.pop()
        row, column = location
        if not (0 <= row < height and 0 <= column < width):
            continue
        if (location, heading) in seen:
            continue
        seen.add((location, heading))
        tiles.add(location)
        for following in _next_degrees(layout[row][column], heading):
            following %= 360
            d_row, d_column = _STEPS[following]
            pending.append(((row + d_row, column + d_column), following))
    return tiles


def part1(text: str) -> int:
    """Energized tiles for a beam entering the top-left corner heading right."""
    return len(energize(parse_map(text), (0, 0), 180))


def part2(text: str) -> int:
    """Most energized tiles over every entry point on the edges."""
    layout = parse_map(text)
    height, width = len(layout), len(layout[0])
    entries = (
        [((0, column), 270) for column in range(width)]
        + [((height - 1, column), 90) for column in range(width)]
        + [((row, 0), 180) for row in range(height)]
        + [((row, width - 1), 0) for row in range(height)]
    )
    return max(len(energize(layout, start, degrees)) for start, degrees in entries)