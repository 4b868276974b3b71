"""Ceres Search: find XMAS words and X-shaped MAS crosses in a letter grid."""

from __future__ import annotations

from aocsolver.grid import Grid

_SIDE_PAD = "."
_LINE_PAD = ","
_TAIL = "MAS"
_DIRECTIONS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)
_PAIR = {"M", "S"}


def parse_grid(text: str) -> Grid:
    """The letters surrounded by one ring of padding cells."""
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty grid")
    width = len(rows[0])
    grid = Grid()
    for row in rows:
        if len(row) != width:
            raise ValueError(f"grid row has a different width: {row!r}")
        grid.insert_line(_SIDE_PAD + row + _SIDE_PAD)
    grid.insert_padding_lines(_LINE_PAD)
    return grid


def _interior(grid: Grid, letter: str):
    for value, x, y in grid.cells():
        if value == letter and not grid.is_border_location((x, y)):
            yield x, y


def count_xmas(grid: Grid) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    return sum(
        all(grid[x + step * dx, y + step * dy] == char for step, char in enumerate(_TAIL, 1))
        for x, y in _interior(grid, "X")
        for dx, dy in _DIRECTIONS
    )


def count_x_mas(grid: Grid) -> int:
    """Letters A whose two diagonals each read MAS in either direction."""
    return sum(
        {grid[x - 1, y - 1], grid[x + 1, y + 1]} == _PAIR
        and {grid[x + 1, y - 1], grid[x - 1, y + 1]} == _PAIR
        for x, y in _interior(grid, "A")
    )


def part1(text: str) -> int:
    return count_xmas(parse_grid(text))


def part2(text: str) -> int:
    return count_x_mas(parse_grid(text))