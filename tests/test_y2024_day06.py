import pytest

from aocsolver.y2024.day06 import guard_escapes, parse_lab, part1, part2

EXAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def test_example_part1():
    assert part1(EXAMPLE) == 41


def test_example_part2():
    assert part2(EXAMPLE) == 6


def test_parse_lab_finds_guard():
    grid, start = parse_lab(EXAMPLE)
    assert start == (4, 6)
    assert grid[start] == "^"
    assert grid[4, 0] == "#"


def test_guard_escapes_without_extra_obstacle():
    grid, start = parse_lab(EXAMPLE)
    assert guard_escapes(grid, start)


@pytest.mark.parametrize("block", [(3, 6), (6, 7), (7, 9)])
def test_obstacle_that_traps_guard(block):
    grid, start = parse_lab(EXAMPLE)
    assert not guard_escapes(grid, start, block)


def test_obstacle_off_the_route_lets_guard_escape():
    grid, start = parse_lab(EXAMPLE)
    assert guard_escapes(grid, start, (0, 0))


def test_visited_locations_bounded_by_open_cells():
    open_cells = sum(char != "#" for char in EXAMPLE if char not in "\n")
    assert 0 < part1(EXAMPLE) <= open_cells


def test_missing_guard_raises():
    with pytest.raises(ValueError):
        parse_lab("....\n.#..\n....")