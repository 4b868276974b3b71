import pytest

from aocsolver.y2023.day10 import (
    count_enclosed,
    detect_start_shape,
    parse_map,
    part1,
    part2,
    trace_loop,
)

SIMPLE = ".....\n.S-7.\n.|.|.\n.L-J.\n.....\n"
NOISY = "-L|F7\n7S-7|\nL|7||\n-L-J|\nL|-JF\n"
ENCLOSED = (
    "...........\n"
    ".S-------7.\n"
    ".|F-----7|.\n"
    ".||.....||.\n"
    ".||.....||.\n"
    ".|L-7.F-J|.\n"
    ".|..|.|..|.\n"
    ".L--J.L--J.\n"
    "...........\n"
)


def test_parse_map_pads_and_finds_start():
    grid, start = parse_map(SIMPLE)
    rows = SIMPLE.split()
    assert grid.size_x() == len(rows[0]) + 2
    assert grid.size_y() == len(rows) + 2
    assert grid[start] == "S"
    assert all(grid[x, 0] == "." for x in range(grid.size_x()))


def test_parse_map_without_start():
    with pytest.raises(ValueError):
        parse_map("...\n.F.\n...")


def test_parse_map_empty():
    with pytest.raises(ValueError):
        parse_map("")


def test_part1_simple_loop():
    assert part1(SIMPLE) == 4


def test_noise_does_not_change_results():
    assert part1(NOISY) == part1(SIMPLE)
    assert part2(NOISY) == part2(SIMPLE)


def test_trace_loop_invariants():
    grid, start = parse_map(SIMPLE)
    steps, border = trace_loop(grid, start)
    assert border[-1] == start
    assert len(border) == 2 * steps
    assert len(set(border)) == len(border)


def test_detect_start_shape():
    grid, start = parse_map(SIMPLE)
    _, border = trace_loop(grid, start)
    assert detect_start_shape(grid, border) == "F"


def test_detect_start_shape_needs_loop():
    grid, start = parse_map(SIMPLE)
    with pytest.raises(ValueError):
        detect_start_shape(grid, [start])


def test_part2_simple_loop():
    assert part2(SIMPLE) == 1


def test_part2_enclosed_example():
    assert part2(ENCLOSED) == 4


def test_count_enclosed_leaves_grid_untouched():
    grid, start = parse_map(NOISY)
    before = grid.data()
    _, border = trace_loop(grid, start)
    count_enclosed(grid, border)
    assert grid.data() == before


def test_trace_loop_without_loop():
    grid, start = parse_map(".....\n.S-..\n.....\n")
    with pytest.raises(ValueError):
        trace_loop(grid, start)