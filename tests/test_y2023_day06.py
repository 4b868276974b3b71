import pytest

from aocsolver.y2023.day06 import count_ways, part1, part2

EXAMPLE = """Time:      7  15   30
Distance:  9  40  200
"""


def test_part1_example():
    assert part1(EXAMPLE) == 288


def test_part2_example():
    assert part2(EXAMPLE) == 71503


def test_part1_is_product_of_races():
    assert part1(EXAMPLE) == count_ways(7, 9) * count_ways(15, 40) * count_ways(30, 200)


def test_every_hold_beats_negative_record():
    for time in (0, 1, 7, 30):
        assert count_ways(time, -1) == time + 1


def test_unbeatable_record():
    assert count_ways(10, 10**6) == 0


def test_count_shrinks_as_record_grows():
    previous = count_ways(30, -1)
    for distance in range(0, 240, 7):
        current = count_ways(30, distance)
        assert current <= previous
        previous = current


def test_mismatched_lines_raise():
    with pytest.raises(ValueError):
        part1("Time: 7 15\nDistance: 9\n")


def test_missing_line_raises():
    with pytest.raises(ValueError):
        part1("Time: 7 15\n")