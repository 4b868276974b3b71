import pytest

from aocsolver.y2024.day02 import is_safe, part1, part2

EXAMPLE = """\
7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_example_part1():
    assert part1(EXAMPLE) == 2


def test_example_part2():
    assert part2(EXAMPLE) == 4


@pytest.mark.parametrize("levels", [[7, 6, 4, 2, 1], [1, 3, 6, 7, 9]])
def test_safe_reports(levels):
    assert is_safe(levels)


@pytest.mark.parametrize(
    "levels", [[1, 2, 7, 8, 9], [9, 7, 6, 2, 1], [1, 3, 2, 4, 5], [8, 6, 4, 4, 1]]
)
def test_unsafe_reports(levels):
    assert not is_safe(levels)


def test_ignoring_past_the_end_is_ignoring_nothing():
    for line in EXAMPLE.splitlines():
        levels = [int(value) for value in line.split()]
        assert is_safe(levels, len(levels)) == is_safe(levels)


def test_removing_a_bad_level_makes_report_safe():
    assert is_safe([1, 3, 2, 4, 5], 1)
    assert is_safe([8, 6, 4, 4, 1], 2)
    assert not is_safe([1, 2, 7, 8, 9], 0)


def test_reversed_report_has_same_safety():
    for line in EXAMPLE.splitlines():
        levels = [int(value) for value in line.split()]
        assert is_safe(levels[::-1]) == is_safe(levels)


def test_part2_never_below_part1():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


def test_too_few_levels_raise():
    with pytest.raises(ValueError):
        is_safe([1, 2])