import pytest

from aocsolver.y2023.day24 import Hailstone, collide, parse_hailstones, part1

EXAMPLE = """19, 13, 30 @ -2,  1, -2
18, 19, 22 @ -1, -1, -2
20, 25, 34 @ -2, -2, -4
12, 31, 28 @ -1, -2, -1
20, 19, 15 @  1, -5, -3
"""


@pytest.fixture
def stones():
    return parse_hailstones(EXAMPLE)


def test_parse_reads_position_and_velocity(stones):
    assert len(stones) == 5
    assert stones[0] == Hailstone((19, 13, 30), (-2, 1, -2))
    assert stones[4].velocity == (1, -5, -3)


def test_part1_example():
    assert part1(EXAMPLE, 7, 27) == 2


def test_crossing_inside_area(stones):
    assert collide(stones[0], stones[1], 7, 27) is True


def test_parallel_paths_never_cross(stones):
    assert collide(stones[1], stones[2], 7, 27) is False


def test_crossing_in_the_past_does_not_count(stones):
    assert collide(stones[0], stones[4], 7, 27) is False


def test_crossing_outside_area_does_not_count(stones):
    assert collide(stones[0], stones[3], 7, 27) is False


def test_collide_is_symmetric(stones):
    for a in stones:
        for b in stones:
            if a is not b:
                assert collide(a, b, 7, 27) == collide(b, a, 7, 27)


def test_missing_velocity_is_rejected():
    with pytest.raises(ValueError):
        parse_hailstones("1, 2, 3\n")