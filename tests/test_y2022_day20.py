import pytest

from aocsolver.y2022.day20 import grove_coordinates, mix, part1, part2

EXAMPLE = "1\n2\n-3\n3\n-2\n0\n4\n"
NUMBERS = [1, 2, -3, 3, -2, 0, 4]


def test_mix_is_permutation():
    assert sorted(mix(NUMBERS)) == sorted(NUMBERS)
    assert sorted(mix(NUMBERS, rounds=3)) == sorted(NUMBERS)


def test_mix_does_not_modify_input():
    numbers = list(NUMBERS)
    mix(numbers)
    assert numbers == NUMBERS


def test_mix_single_element():
    assert mix([0]) == [0]


def test_all_zero_stays_put():
    assert mix([0, 0, 0]) == [0, 0, 0]


def test_grove_coordinates_rotation_invariant():
    mixed = mix(NUMBERS)
    rotated = mixed[3:] + mixed[:3]
    assert grove_coordinates(rotated) == grove_coordinates(mixed)


def test_grove_coordinates_requires_zero():
    with pytest.raises(ValueError):
        grove_coordinates([1, 2, 3])


def test_part1_matches_coordinates():
    assert part1(EXAMPLE) == sum(grove_coordinates(mix(NUMBERS)))


def test_part1_example():
    assert part1(EXAMPLE) == 3


def test_part2_example():
    assert part2(EXAMPLE) == 1623178306