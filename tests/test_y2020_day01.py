import pytest

from aocsolver.y2020.day01 import part1, part2

EXAMPLE = "1721\n979\n366\n299\n675\n1456\n"


def test_part1_example():
    assert part1(EXAMPLE) == 514579


def test_part2_example():
    assert part2(EXAMPLE) == 241861950


def test_part1_simple_pair():
    assert part1("5\n1000\n1020\n") == 1000 * 1020


def test_part1_allows_same_entry_twice():
    assert part1("1010\n") == 1010 * 1010


def test_part1_without_pair_raises():
    with pytest.raises(ValueError):
        part1("1\n2\n3\n")


def test_part2_without_triple_raises():
    with pytest.raises(ValueError):
        part2("1\n2\n3\n4\n")