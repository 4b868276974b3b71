import pytest

from aocsolver.y2021.day03 import common_bit_number_search, part1, part2

EXAMPLE = (
    "00100\n11110\n10110\n10111\n10101\n01111\n"
    "00111\n11100\n10000\n11001\n00010\n01010\n"
)


def test_part1_example():
    assert part1(EXAMPLE) == 198


def test_part2_example():
    assert part2(EXAMPLE) == 230


def test_part1_single_line():
    assert part1("101\n") == int("101", 2) * int("010", 2)


def test_part2_single_line():
    assert part2("10110\n") == int("10110", 2) ** 2


def test_search_single_number():
    assert common_bit_number_search([13], True, 5) == 13
    assert common_bit_number_search([13], False, 5) == 13


def test_search_result_is_an_input():
    numbers = [int(line, 2) for line in EXAMPLE.split()]
    assert common_bit_number_search(numbers, True, 5) in numbers
    assert common_bit_number_search(numbers, False, 5) in numbers


def test_search_empty_result_raises():
    with pytest.raises(ValueError):
        common_bit_number_search([0b11, 0b10], False, 2)


def test_empty_report_raises():
    with pytest.raises(ValueError):
        part1("")