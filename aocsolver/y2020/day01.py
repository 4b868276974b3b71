"""Find expense entries that sum to 2020."""

TARGET = 2020


def _numbers(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def part1(text: str) -> int:
    """Product of two entries that sum to the target."""
    numbers = dict.fromkeys(_numbers(text))
    for number in numbers:
        if TARGET - number in numbers:
            return number * (TARGET - number)
    raise ValueError("no two entries sum to the target")


def part2(text: str) -> int:
    """Product of three entries that sum to the target."""
    numbers = sorted(set(_numbers(text)))
    present = set(numbers)
    for position, first in enumerate(numbers[:len(numbers) // 2]):
        remaining = TARGET - first
        for second in numbers[position + 1:]:
            if remaining - second in present:
                return first * second * (remaining - second)
    raise ValueError("no three entries sum to the target")