"""Grove positioning system: mixing an encrypted number list."""

from __future__ import annotations

from collections.abc import Iterable

DECRYPTION_KEY = 811589153
_OFFSETS = (1000, 2000, 3000)


def _read(text: str, key: int = 1) -> list[int]:
    return [int(token) * key for token in text.split()]


def mix(numbers: Iterable[int], rounds: int = 1) -> list[int]:
    """Move every number, in original order, by its value around the circle."""
    values = list(numbers)
    if len(values) < 2:
        return values
    order = list(range(len(values)))
    modulus = len(values) - 1
    for _ in range(rounds):
        for original, value in enumerate(values):
            if value == 0:
                continue
            position = order.index(original)
            order.pop(position)
            order.insert((position + value) % modulus, original)
    return [values[index] for index in order]


def grove_coordinates(numbers: list[int]) -> tuple[int, ...]:
    """Values 1000, 2000 and 3000 places after the zero."""
    if 0 not in numbers:
        raise ValueError("the list holds no zero")
    zero = numbers.index(0)
    return tuple(numbers[(zero + offset) % len(numbers)] for offset in _OFFSETS)


def part1(text: str) -> int:
    return sum(grove_coordinates(mix(_read(text))))


def part2(text: str) -> int:
    return sum(grove_coordinates(mix(_read(text, DECRYPTION_KEY), rounds=10)))