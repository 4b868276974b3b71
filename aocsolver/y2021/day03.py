"""Binary diagnostic report: power consumption and life support rating."""

from collections.abc import Iterable


def _lines(text: str) -> list[str]:
    lines = text.split()
    if not lines:
        raise ValueError("empty report")
    return lines


def common_bit_number_search(numbers: Iterable[int], most_common: bool, bits: int) -> int:
    """Filter numbers bit by bit, from the top, keeping the most or least common bit."""
    candidates = list(numbers)
    place = 0
    while len(candidates) > 1 and len(set(candidates)) > 1:
        shift = bits - place - 1
        ones = sum((number >> shift) & 1 for number in candidates)
        most_common_bit = ones >= (len(candidates) + 1) // 2
        wanted = int(most_common_bit == most_common)
        candidates = [number for number in candidates if (number >> shift) & 1 == wanted]
        place = (place + 1) % bits
    if not candidates:
        raise ValueError("no number is left after filtering")
    return candidates[0]


def part1(text: str) -> int:
    """Gamma rate times epsilon rate."""
    lines = _lines(text)
    bits = max(len(line) for line in lines)
    half = len(lines) // 2
    gamma_bits = "".join(
        "1" if sum(char == "1" for char in column) > half else "0"
        for column in zip(*lines)
    )
    gamma = int(gamma_bits, 2)
    epsilon = gamma ^ ((1 << bits) - 1)
    return gamma * epsilon


def part2(text: str) -> int:
    """Oxygen generator rating times CO2 scrubber rating."""
    lines = _lines(text)
    bits = max(len(line) for line in lines)
    numbers = [int(line, 2) for line in lines]
    oxygen = common_bit_number_search(numbers, True, bits)
    scrubber = common_bit_number_search(numbers, False, bits)
    return oxygen * scrubber