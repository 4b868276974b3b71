"""Count increases in sonar depth measurements."""


def _depths(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def part1(text: str) -> int:
    """Number of measurements larger than the previous one."""
    depths = _depths(text)
    return sum(later > earlier for earlier, later in zip(depths, depths[1:]))


def part2(text: str) -> int:
    """Number of increases between sliding sums of three measurements."""
    depths = _depths(text)
    return sum(later > earlier for earlier, later in zip(depths, depths[3:]))