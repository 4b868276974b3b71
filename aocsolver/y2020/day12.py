"""Navigate a ship by compass instructions."""

from collections.abc import Iterator

_MOVES = {"E": (1, 0), "S": (0, -1), "W": (-1, 0), "N": (0, 1)}
_CLOCKWISE = ("E", "S", "W", "N")


def _instructions(text: str) -> Iterator[tuple[str, int]]:
    for line in text.splitlines():
        line = line.strip()
        if line:
            yield line[0], int(line[1:])


def _turn_clockwise(vector: tuple[int, int], turns: int) -> tuple[int, int]:
    east, north = vector
    for _ in range(turns % 4):
        east, north = north, -east
    return east, north


def part1(text: str) -> int:
    """Manhattan distance after moving the ship itself."""
    heading = 0
    east = north = 0
    for action, value in _instructions(text):
        if action == "R":
            heading = (heading + value // 90) % 4
            continue
        if action == "L":
            heading = (heading + (360 - value) // 90) % 4
            continue
        d_east, d_north = _MOVES.get(action, _MOVES[_CLOCKWISE[heading]])
        east += d_east * value
        north += d_north * value
    return abs(east) + abs(north)


def part2(text: str) -> int:
    """Manhattan distance after steering by a waypoint."""
    waypoint = (10, 1)
    east = north = 0
    for action, value in _instructions(text):
        if action == "R":
            waypoint = _turn_clockwise(waypoint, -((360 - value) // 90))
        elif action == "L":
            waypoint = _turn_clockwise(waypoint, -(value // 90))
        elif action in _MOVES:
            d_east, d_north = _MOVES[action]
            waypoint = (waypoint[0] + d_east * value, waypoint[1] + d_north * value)
        else:
            east += waypoint[0] * value
            north += waypoint[1] * value
    return abs(east) + abs(north)