"""Lanternfish population growth."""

from collections.abc import Iterable

_STATES = 9


def simulate(counts: Iterable[int], days: int) -> list[int]:
    """Advance a nine-bucket timer histogram by ``days`` days."""
    state = list(counts)
    if len(state) != _STATES:
        raise ValueError(f"expected {_STATES} timer buckets, got {len(state)}")
    for _ in range(days):
        state = state[1:] + state[:1]
        state[6] += state[8]
    return state


def part1(text: str, days: int = 256) -> int:
    """Number of fish after ``days`` days."""
    counts = [0] * _STATES
    for token in text.split(","):
        if not token.strip():
            continue
        timer = int(token)
        if not 0 <= timer < _STATES:
            raise ValueError(f"timer out of range: {timer}")
        counts[timer] += 1
    return sum(simulate(counts, days))