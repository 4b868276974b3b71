"""Human-readable formatting of elapsed time."""

_UNITS = (
    ("hours", 3_600_000_000_000),
    ("minutes", 60_000_000_000),
    ("seconds", 1_000_000_000),
    ("milliseconds", 1_000_000),
    ("microseconds", 1_000),
    ("nanoseconds", 1),
)


def format_elapsed(start_ns: int, stop_ns: int) -> str:
    """Break the span between two nanosecond timestamps into units."""
    elapsed = stop_ns - start_ns
    sign = -1 if elapsed < 0 else 1
    remaining = abs(elapsed)
    parts = []
    for name, size in _UNITS:
        count, remaining = divmod(remaining, size)
        parts.append(f"{sign * count} {name}")
    return ", ".join(parts)