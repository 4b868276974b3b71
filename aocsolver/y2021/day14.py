"""Extended polymerization by pair insertion."""

from __future__ import annotations

from collections import Counter


def parse_input(text: str) -> tuple[str, dict[str, str]]:
    """The polymer template and the pair insertion rules."""
    template = ""
    rules: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        pair, separator, inserted = line.partition("->")
        if not separator:
            template = line
            continue
        pair, inserted = pair.strip(), inserted.strip()
        if len(pair) != 2 or not inserted:
            raise ValueError(f"malformed insertion rule: {line!r}")
        rules[pair] = inserted[0]
    return template, rules


def perform_modification(rules: dict[str, str], polymer: str) -> str:
    """Insert the rule's element between every adjacent pair."""
    if not polymer:
        return polymer
    parts = [polymer[0]]
    for first, second in zip(polymer, polymer[1:]):
        parts.append(rules[first + second])
        parts.append(second)
    return "".join(parts)


def existing_pairs(polymer: str) -> Counter[str]:
    """How often each adjacent pair occurs."""
    return Counter(first + second for first, second in zip(polymer, polymer[1:]))


def perform_counting(rules: dict[str, str], pairs: Counter[str]) -> Counter[str]:
    """One insertion step applied to pair counts."""
    result: Counter[str] = Counter()
    for pair, count in pairs.items():
        inserted = rules[pair]
        result[pair[0] + inserted] += count
        result[inserted + pair[1]] += count
    return result


def part1(text: str) -> int:
    """Most common minus least common element after 10 steps."""
    polymer, rules = parse_input(text)
    if not polymer:
        raise ValueError("no polymer template")
    for _ in range(10):
        polymer = perform_modification(rules, polymer)
    counts = Counter(polymer).values()
    return max(counts) - min(counts)


def part2(text: str) -> int:
    """Most common minus least common element after 40 steps."""
    polymer, rules = parse_input(text)
    pairs = existing_pairs(polymer)
    if not pairs:
        raise ValueError("the polymer template needs at least two elements")
    for _ in range(40):
        pairs = perform_counting(rules, pairs)
    letters: Counter[str] = Counter()
    for pair, count in pairs.items():
        letters[pair[0]] += count
        letters[pair[1]] += count
    halves = [(count + 1) // 2 for count in letters.values()]
    return max(halves) - min(halves)