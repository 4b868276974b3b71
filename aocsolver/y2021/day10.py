"""Syntax scoring of bracket chunks."""

from __future__ import annotations

from enum import Enum

_CLOSERS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_ERROR_SCORES = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_SCORES = {")": 1, "]": 2, "}": 3, ">": 4}


class Corruption(Enum):
    CORRECT = "correct"
    CORRUPTED = "corrupted"
    INCOMPLETE = "incomplete"


def examine_expression(expression: str) -> tuple[Corruption, str, str | None]:
    """Classify a line; return its kind, the still-open brackets and the illegal closer."""
    stack: list[str] = []
    for char in expression:
        if char in _CLOSERS:
            stack.append(char)
        elif stack and _CLOSERS[stack[-1]] == char:
            stack.pop()
        else:
            return Corruption.CORRUPTED, "".join(stack), char
    if stack:
        return Corruption.INCOMPLETE, "".join(stack), None
    return Corruption.CORRECT, "", None


def completion_score(open_brackets: str) -> int:
    """Score of the closers needed to finish the given open brackets."""
    score = 0
    for opener in reversed(open_brackets):
        score = score * 5 + _COMPLETION_SCORES[_CLOSERS[opener]]
    return score


def part1(text: str) -> int:
    """Total syntax error score of the corrupted lines."""
    total = 0
    for line in text.split():
        kind, _, illegal = examine_expression(line)
        if kind is Corruption.CORRUPTED:
            total += _ERROR_SCORES[illegal]
    return total


def part2(text: str) -> int:
    """Middle distinct completion score of the incomplete lines."""
    scores = set()
    for line in text.split():
        kind, remaining, _ = examine_expression(line)
        if kind is Corruption.INCOMPLETE:
            scores.add(completion_score(remaining))
    if not scores:
        raise ValueError("no incomplete lines")
    ordered = sorted(scores)
    return ordered[len(ordered) // 2]