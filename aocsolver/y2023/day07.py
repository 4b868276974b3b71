"""Camel Cards: rank poker-like hands and total their winnings."""

from __future__ import annotations

from collections import Counter

_FACES_PLAIN = {"T": 8, "J": 9, "Q": 10, "K": 11, "A": 12}
_FACES_JOKER = {"T": 9, "J": 0, "Q": 10, "K": 11, "A": 12}
_DIGITS = "23456789"
_HAND_SIZE = 5
# Strength reached by adding one joker to a hand of the given strength.
_JOKER_UPGRADE = (1, 3, 4, 5, 5, 6, 6)


def _card_rank(card: str, use_joker: bool) -> int:
    if card in _DIGITS:
        return int(card) - 2 + use_joker
    faces = _FACES_JOKER if use_joker else _FACES_PLAIN
    if card not in faces:
        raise ValueError(f"unknown card: {card!r}")
    return faces[card]


class Hand:
    """Five cards and a bid, ordered by hand type and then card by card."""

    def __init__(self, line: str, use_joker: bool = False) -> None:
        cards, _, bid = line.strip().partition(" ")
        if len(cards) != _HAND_SIZE:
            raise ValueError(f"a hand needs {_HAND_SIZE} cards: {line!r}")
        if not bid.strip().isdigit():
            raise ValueError(f"hand has no numeric bid: {line!r}")
        self.cards = cards
        self.bid = int(bid)
        self.use_joker = use_joker
        self._ranks = [_card_rank(card, use_joker) for card in cards]
        self.strength = self._analyze()

    def _analyze(self) -> int:
        counts: Counter[str] = Counter()
        strength = 0
        jokers = 0
        for card in self.cards:
            if self.use_joker and card == "J":
                jokers += 1
                continue
            counts[card] += 1
            amount = counts[card]
            if amount in (2, 5):
                strength += 1
            elif amount in (3, 4):
                strength += 2
        for _ in range(jokers):
            strength = _JOKER_UPGRADE[strength]
        return strength

    def card_value(self) -> int:
        """The card ranks read as base-100 digits, for tie breaking."""
        value = 0
        for rank in self._ranks:
            value = value * 100 + rank
        return value

    @property
    def key(self) -> tuple[int, int]:
        return self.strength, self.card_value()

    def __lt__(self, other: Hand) -> bool:
        return self.key < other.key

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, bid={self.bid}, joker={self.use_joker})"


def total_winnings(text: str, use_joker: bool = False) -> int:
    """Sum of bid times rank; of hands that rank equal only the first is kept."""
    unique: dict[tuple[int, int], Hand] = {}
    for line in text.splitlines():
        if line.strip():
            hand = Hand(line, use_joker)
            unique.setdefault(hand.key, hand)
    ordered = sorted(unique.values())
    return sum(rank * hand.bid for rank, hand in enumerate(ordered, start=1))


def part1(text: str) -> int:
    return total_winnings(text, use_joker=False)


def part2(text: str) -> int:
    return total_winnings(text, use_joker=True)