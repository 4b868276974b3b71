"""Ticket field translation: validate nearby tickets and identify fields."""

from __future__ import annotations

import math
import re
from enum import Enum, auto

_NUMBER = re.compile(r"\d+")


class TicketRules:
    """Named rules, each a set of inclusive number ranges."""

    def __init__(self) -> None:
        self._rules: dict[str, list[tuple[int, int]]] = {}

    def parse_rule(self, rule: str) -> None:
        """Add a rule written as ``name: a-b or c-d``."""
        name, separator, spec = rule.partition(":")
        if not separator:
            raise ValueError(f"rule has no name separator: {rule!r}")
        numbers = [int(value) for value in _NUMBER.findall(spec)]
        if not numbers or len(numbers) % 2:
            raise ValueError(f"rule has no complete ranges: {rule!r}")
        ranges = self._rules.setdefault(name, [])
        ranges.extend(zip(numbers[::2], numbers[1::2]))

    @staticmethod
    def _matches(ranges: list[tuple[int, int]], number: int) -> bool:
        return any(low <= number <= high for low, high in ranges)

    def find_matched_rule(self, number: int) -> str | None:
        """Name of the first rule the number satisfies, or None."""
        for name, ranges in self._rules.items():
            if self._matches(ranges, number):
                return name
        return None

    def find_matched_rules(self, number: int) -> set[str]:
        """Names of every rule the number satisfies."""
        return {name for name, ranges in self._rules.items() if self._matches(ranges, number)}

    def describe(self) -> str:
        """All rules, one per line, in the form they were given."""
        return "".join(
            f"{name}: " + " or ".join(f"{low}-{high}" for low, high in ranges) + "\n"
            for name, ranges in self._rules.items()
        )


class Tickets:
    """The own ticket followed by nearby tickets, plus the rules they obey."""

    def __init__(self, fields_count: int = 20) -> None:
        self.fields_count = fields_count
        self.rules = TicketRules()
        self.tickets: list[tuple[int, ...]] = []
        self.field_names: list[set[str]] = [set() for _ in range(fields_count)]

    def add_rule(self, rule: str) -> None:
        self.rules.parse_rule(rule)

    def insert_ticket(self, line: str) -> None:
        """Add a ticket given as comma-separated numbers."""
        numbers = tuple(int(value) for value in _NUMBER.findall(line))
        if len(numbers) != self.fields_count:
            raise ValueError(
                f"ticket has {len(numbers)} fields, expected {self.fields_count}: {line!r}"
            )
        self.tickets.append(numbers)

    def fix_ticket_scanning_error_rate(self) -> int:
        """Drop invalid tickets and return the sum of their first invalid values."""
        error_rate = 0
        valid = []
        for ticket in self.tickets:
            invalid = next(
                (number for number in ticket if self.rules.find_matched_rule(number) is None),
                None,
            )
            if invalid is None:
                valid.append(ticket)
            else:
                error_rate += invalid
        self.tickets = valid
        return error_rate

    def field_names_analysis(self) -> None:
        """Narrow down which rule each ticket position belongs to."""
        for ticket in self.tickets:
            for position, number in enumerate(ticket):
                matched = self.rules.find_matched_rules(number)
                if not self.field_names[position]:
                    self.field_names[position] = matched
                    continue
                self.field_names[position] &= matched
                if len(self.field_names[position]) == 1:
                    self._remove_known_field_names(next(iter(self.field_names[position])))

    def _remove_known_field_names(self, known_name: str) -> None:
        known = [known_name]
        position = 0
        while position < len(self.field_names):
            names = self.field_names[position]
            if len(names) != 1:
                names.difference_update(known)
                if len(names) == 1:
                    known.append(next(iter(names)))
                    position = 0
                    continue
            position += 1

    def departure_fields_from_self_ticket(self) -> list[int]:
        """Values of the own ticket in fields whose name contains 'departure'."""
        if not self.tickets:
            raise ValueError("there is no own ticket")
        own = self.tickets[0]
        return [
            own[position]
            for position, names in enumerate(self.field_names)
            if names and "departure" in min(names)
        ]


class _Section(Enum):
    RULES = auto()
    SELF_TICKET = auto()
    NEARBY_TICKETS = auto()


def parse_input(text: str, fields_count: int = 20) -> Tickets:
    """Read rules, the own ticket and nearby tickets."""
    tickets = Tickets(fields_count)
    section = _Section.RULES
    for line in text.splitlines():
        line = line.rstrip("\r")
        if section is _Section.RULES:
            if not line:
                section = _Section.SELF_TICKET
            else:
                tickets.add_rule(line)
        elif section is _Section.SELF_TICKET:
            if not line:
                section = _Section.NEARBY_TICKETS
            elif ":" not in line:
                tickets.insert_ticket(line)
        elif line and ":" not in line:
            tickets.insert_ticket(line)
    return tickets


def part1(text: str, fields_count: int = 20) -> int:
    """Ticket scanning error rate."""
    return parse_input(text, fields_count).fix_ticket_scanning_error_rate()


def part2(text: str, fields_count: int = 20) -> int:
    """Product of the own ticket's departure fields."""
    tickets = parse_input(text, fields_count)
    tickets.fix_ticket_scanning_error_rate()
    tickets.field_names_analysis()
    return math.prod(tickets.departure_fields_from_self_ticket())