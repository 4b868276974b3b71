"""Pulse propagation through flip-flop and conjunction modules."""

from __future__ import annotations

import itertools
import math
from collections import deque
from collections.abc import Iterable, Iterator
from enum import Enum

BUTTON_PRESSES = 1000
DEFAULT_WATCHED = ("xj", "qs", "kz", "km")
_BROADCASTER = "broadcaster"


class Pulse(Enum):
    HIGH = "high"
    LOW = "low"


PulseResult = tuple[list["Module | None"], Pulse]


class Module:
    """A module that forwards a low pulse to every destination."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.destination_names: list[str] = []
        self.destinations: list[Module | None] = []

    def register_destination(self, name: str) -> None:
        self.destination_names.append(name)

    def activate_destinations(self, modules: dict[str, Module]) -> None:
        """Resolve destination names; unknown names become None."""
        for name in self.destination_names:
            destination = modules.get(name)
            self.destinations.append(destination)
            if destination is not None:
                destination.register_input_source(self.name)

    def reset(self) -> None:
        """Return to the initial state."""

    def register_pulse(self, source: str, pulse: Pulse) -> None:
        """Note a pulse arriving from ``source``."""

    def register_input_source(self, source: str) -> None:
        """Note that ``source`` sends pulses here."""

    def generate_pulse(self) -> PulseResult:
        """Send this module's pulse; return the destinations and the pulse."""
        return self._send(Pulse.LOW)

    def _send(self, pulse: Pulse) -> PulseResult:
        for destination in self.destinations:
            if destination is not None:
                destination.register_pulse(self.name, pulse)
        return list(self.destinations), pulse


class FlipFlop(Module):
    """Toggles on every low pulse and sends high when on, low when off."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._on = False
        self._pending_lows = 0

    def reset(self) -> None:
        self._on = False
        self._pending_lows = 0

    def register_pulse(self, source: str, pulse: Pulse) -> None:
        if pulse is Pulse.LOW:
            self._pending_lows += 1

    def generate_pulse(self) -> PulseResult:
        result: PulseResult = ([], Pulse.HIGH)
        for _ in range(self._pending_lows):
            self._on = not self._on
            result = self._send(Pulse.HIGH if self._on else Pulse.LOW)
        self._pending_lows = 0
        return result


class Conjunction(Module):
    """Sends low when the last pulse from every input was high, else high."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._memory: dict[str, Pulse] = {}

    def reset(self) -> None:
        for source in self._memory:
            self._memory[source] = Pulse.LOW

    def register_pulse(self, source: str, pulse: Pulse) -> None:
        self._memory[source] = pulse

    def register_input_source(self, source: str) -> None:
        self._memory[source] = Pulse.LOW

    def generate_pulse(self) -> PulseResult:
        all_high = all(pulse is Pulse.HIGH for pulse in self._memory.values())
        return self._send(Pulse.LOW if all_high else Pulse.HIGH)


def _create_module(kind: str, name: str) -> Module:
    if kind == "%":
        return FlipFlop(name)
    if kind == "&":
        return Conjunction(name)
    return Module(name)


def parse_modules(text: str) -> dict[str, Module]:
    """Modules by name, with their destination names registered."""
    modules: dict[str, Module] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        header, separator, targets = line.partition(" -> ")
        if not separator:
            raise ValueError(f"module line has no destinations: {line!r}")
        name = header if header[0] == "b" else header[1:]
        module = _create_module(header[0], name)
        for target in targets.split(", "):
            module.register_destination(target)
        modules[module.name] = module
    return modules


def activate_modules(modules: dict[str, Module]) -> None:
    for module in modules.values():
        module.activate_destinations(modules)


def reset_all_modules(modules: Iterable[Module] | dict[str, Module]) -> None:
    values = modules.values() if isinstance(modules, dict) else modules
    for module in values:
        module.reset()


def _push_button(modules: dict[str, Module]) -> Iterator[tuple[Module, PulseResult]]:
    queue: deque[Module | None] = deque([modules.get(_BROADCASTER)])
    while queue:
        module = queue.popleft()
        if module is None:
            continue
        destinations, pulse = module.generate_pulse()
        queue.extend(destinations)
        yield module, (destinations, pulse)


def clicks_until_high(modules: dict[str, Module], name: str) -> int:
    """Button presses until the named module first sends a high pulse."""
    for required in (_BROADCASTER, name):
        if required not in modules:
            raise KeyError(required)
    for presses in itertools.count(1):
        for module, (_, pulse) in _push_button(modules):
            if module.name == name and pulse is Pulse.HIGH:
                return presses
    raise AssertionError("unreachable")


def part1(text: str) -> int:
    """Low pulses times high pulses sent over a thousand button presses."""
    modules = parse_modules(text)
    activate_modules(modules)
    low = high = 0
    for _ in range(BUTTON_PRESSES):
        low += 1
        for _, (destinations, pulse) in _push_button(modules):
            if pulse is Pulse.LOW:
                low += len(destinations)
            else:
                high += len(destinations)
    return low * high


def part2(text: str, names: Iterable[str] = DEFAULT_WATCHED) -> int:
    """Least common multiple of the presses each watched module needs to send high."""
    modules = parse_modules(text)
    activate_modules(modules)
    counts = []
    for position, name in enumerate(names):
        if position:
            reset_all_modules(modules)
        counts.append(clicks_until_high(modules, name))
    if not counts:
        raise ValueError("no modules to watch")
    return math.lcm(*counts)