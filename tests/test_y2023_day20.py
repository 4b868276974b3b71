import math

import pytest

from aocsolver.y2023.day20 import (
    Conjunction,
    FlipFlop,
    Module,
    Pulse,
    activate_modules,
    clicks_until_high,
    parse_modules,
    part1,
    part2,
    reset_all_modules,
)

EXAMPLE = (
    "broadcaster -> a, b, c\n"
    "%a -> b\n"
    "%b -> c\n"
    "%c -> inv\n"
    "&inv -> a\n"
)


def _activated(text):
    modules = parse_modules(text)
    activate_modules(modules)
    return modules


def test_parse_modules_names_and_kinds():
    modules = parse_modules(EXAMPLE)
    assert sorted(modules) == ["a", "b", "broadcaster", "c", "inv"]
    assert isinstance(modules["a"], FlipFlop)
    assert isinstance(modules["inv"], Conjunction)
    assert modules["broadcaster"].destination_names == ["a", "b", "c"]


def test_parse_modules_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_modules("%a b")


def test_unknown_destination_is_none():
    modules = _activated("broadcaster -> a\n%a -> output\n")
    assert modules["a"].destinations == [None]


def test_broadcaster_sends_low():
    module = Module("broadcaster")
    module.register_destination("x")
    module.activate_destinations({})
    assert module.generate_pulse() == ([None], Pulse.LOW)


def test_flip_flop_ignores_high():
    flip_flop = FlipFlop("a")
    flip_flop.register_pulse("x", Pulse.HIGH)
    destinations, _ = flip_flop.generate_pulse()
    assert destinations == []


def test_flip_flop_toggles():
    flip_flop = FlipFlop("a")
    flip_flop.register_destination("out")
    flip_flop.activate_destinations({"a": flip_flop})
    flip_flop.register_pulse("x", Pulse.LOW)
    assert flip_flop.generate_pulse() == ([None], Pulse.HIGH)
    flip_flop.register_pulse("x", Pulse.LOW)
    assert flip_flop.generate_pulse() == ([None], Pulse.LOW)


def test_conjunction_remembers_inputs():
    conjunction = Conjunction("c")
    conjunction.register_input_source("x")
    conjunction.register_input_source("y")
    assert conjunction.generate_pulse()[1] is Pulse.HIGH
    conjunction.register_pulse("x", Pulse.HIGH)
    assert conjunction.generate_pulse()[1] is Pulse.HIGH
    conjunction.register_pulse("y", Pulse.HIGH)
    assert conjunction.generate_pulse()[1] is Pulse.LOW
    conjunction.reset()
    assert conjunction.generate_pulse()[1] is Pulse.HIGH


def test_activation_registers_conjunction_inputs():
    modules = _activated(EXAMPLE)
    assert modules["inv"].generate_pulse()[1] is Pulse.HIGH
    modules["inv"].register_pulse("c", Pulse.HIGH)
    assert modules["inv"].generate_pulse()[1] is Pulse.LOW


def test_reset_all_modules_restores_state():
    modules = _activated(EXAMPLE)
    first = clicks_until_high(modules, "inv")
    reset_all_modules(modules)
    assert clicks_until_high(modules, "inv") == first


def test_part1_example():
    assert part1(EXAMPLE) == 32000000


def test_clicks_until_high_unknown_module():
    with pytest.raises(KeyError):
        clicks_until_high(_activated(EXAMPLE), "zz")


def test_part2_is_lcm_of_individual_counts():
    counts = [clicks_until_high(_activated(EXAMPLE), name) for name in ("a", "inv")]
    assert part2(EXAMPLE, ["a", "inv"]) == math.lcm(*counts)


def test_part2_needs_names():
    with pytest.raises(ValueError):
        part2(EXAMPLE, [])