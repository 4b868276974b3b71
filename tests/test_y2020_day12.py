from aocsolver.y2020.day12 import part1, part2

EXAMPLE = "F10\nN3\nF7\nR90\nF11\n"


def test_part1_example():
    assert part1(EXAMPLE) == 25


def test_part2_example():
    assert part2(EXAMPLE) == 286


def test_part1_full_turn_keeps_heading():
    assert part1("R360\nF10\n") == part1("F10\n")


def test_part1_left_equals_opposite_right():
    assert part1("L90\nF5\nN2\n") == part1("R270\nF5\nN2\n")


def test_part1_direct_moves():
    assert part1("E4\nN3\n") == 4 + 3


def test_part2_turns_cancel():
    assert part2("R90\nL90\nF3\n") == part2("F3\n")


def test_part2_half_turn_keeps_distance():
    assert part2("R180\nF2\n") == part2("F2\n")


def test_part2_left_equals_opposite_right():
    assert part2("L90\nF4\n") == part2("R270\nF4\n")