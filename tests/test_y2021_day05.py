from aocsolver.y2021.day05 import part1

EXAMPLE = """0,9 -> 5,9
8,0 -> 0,8
9,4 -> 3,4
2,2 -> 2,1
7,0 -> 7,4
6,4 -> 2,0
0,9 -> 2,9
3,4 -> 1,4
0,0 -> 8,8
5,5 -> 8,2
"""


def test_example():
    assert part1(EXAMPLE) == 5


def test_identical_lines_overlap_everywhere():
    length = 4
    line = f"0,0 -> 0,{length}"
    assert part1(f"{line}\n{line}\n") == length + 1


def test_reversed_line_is_the_same():
    assert part1("0,4 -> 0,0\n0,0 -> 0,4\n") == part1("0,0 -> 0,4\n0,0 -> 0,4\n")


def test_diagonals_are_ignored():
    assert part1("0,0 -> 3,3\n0,0 -> 3,3\n") == 0