# aocsolver

Solutions to a selection of Advent of Code puzzles (2020 to 2024). Each puzzle
day is a module, `aocsolver.y<year>.day<NN>`, whose `part1(text)` and, where
present, `part2(text)` take the raw puzzle input as a string and return the
answer.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Command line

    aocsolver YEAR DAY PART [INPUT] [--example]

`PART` is 1 or 2. `INPUT` is the path of the puzzle input. Without it the
input is read from `input_files/real_run_<YEAR>_<DAY>.txt`, or from
`input_files/test_run_<YEAR>_<DAY>.txt` when `--example` is given.

The command prints the answer, then a line such as

    Computation time: 0 hours, 0 minutes, 0 seconds, 12 milliseconds, 345 microseconds, 678 nanoseconds

If the input file cannot be opened it prints `Can't open file: <path>` and
exits with status 1; an unknown day or part, or input the solver rejects,
prints the error and also exits with status 1.

## Library use

    from aocsolver.y2021 import day01

    with open("input.txt", encoding="utf-8") as handle:
        text = handle.read()

    print(day01.part1(text))
    print(day01.part2(text))

The same dispatch the command uses is available as a function:

    from aocsolver.cli import solve

    answer = solve(2024, 2, 1, text)

`solve` raises `ValueError` for a year, day or part it has no solution for.

## Available days

| Year | Days and parts |
|------|----------------|
| 2020 | 1, 4, 12, 16, 21 (both parts) |
| 2021 | 1, 3, 9, 10, 14, 17 (both parts); 5, 6, 20 (part 1 only) |
| 2022 | 20 (both parts) |
| 2023 | 6, 7, 10, 16, 20 (both parts); 24 (part 1 only) |
| 2024 | 2, 4, 6, 10, 14 (both parts) |

Some functions take parameters for the puzzle variant:

- `y2021.day06.part1(text, days=256)`: number of simulated days (the command
  uses 256).
- `y2021.day20.part1(text, steps=50)`: number of enhancement steps.
- `y2020.day16.part1/part2(text, fields_count=20)`: fields per ticket.
- `y2023.day24.part1(text, low, high)`: bounds of the test area.
- `y2024.day14.part1(text, width=101, height=103)`: size of the robots' area.
- `y2023.day20.part2(text, names=("xj", "qs", "kz", "km"))`: the modules whose
  first high pulses are combined by least common multiple.

For 2024 day 14, part 2 on the command line prints pictures of the robots,
each headed by its second count (starting at 153 and stepping by 103 past
10 000), for the reader to look for the picture by eye;
`y2024.day14.tree_frames(text)` yields the same `(seconds, picture)` pairs.

## Helpers

- `aocsolver.grid.Grid`: a row-major grid indexed by `(x, y)`, with row
  insertion, padding rows, a border test, cell iteration and rendering.
  Indexing outside the grid raises `IndexError`.
- `aocsolver.triplets`: `triplet_hash`, `next_triplet` and `all_triplets` for
  the three-letter names `AAA` to `ZZZ`.
- `aocsolver.timing.format_elapsed(start_ns, stop_ns)`: breakdown of an
  elapsed time into hours down to nanoseconds.

## What it does not do

- It does not fetch puzzle inputs; they must be saved to files first.
- Part 2 of 2021 days 5, 6 and 20 and of 2023 day 24 is not solved; asking
  for it reports that there is no such part.
- The default watched module names for 2023 day 20 part 2 fit one particular
  input; other inputs need their own names passed to `part2`.