"""Command line entry point: solve one puzzle part from an input file."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Sequence

from aocsolver.timing import format_elapsed
from aocsolver.y2020 import day01 as y2020_day01
from aocsolver.y2020 import day04 as y2020_day04
from aocsolver.y2020 import day12 as y2020_day12
from aocsolver.y2020 import day16 as y2020_day16
from aocsolver.y2020 import day21 as y2020_day21
from aocsolver.y2021 import day01 as y2021_day01
from aocsolver.y2021 import day03 as y2021_day03
from aocsolver.y2021 import day05 as y2021_day05
from aocsolver.y2021 import day06 as y2021_day06
from aocsolver.y2021 import day09 as y2021_day09
from aocsolver.y2021 import day10 as y2021_day10
from aocsolver.y2021 import day14 as y2021_day14
from aocsolver.y2021 import day17 as y2021_day17
from aocsolver.y2021 import day20 as y2021_day20
from aocsolver.y2022 import day20 as y2022_day20
from aocsolver.y2023 import day06 as y2023_day06
from aocsolver.y2023 import day07 as y2023_day07
from aocsolver.y2023 import day10 as y2023_day10
from aocsolver.y2023 import day16 as y2023_day16
from aocsolver.y2023 import day20 as y2023_day20
from aocsolver.y2023 import day24 as y2023_day24
from aocsolver.y2024 import day02 as y2024_day02
from aocsolver.y2024 import day04 as y2024_day04
from aocsolver.y2024 import day06 as y2024_day06
from aocsolver.y2024 import day10 as y2024_day10
from aocsolver.y2024 import day14 as y2024_day14

Solver = Callable[[str], object]

LANTERNFISH_DAYS = 256
INPUT_DIRECTORY = "input_files"


def _lanternfish(text: str) -> int:
    return y2021_day06.part1(text, LANTERNFISH_DAYS)


def _tree_pictures(text: str) -> str:
    return "".join(
        f"{seconds}:\n{picture}" for seconds, picture in y2024_day14.tree_frames(text)
    )


_SOLVERS: dict[tuple[int, int], tuple[Solver, ...]] = {
    (2020, 1): (y2020_day01.part1, y2020_day01.part2),
    (2020, 4): (y2020_day04.part1, y2020_day04.part2),
    (2020, 12): (y2020_day12.part1, y2020_day12.part2),
    (2020, 16): (y2020_day16.part1, y2020_day16.part2),
    (2020, 21): (y2020_day21.part1, y2020_day21.part2),
    (2021, 1): (y2021_day01.part1, y2021_day01.part2),
    (2021, 3): (y2021_day03.part1, y2021_day03.part2),
    (2021, 5): (y2021_day05.part1,),
    (2021, 6): (_lanternfish,),
    (2021, 9): (y2021_day09.part1, y2021_day09.part2),
    (2021, 10): (y2021_day10.part1, y2021_day10.part2),
    (2021, 14): (y2021_day14.part1, y2021_day14.part2),
    (2021, 17): (y2021_day17.part1, y2021_day17.part2),
    (2021, 20): (y2021_day20.part1,),
    (2022, 20): (y2022_day20.part1, y2022_day20.part2),
    (2023, 6): (y2023_day06.part1, y2023_day06.part2),
    (2023, 7): (y2023_day07.part1, y2023_day07.part2),
    (2023, 10): (y2023_day10.part1, y2023_day10.part2),
    (2023, 16): (y2023_day16.part1, y2023_day16.part2),
    (2023, 20): (y2023_day20.part1, y2023_day20.part2),
    (2023, 24): (y2023_day24.part1,),
    (2024, 2): (y2024_day02.part1, y2024_day02.part2),
    (2024, 4): (y2024_day04.part1, y2024_day04.part2),
    (2024, 6): (y2024_day06.part1, y2024_day06.part2),
    (2024, 10): (y2024_day10.part1, y2024_day10.part2),
    (2024, 14): (y2024_day14.part1, _tree_pictures),
}


def solve(year: int, day: int, part: int, text: str) -> object:
    """Answer of the given puzzle part for the input ``text``."""
    solvers = _SOLVERS.get((year, day))
    if solvers is None:
        raise ValueError(f"no solution for {year} day {day}")
    if not 1 <= part <= len(solvers):
        raise ValueError(f"no part {part} for {year} day {day}")
    return solvers[part - 1](text)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aocsolver", description="Solve a puzzle part.")
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("input", nargs="?", help="input file; defaults to the input directory")
    parser.add_argument(
        "--example", action="store_true", help="read the example input instead of the real one"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    prefix = "test_run_" if args.example else "real_run_"
    path = args.input or f"{INPUT_DIRECTORY}/{prefix}{args.year}_{args.day}.txt"
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"Can't open file: {path}")
        return 1

    start = time.perf_counter_ns()
    try:
        answer = solve(args.year, args.day, args.part, text)
    except ValueError as error:
        print(error)
        return 1
    stop = time.perf_counter_ns()
    print(answer)
    print(f"Computation time: {format_elapsed(start, stop)}")
    return 0