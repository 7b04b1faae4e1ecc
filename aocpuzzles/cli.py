"""Command line runner for the daily puzzles."""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from aocpuzzles.y2015 import (
    day01 as y15d01,
    day02 as y15d02,
    day03 as y15d03,
    day04 as y15d04,
    day05 as y15d05,
    day06 as y15d06,
    day07 as y15d07,
    day08 as y15d08,
    day09 as y15d09,
    day10 as y15d10,
    day11 as y15d11,
    day12 as y15d12,
    day13 as y15d13,
    day14 as y15d14,
    day15 as y15d15,
    day16 as y15d16,
    day17 as y15d17,
    day18 as y15d18,
    day19 as y15d19,
    day20 as y15d20,
    day21 as y15d21,
    day22 as y15d22,
    day23 as y15d23,
    day24 as y15d24,
    day25 as y15d25,
)
from aocpuzzles.y2016 import (
    day01 as y16d01,
    day02 as y16d02,
    day03 as y16d03,
    day04 as y16d04,
    day05 as y16d05,
    day06 as y16d06,
    day07 as y16d07,
    day08 as y16d08,
)

_YEARS = {
    2015: (
        y15d01, y15d02, y15d03, y15d04, y15d05, y15d06, y15d07, y15d08, y15d09,
        y15d10, y15d11, y15d12, y15d13, y15d14, y15d15, y15d16, y15d17, y15d18,
        y15d19, y15d20, y15d21, y15d22, y15d23, y15d24, y15d25,
    ),
    2016: (y16d01, y16d02, y16d03, y16d04, y16d05, y16d06, y16d07, y16d08),
}

_SOLVERS = {
    (year, day): module.Solver
    for year, modules in _YEARS.items()
    for day, module in enumerate(modules, start=1)
}

_USAGE = "Usage: aocpuzzles year [day]"


def solver_for(year: int, day: int):
    """Return the Solver class for a puzzle, or None if there is none."""
    return _SOLVERS.get((year, day))


def format_result(label: str, result: str, elapsed: float) -> str:
    """Format one answer line; extra lines of a multi-line answer are indented."""
    lines = result.splitlines() if "\n" in result else [result]
    first = lines[0] if lines else ""
    out = [f"{label}: {first:<53} {elapsed:5.2f}s"]
    out.extend(" " * 20 + line for line in lines[1:])
    return "\n".join(out)


def run(year: int, day: int, input_dir="input") -> None:
    """Solve both parts of one puzzle from ``input_dir/<year>/day<day>.txt``."""
    path = Path(input_dir) / str(year) / f"day{day}.txt"
    try:
        text = path.read_text()
    except OSError:
        print(f"Can't read {path}", file=sys.stderr)
        return
    solver_cls = solver_for(year, day)
    if solver_cls is None:
        return
    t0 = time.perf_counter()
    solver = solver_cls(text)
    answer = solver.part1()
    print(format_result(f"{year} day {day:02} part 1", answer, time.perf_counter() - t0))
    t0 = time.perf_counter()
    answer = solver.part2()
    print(format_result(f"{year} day {day:02} part 2", answer, time.perf_counter() - t0))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one day, or every day of a year when no day is given."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = [int(a) for a in args]
    except ValueError:
        numbers = []
    if len(numbers) == 2:
        run(numbers[0], numbers[1])
    elif len(numbers) == 1:
        t0 = time.perf_counter()
        for day in range(1, 26):
            run(numbers[0], day)
        total = f"TOTAL: {time.perf_counter() - t0:.2f}s"
        print(f"{total:>80}")
    else:
        print(_USAGE, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())