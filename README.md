# aocpuzzles

Solvers for the Advent of Code puzzles of 2015 (days 1 to 25) and 2016 (days 1 to 8). The package also has a command-line runner that solves puzzles and times each part.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Running puzzles

The runner reads each puzzle's input from `input/<year>/day<day>.txt`, relative to the current directory. For example, the input for 2015 day 7 is read from `input/2015/day7.txt`.

To solve one day:

```
aocpuzzles 2015 7
```

To solve every day of a year, pass only the year:

```
aocpuzzles 2015
```

This tries days 1 to 25 in turn and then prints the total time, right-aligned.

For each part the runner prints one line with three things:

- a label such as `2015 day 07 part 1`,
- the answer,
- the time taken in seconds.

If an answer spans several lines, its first line goes next to the label and the rest are indented beneath it. The screen drawn by 2016 day 8 part 2 is such an answer.

Other cases:

- If an input file cannot be read, the runner prints `Can't read <path>` to standard error and goes on to the next day.
- If a day has an input file but no solver, it is skipped without output.
- If the arguments are not one or two whole numbers, the runner prints a usage line to standard error and exits with status 1.

## Using the solvers from Python

Each day is a module, from `aocpuzzles.y2015.day01` to `aocpuzzles.y2015.day25` and from `aocpuzzles.y2016.day01` to `aocpuzzles.y2016.day08`.

Each module holds a `Solver` class. You build it from the puzzle text, and its `part1()` and `part2()` methods return the answers as strings:

```python
from aocpuzzles.y2015 import day01

solver = day01.Solver("(()(()(\n")
print(solver.part1())  # "3"
```

The modules also expose the functions the solvers are built from, such as `parse_input`, `part1` and `part2`, or helpers like `day25.calc_code(row, col)`.

To look up the solver class for a year and day, use `aocpuzzles.cli.solver_for(year, day)`. It returns `None` when there is none.

Malformed input raises `ValueError`.

## What it does not do

- Only the days listed above are covered. Other years, and 2016 from day 9 on, have no solvers.
- 2015 day 25 has no second part, so its `part2()` returns `"N/A"`.
- The runner does not fetch puzzle inputs; they must already be on disk.
- 2015 day 19 part 2 returns the step count of the first reduction path it finds. That count is not guaranteed to be the fewest steps for every input.

## Tests

```
pip install ".[test]"
pytest
```