"""Light grid instructions, evaluated on a compressed coordinate grid."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise


class Action(Enum):
    TURN_ON = "turn on"
    TOGGLE = "toggle"
    TURN_OFF = "turn off"


@dataclass(frozen=True)
class Instruction:
    """An action over an inclusive rectangle of lights."""

    action: Action
    start: tuple[int, int]
    end: tuple[int, int]


_RE = re.compile(r"(turn on|toggle|turn off) (\d+),(\d+) through (\d+),(\d+)")


def parse_instruction(line: str) -> Instruction:
    m = _RE.fullmatch(line)
    if m is None:
        raise ValueError(f"unexpected instruction: {line!r}")
    x0, y0, x1, y1 = (int(g) for g in m.groups()[1:])
    return Instruction(Action(m[1]), (x0, y0), (x1, y1))


def parse_input(text: str) -> list[Instruction]:
    return [parse_instruction(line) for line in text.splitlines()]


def build_axes(instructions: list[Instruction]) -> tuple[list[int], list[int]]:
    """Return the sorted boundary coordinates along x and y."""
    xs: set[int] = set()
    ys: set[int] = set()
    for inst in instructions:
        xs.update((inst.start[0], inst.end[0] + 1))
        ys.update((inst.start[1], inst.end[1] + 1))
    return sorted(xs), sorted(ys)


def _cells(instructions, x_index, y_index):
    for inst in instructions:
        xr = range(x_index[inst.start[0]], x_index[inst.end[0] + 1])
        yr = range(y_index[inst.start[1]], y_index[inst.end[1] + 1])
        yield inst.action, xr, yr


def _areas(xs: list[int], ys: list[int]):
    for xi, (xa, xb) in enumerate(pairwise(xs)):
        for yi, (ya, yb) in enumerate(pairwise(ys)):
            yield xi, yi, (xb - xa) * (yb - ya)


def _index(axis: list[int]) -> dict[int, int]:
    return {c: i for i, c in enumerate(axis)}


def part1(instructions: list[Instruction]) -> int:
    """Number of lights left on."""
    xs, ys = build_axes(instructions)
    grid = [[False] * len(ys) for _ in xs]
    for action, xr, yr in _cells(instructions, _index(xs), _index(ys)):
        for x in xr:
            row = grid[x]
            for y in yr:
                if action is Action.TURN_ON:
                    row[y] = True
                elif action is Action.TOGGLE:
                    row[y] = not row[y]
                else:
                    row[y] = False
    return sum(area for x, y, area in _areas(xs, ys) if grid[x][y])


def part2(instructions: list[Instruction]) -> int:
    """Total brightness of all lights."""
    xs, ys = build_axes(instructions)
    grid = [[0] * len(ys) for _ in xs]
    for action, xr, yr in _cells(instructions, _index(xs), _index(ys)):
        for x in xr:
            row = grid[x]
            for y in yr:
                if action is Action.TURN_ON:
                    row[y] += 1
                elif action is Action.TOGGLE:
                    row[y] += 2
                elif row[y] > 0:
                    row[y] -= 1
    return sum(area * grid[x][y] for x, y, area in _areas(xs, ys))


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.instructions = parse_input(text)

    def part1(self) -> str:
        return str(part1(self.instructions))

    def part2(self) -> str:
        return str(part2(self.instructions))