"""Bathroom keypad codes."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Sequence


class Direction(Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def _layout(rows: Sequence[str]) -> tuple[dict[str, tuple[int, int]], dict[tuple[int, int], str]]:
    keys = {
        (x, y): key
        for y, row in enumerate(rows)
        for x, key in enumerate(row)
        if key != " "
    }
    return {key: pos for pos, key in keys.items()}, keys


_NORMAL = _layout(("123", "456", "789"))
_DIAMOND = _layout(("  1  ", " 234 ", "56789", " ABC ", "  D  "))


def _move(layout, pos: str, direction: Direction) -> str:
    positions, keys = layout
    x, y = positions[pos]
    dx, dy = _DELTAS[direction]
    return keys.get((x + dx, y + dy), pos)


def normal_keypad(pos: str, direction: Direction) -> str:
    """Key reached from ``pos`` on a 3x3 keypad; moves off the edge are ignored."""
    return _move(_NORMAL, pos, direction)


def diamond_keypad(pos: str, direction: Direction) -> str:
    """Key reached from ``pos`` on the diamond keypad; moves off the edge are ignored."""
    return _move(_DIAMOND, pos, direction)


def solve(
    lines: Sequence[Sequence[Direction]],
    keypad: Callable[[str], Direction] | Callable[[str, Direction], str],
) -> str:
    """Follow each line from the previous key, starting at 5, and collect the keys."""
    pos = "5"
    code = []
    for line in lines:
        for direction in line:
            pos = keypad(pos, direction)
        code.append(pos)
    return "".join(code)


def parse_input(text: str) -> list[list[Direction]]:
    try:
        return [[Direction(c) for c in line] for line in text.splitlines()]
    except ValueError as exc:
        raise ValueError(f"Unexpected character: {exc}") from None


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.lines = parse_input(text)

    def part1(self) -> str:
        return solve(self.lines, normal_keypad)

    def part2(self) -> str:
        return solve(self.lines, diamond_keypad)