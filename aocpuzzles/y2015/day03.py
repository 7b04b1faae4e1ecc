"""Houses visited by Santa and Robo-Santa."""

from __future__ import annotations

from enum import Enum
from itertools import islice
from typing import Iterable


class Direction(Enum):
    """A move on the grid, keyed by its input character."""

    NORTH = "^"
    EAST = ">"
    SOUTH = "v"
    WEST = "<"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


def parse_input(text: str) -> list[Direction]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    try:
        return [Direction(c) for c in lines[0]]
    except ValueError as exc:
        raise ValueError(f"unexpected direction in {lines[0]!r}") from exc


def deliver_presents(
    houses: set[tuple[int, int]], directions: Iterable[Direction]
) -> None:
    """Add every house visited from the origin to ``houses``."""
    x, y = 0, 0
    houses.add((x, y))
    for d in directions:
        dx, dy = d.delta
        x, y = x + dx, y + dy
        houses.add((x, y))


def part1(directions: list[Direction]) -> int:
    houses: set[tuple[int, int]] = set()
    deliver_presents(houses, directions)
    return len(houses)


def part2(directions: list[Direction]) -> int:
    houses: set[tuple[int, int]] = set()
    deliver_presents(houses, islice(directions, 0, None, 2))
    deliver_presents(houses, islice(directions, 1, None, 2))
    return len(houses)


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.directions = parse_input(text)

    def part1(self) -> str:
        return str(part1(self.directions))

    def part2(self) -> str:
        return str(part2(self.directions))