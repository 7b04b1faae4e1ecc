"""Walking a taxicab grid from turn-and-walk instructions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence


class Turn(Enum):
    LEFT = "L"
    RIGHT = "R"


class Direction(Enum):
    """A compass heading, listed clockwise."""

    NORTH = (0, 1)
    EAST = (1, 0)
    SOUTH = (0, -1)
    WEST = (-1, 0)

    def turn(self, turn: Turn) -> Direction:
        """Return the heading after turning left or right."""
        headings = list(Direction)
        step = 1 if turn is Turn.RIGHT else -1
        return headings[(headings.index(self) + step) % len(headings)]


@dataclass(frozen=True)
class Instruction:
    turn: Turn
    walk: int


def parse_input(text: str) -> list[Instruction]:
    instructions = []
    for item in text.rstrip("\n").split(", "):
        if not item:
            raise ValueError("empty instruction")
        try:
            turn = Turn(item[0])
        except ValueError:
            raise ValueError(f"Invalid turn: {item!r}") from None
        instructions.append(Instruction(turn, int(item[1:])))
    return instructions


def _distance(position: tuple[int, int]) -> int:
    return abs(position[0]) + abs(position[1])


def _steps(instructions: Sequence[Instruction]) -> Iterator[tuple[int, int]]:
    """Yield the position after every single block walked."""
    heading = Direction.NORTH
    x, y = 0, 0
    for inst in instructions:
        heading = heading.turn(inst.turn)
        dx, dy = heading.value
        for _ in range(inst.walk):
            x, y = x + dx, y + dy
            yield x, y


def part1(instructions: Sequence[Instruction]) -> int:
    """Distance from the origin after following every instruction."""
    position = (0, 0)
    for position in _steps(instructions):
        pass
    return _distance(position)


def part2(instructions: Sequence[Instruction]) -> int:
    """Distance to the first location visited twice."""
    visited: set[tuple[int, int]] = set()
    for position in _steps(instructions):
        if position in visited:
            return _distance(position)
        visited.add(position)
    raise ValueError("Didn't visit any location twice")


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.instructions = parse_input(text)

    def part1(self) -> str:
        return str(part1(self.instructions))

    def part2(self) -> str:
        return str(part2(self.instructions))