"""Floor counting from a string of parentheses."""

from __future__ import annotations


def parse_input(text: str) -> list[str]:
    """Return the characters of the first line of the input."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    return list(lines[0])


def lift(directions: list[str]) -> int:
    """Return the floor reached after following every direction."""
    return sum(1 if c == "(" else -1 for c in directions)


def find_basement(directions: list[str]) -> int:
    """Return the 1-based position of the first step into the basement."""
    level = 0
    for position, c in enumerate(directions, start=1):
        level += 1 if c == "(" else -1
        if level == -1:
            return position
    raise ValueError("never reached basement")


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.directions = parse_input(text)

    def part1(self) -> str:
        return str(lift(self.directions))

    def part2(self) -> str:
        return str(find_basement(self.directions))