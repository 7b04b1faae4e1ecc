"""Look-and-say sequence growth."""

from __future__ import annotations

from itertools import groupby


def parse_input(text: str) -> list[int]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    return [int(c) for c in lines[0]]


def step(digits: list[int]) -> list[int]:
    """Return the next look-and-say term."""
    if not digits:
        raise ValueError("empty sequence")
    out: list[int] = []
    for digit, run in groupby(digits):
        out.extend((sum(1 for _ in run), digit))
    return out


def expand(digits: list[int], times: int) -> int:
    """Return the length after applying ``step`` ``times`` times."""
    for _ in range(times):
        digits = step(digits)
    return len(digits)


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.digits = parse_input(text)

    def part1(self) -> str:
        return str(expand(self.digits, 40))

    def part2(self) -> str:
        return str(expand(self.digits, 50))