"""Reindeer race simulation."""

from __future__ import annotations

import re
from dataclasses import dataclass

_RE = re.compile(
    r"(\w+) can fly (\d+) km/s for (\d+) seconds, but then must rest for (\d+) seconds\."
)


@dataclass(frozen=True)
class Reindeer:
    name: str
    speed: int
    flight_period: int
    rest_period: int


@dataclass
class State:
    """A reindeer's progress: whether it flies, seconds left in that phase, km and points."""

    flying: bool
    remaining: int
    distance: int = 0
    score: int = 0


def parse_reindeer(line: str) -> Reindeer:
    m = _RE.fullmatch(line)
    if m is None:
        raise ValueError(f"unexpected line: {line!r}")
    return Reindeer(m[1], int(m[2]), int(m[3]), int(m[4]))


def parse_input(text: str) -> list[Reindeer]:
    return [parse_reindeer(line) for line in text.splitlines()]


def simulate(reindeer: list[Reindeer], seconds: int) -> list[State]:
    """Run the race for ``seconds`` and return each reindeer's final state."""
    states = [State(True, r.flight_period) for r in reindeer]
    for _ in range(seconds):
        for r, s in zip(reindeer, states):
            if s.flying:
                s.distance += r.speed
                if s.remaining > 1:
                    s.remaining -= 1
                else:
                    s.flying, s.remaining = False, r.rest_period
            elif s.remaining > 1:
                s.remaining -= 1
            else:
                s.flying, s.remaining = True, r.flight_period
        leading = max((s.distance for s in states), default=0)
        for s in states:
            if s.distance == leading:
                s.score += 1
    return states


def part1(reindeer: list[Reindeer], seconds: int) -> int:
    return max(s.distance for s in simulate(reindeer, seconds))


def part2(reindeer: list[Reindeer], seconds: int) -> int:
    return max(s.score for s in simulate(reindeer, seconds))


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.reindeer = parse_input(text)

    def part1(self) -> str:
        return str(part1(self.reindeer, 2503))

    def part2(self) -> str:
        return str(part2(self.reindeer, 2503))