"""Optimal circular seating arrangement."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from itertools import pairwise, permutations

_RE = re.compile(r"(\w+) would (gain|lose) (\d+) happiness units by sitting next to (\w+).")


@dataclass
class Diners:
    """Guests by index and how much each likes sitting next to another."""

    names: list[str] = field(default_factory=list)
    happiness: dict[tuple[int, int], int] = field(default_factory=dict)

    def happy_pair(self, p1: int, p2: int) -> int:
        """Combined happiness change for two neighbours."""
        return self.happiness.get((p1, p2), 0) + self.happiness.get((p2, p1), 0)

    def _seating_score(self, seating: tuple[int, ...]) -> int:
        return sum(self.happy_pair(a, b) for a, b in pairwise(seating)) + self.happy_pair(
            seating[0], seating[-1]
        )

    def happiest(self) -> int:
        """Return the best total happiness over all seatings around the table."""
        if not self.names:
            raise ValueError("no diners")
        return max(
            self._seating_score((0, *rest))
            for rest in permutations(range(1, len(self.names)))
        )

    def add_myself(self) -> None:
        self.names.append("Me")


def _index(names: list[str], name: str) -> int:
    if name not in names:
        names.append(name)
    return names.index(name)


def parse_input(text: str) -> Diners:
    diners = Diners()
    for line in text.splitlines():
        m = _RE.fullmatch(line)
        if m is None:
            raise ValueError(f"unexpected line: {line!r}")
        p1 = _index(diners.names, m[1])
        p2 = _index(diners.names, m[4])
        h = int(m[3])
        diners.happiness[p1, p2] = h if m[2] == "gain" else -h
    return diners


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.diners = parse_input(text)

    def part1(self) -> str:
        return str(self.diners.happiest())

    def part2(self) -> str:
        diners = Diners(list(self.diners.names), dict(self.diners.happiness))
        diners.add_myself()
        return str(diners.happiest())