"""Combinations of containers holding exactly a given volume."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class Stats:
    """Number of combinations, keyed by the number of containers used."""

    counts: Counter = field(default_factory=Counter)

    def total_combinations(self) -> int:
        return sum(self.counts.values())

    def min_containers(self) -> int:
        return min(self.counts, default=0)

    def min_combinations(self) -> int:
        return self.counts.get(self.min_containers(), 0)


def combinations(containers: Sequence[int], target: int) -> Stats:
    """Count the subsets of ``containers`` that hold exactly ``target``."""
    # (containers used, volume so far) -> number of ways
    ways: Counter = Counter({(0, 0): 1})
    for size in containers:
        for (used, volume), n in list(ways.items()):
            if volume < target and volume + size <= target:
                ways[used + 1, volume + size] += n
    stats = Stats()
    for (used, volume), n in ways.items():
        if volume == target:
            stats.counts[used] += n
    return stats


def parse_input(text: str) -> list[int]:
    return [int(line) for line in text.splitlines()]


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.stats = combinations(parse_input(text), 150)

    def part1(self) -> str:
        return str(self.stats.total_combinations())

    def part2(self) -> str:
        return str(self.stats.min_combinations())