"""Shortest and longest routes visiting every city once."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise, permutations


@dataclass
class Graph:
    """Cities by index and the distances between them."""

    names: list[str] = field(default_factory=list)
    distance: dict[tuple[int, int], int] = field(default_factory=dict)

    def minmax_distance(self) -> tuple[int, int]:
        """Return the (shortest, longest) route visiting every city."""
        lengths = [
            sum(self.distance[pair] for pair in pairwise(path))
            for path in permutations(range(len(self.names)))
        ]
        return min(lengths), max(lengths)

    def __str__(self) -> str:
        n = len(self.names)
        return "".join(
            f"{self.names[i]} to {self.names[j]} = {self.distance[i, j]}\n"
            for i in range(n)
            for j in range(i + 1, n)
        )


def _city_index(names: list[str], name: str) -> int:
    if name not in names:
        names.append(name)
    return names.index(name)


def parse_input(text: str) -> Graph:
    graph = Graph()
    for line in text.splitlines():
        words = line.split(" ")
        if len(words) < 5:
            raise ValueError(f"bad route: {line!r}")
        a = _city_index(graph.names, words[0])
        b = _city_index(graph.names, words[2])
        d = int(words[4])
        graph.distance[a, b] = d
        graph.distance[b, a] = d
    return graph


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.minmax = parse_input(text).minmax_distance()

    def part1(self) -> str:
        return str(self.minmax[0])

    def part2(self) -> str:
        return str(self.minmax[1])