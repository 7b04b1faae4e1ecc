"""Balancing packages into groups of equal weight."""

from __future__ import annotations

from dataclasses import dataclass
from math import prod
from typing import Sequence


@dataclass(frozen=True)
class Group:
    """A set of packages as a bitmask: bit i marks package i."""

    mask: int

    def package_count(self) -> int:
        return bin(self.mask).count("1")

    def weights(self, weights: Sequence[int]) -> list[int]:
        return [w for i, w in enumerate(weights) if self.mask >> i & 1]

    def quantum_entanglement(self, weights: Sequence[int]) -> int:
        return prod(self.weights(weights))


def parse_input(text: str) -> list[int]:
    return [int(line) for line in text.splitlines()]


def find_groups(weights: Sequence[int], group_weight: int) -> list[Group]:
    """Every subset of ``weights`` summing to ``group_weight``."""
    groups: list[Group] = []
    for i, weight in enumerate(weights):
        if weight == group_weight:
            groups.append(Group(1 << i))
        elif weight < group_weight and i + 1 < len(weights):
            for sub in find_groups(weights[i + 1:], group_weight - weight):
                groups.append(Group(sub.mask << (i + 1) | 1 << i))
    return groups


def find_group1(weights: Sequence[int], count: int) -> Group:
    """Smallest group of weight total/count with the lowest entanglement."""
    groups = find_groups(weights, sum(weights) // count)
    if not groups:
        raise ValueError("no group has the required weight")
    size = min(g.package_count() for g in groups)
    return min(
        (g for g in groups if g.package_count() == size),
        key=lambda g: g.quantum_entanglement(weights),
    )


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.weights = parse_input(text)

    def part1(self) -> str:
        return str(find_group1(self.weights, 3).quantum_entanglement(self.weights))

    def part2(self) -> str:
        return str(find_group1(self.weights, 4).quantum_entanglement(self.weights))