"""Elves delivering presents to an infinite street."""

from __future__ import annotations

from math import isqrt
from typing import Optional


def parse_input(text: str) -> int:
    return int(text.strip())


def presents(house: int) -> int:
    """Presents delivered to ``house`` when every elf visits every multiple."""
    total = 0
    for elf in range(1, isqrt(house) + 1):
        if house % elf == 0:
            other = house // elf
            total += elf if other == elf else elf + other
    return total * 10


def _first_house(min_presents: int, per_elf: int, visits: Optional[int]) -> int:
    """Lowest house receiving at least ``min_presents``.

    Each elf delivers ``elf * per_elf`` presents to its multiples, to at most
    ``visits`` houses if given. Houses are sieved in growing batches.
    """
    limit = 1024
    while True:
        totals = [0] * (limit + 1)
        for elf in range(1, limit + 1):
            last = limit if visits is None else min(limit, elf * visits)
            gift = elf * per_elf
            for house in range(elf, last + 1, elf):
                totals[house] += gift
        found = next(
            (house for house, total in enumerate(totals[1:], start=1) if total >= min_presents),
            None,
        )
        if found is not None:
            return found
        limit *= 2


def part1(min_presents: int) -> int:
    return _first_house(min_presents, 10, None)


def part2(min_presents: int) -> int:
    """Each elf now delivers 11 per multiple but stops after 50 houses."""
    return _first_house(min_presents, 11, 50)


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.min_presents = parse_input(text)

    def part1(self) -> str:
        return str(part1(self.min_presents))

    def part2(self) -> str:
        return str(part2(self.min_presents))