"""Counting possible triangles, by rows and by columns."""

from __future__ import annotations

from typing import Sequence


def possible(triangle: Sequence[int]) -> bool:
    """True if every two sides together are longer than the third."""
    a, b, c = triangle[:3]
    return a + b > c and a + c > b and b + c > a


def count_vertical(rows: Sequence[Sequence[int]]) -> int:
    """Count triangles read down the columns of each block of three rows."""
    blocks = len(rows) // 3
    return sum(
        possible(column)
        for i in range(blocks)
        for column in zip(*(row[:3] for row in rows[i * 3:i * 3 + 3]))
    )


def parse_input(text: str) -> list[list[int]]:
    return [[int(n) for n in line.split()] for line in text.splitlines()]


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.rows = parse_input(text)

    def part1(self) -> str:
        return str(sum(possible(row) for row in self.rows))

    def part2(self) -> str:
        return str(count_vertical(self.rows))