"""Weather machine code at a diagonal grid position."""

from __future__ import annotations

import re

_FIRST = 20151125
_MULTIPLIER = 252533
_MODULUS = 33554393
_RE = re.compile(r"row (\d+), column (\d+)")


def calc_code(row: int, col: int) -> int:
    """Code at 1-based ``row``, ``col`` of the diagonally filled grid."""
    if row < 1 or col < 1:
        raise ValueError("row and column start at 1")
    index = (row + col - 2) * (row + col - 1) // 2 + col - 1
    return _FIRST * pow(_MULTIPLIER, index, _MODULUS) % _MODULUS


def parse_input(text: str) -> tuple[int, int]:
    m = _RE.search(text)
    if m is None:
        raise ValueError("no row and column in input")
    return int(m[1]), int(m[2])


class Solver:
    """Solves the puzzle; there is no second part."""

    def __init__(self, text: str) -> None:
        self.row, self.col = parse_input(text)

    def part1(self) -> str:
        return str(calc_code(self.row, self.col))

    def part2(self) -> str:
        return "N/A"