"""Error-corrected messages from repeated transmissions."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def count_letters(codes: Sequence[str]) -> list[Counter]:
    """Letter counts for each column."""
    if not codes:
        raise ValueError("no codes")
    counts = [Counter() for _ in codes[0]]
    for code in codes:
        if len(code) > len(counts):
            raise ValueError(f"code longer than the first: {code!r}")
        for column, c in zip(counts, code):
            if c not in _ALPHABET:
                raise ValueError(f"unexpected character: {c!r}")
            column[c] += 1
    return counts


def most_common_letters(codes: Sequence[str]) -> str:
    """Most common letter per column, ties going to the earlier letter."""
    return "".join(
        min(column, key=lambda c: (-column[c], c), default="a")
        for column in count_letters(codes)
    )


def least_common_letters(codes: Sequence[str]) -> str:
    """Least common letter present per column, ties going to the earlier letter."""
    return "".join(
        min(column, key=lambda c: (column[c], c), default="a")
        for column in count_letters(codes)
    )


def parse_input(text: str) -> list[str]:
    return text.splitlines()


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.codes = parse_input(text)

    def part1(self) -> str:
        return most_common_letters(self.codes)

    def part2(self) -> str:
        return least_common_letters(self.codes)