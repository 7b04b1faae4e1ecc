"""Finding the aunt who sent the gift."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

_TICKER = {
    "children": 3,
    "cats": 7,
    "samoyeds": 2,
    "pomeranians": 3,
    "akitas": 0,
    "vizslas": 0,
    "goldfish": 5,
    "trees": 3,
    "cars": 2,
    "perfumes": 1,
}

_RANGES: dict[str, Callable[[int, int], bool]] = {
    "cats": operator.gt,
    "trees": operator.gt,
    "pomeranians": operator.lt,
    "goldfish": operator.lt,
}

_TRAILING = ",:"


@dataclass(frozen=True)
class Aunt:
    """An aunt's number and the things remembered about her."""

    number: int
    items: tuple[tuple[str, int], ...]


def _parse_aunt(line: str) -> Aunt:
    words = line.split(" ")
    if len(words) % 2:
        raise ValueError(f"bad aunt: {line!r}")
    number = 0
    items: list[tuple[str, int]] = []
    for key, value in zip(words[::2], words[1::2]):
        key = key.rstrip(_TRAILING)
        amount = int(value.rstrip(_TRAILING))
        if key == "Sue":
            number = amount
        else:
            items.append((key, amount))
    return Aunt(number, tuple(items))


def parse_input(text: str) -> list[Aunt]:
    return [_parse_aunt(line) for line in text.splitlines()]


def _matches(aunt: Aunt, compare: Callable[[str], Callable[[int, int], bool]]) -> bool:
    for item, value in aunt.items:
        if item not in _TICKER:
            raise ValueError(f"unknown item: {item}")
        if not compare(item)(value, _TICKER[item]):
            return False
    return True


def _find(aunts: Sequence[Aunt], compare) -> Optional[int]:
    return next((a.number for a in aunts if _matches(a, compare)), None)


def part1(aunts: Sequence[Aunt]) -> Optional[int]:
    """Number of the first aunt whose items all equal the ticker readings."""
    return _find(aunts, lambda item: operator.eq)


def part2(aunts: Sequence[Aunt]) -> Optional[int]:
    """Like ``part1`` but some readings are lower or upper bounds."""
    return _find(aunts, lambda item: _RANGES.get(item, operator.eq))


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.aunts = parse_input(text)

    def part1(self) -> str:
        number = part1(self.aunts)
        if number is None:
            raise ValueError("no aunt matches")
        return str(number)

    def part2(self) -> str:
        number = part2(self.aunts)
        if number is None:
            raise ValueError("no aunt matches")
        return str(number)