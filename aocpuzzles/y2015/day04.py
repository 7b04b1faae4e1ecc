"""Search for MD5 hashes with leading zeros."""

from __future__ import annotations

import hashlib
from itertools import count


def parse_input(text: str) -> str:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    return lines[0]


def search_hash(key: str, zeros: int) -> int:
    """Return the lowest number whose hash with ``key`` starts with ``zeros`` hex zeros."""
    if zeros == 5:
        def matches(d: bytes) -> bool:
            return d[0] == 0 and d[1] == 0 and d[2] < 16
    elif zeros == 6:
        def matches(d: bytes) -> bool:
            return d[0] == 0 and d[1] == 0 and d[2] == 0
    else:
        raise ValueError(f"unsupported number of zeros: {zeros}")

    prefix = hashlib.md5(key.encode())
    for num in count():
        h = prefix.copy()
        h.update(str(num).encode())
        if matches(h.digest()):
            return num
    raise AssertionError("unreachable")


def part1(key: str) -> int:
    return search_hash(key, 5)


def part2(key: str) -> int:
    return search_hash(key, 6)


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.key = parse_input(text)

    def part1(self) -> str:
        return str(part1(self.key))

    def part2(self) -> str:
        return str(part2(self.key))