"""Door passwords from MD5 hashes with five leading zeros."""

from __future__ import annotations

import hashlib
from itertools import count
from typing import Iterable, Iterator

_LENGTH = 8


def _interesting(door_id: str, start: int = 0) -> Iterator[tuple[int, str]]:
    """Yield (index, hex digest) for every hash starting with five zeros."""
    prefix = hashlib.md5(door_id.encode())
    for index in count(start):
        h = prefix.copy()
        h.update(str(index).encode())
        d = h.digest()
        if d[0] == 0 and d[1] == 0 and d[2] < 16:
            yield index, h.hexdigest()


def _first_password(hashes: Iterable[str]) -> str:
    """Take the sixth hex character of each of the first eight hashes."""
    chars = []
    for digest in hashes:
        chars.append(digest[5])
        if len(chars) == _LENGTH:
            return "".join(chars)
    raise ValueError("ran out of hashes")


def _second_password(hashes: Iterable[str]) -> str:
    """The sixth character gives a position, the seventh its character; first one wins."""
    slots: list[str | None] = [None] * _LENGTH
    for digest in hashes:
        pos = int(digest[5], 16)
        if pos < _LENGTH and slots[pos] is None:
            slots[pos] = digest[6]
            if all(s is not None for s in slots):
                return "".join(s for s in slots if s is not None)
    raise ValueError("ran out of hashes")


def bf_password1(door_id: str) -> str:
    return _first_password(digest for _, digest in _interesting(door_id))


def bf_password2(door_id: str) -> str:
    return _second_password(digest for _, digest in _interesting(door_id))


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.door_id = text.strip()

    def part1(self) -> str:
        return bf_password1(self.door_id)

    def part2(self) -> str:
        return bf_password2(self.door_id)