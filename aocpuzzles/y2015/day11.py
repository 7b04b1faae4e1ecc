"""Santa's next password."""

from __future__ import annotations

from itertools import pairwise

_FORBIDDEN = frozenset("iol")
_FIRST_LETTER = "a"


def parse_input(text: str) -> str:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    first_line = lines[0]
    if len(first_line) != 8:
        raise ValueError(f"password must be 8 letters: {first_line!r}")
    return first_line


def valid_password(password: str) -> bool:
    """Check the straight, forbidden-letter and two-pair rules."""
    codes = [ord(c) for c in password]
    if not any(b - a == 1 and c - b == 1 for a, b, c in zip(codes, codes[1:], codes[2:])):
        return False
    if any(c in _FORBIDDEN for c in password):
        return False
    pairs = [i for i, (a, b) in enumerate(pairwise(password)) if a == b]
    return bool(pairs) and max(pairs) - min(pairs) >= 2


def increment_password(password: str) -> str:
    """Return the password incremented like a base-26 number."""
    stem = password.rstrip("z")
    if not stem:
        raise ValueError("tried to increment past end of range")
    tail = _FIRST_LETTER * (len(password) - len(stem))
    return stem[:-1] + chr(ord(stem[-1]) + 1) + tail


def next_password(password: str) -> str:
    """Return the next valid password after ``password``."""
    candidate = password
    while True:
        candidate = increment_password(candidate)
        bad = next((i for i, c in enumerate(candidate) if c in _FORBIDDEN), None)
        if bad is not None:
            # every candidate sharing this prefix is invalid; jump past them
            candidate = (
                candidate[:bad]
                + chr(ord(candidate[bad]) + 1)
                + _FIRST_LETTER * (len(candidate) - bad - 1)
            )
        if valid_password(candidate):
            return candidate


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.password = parse_input(text)

    def part1(self) -> str:
        return next_password(self.password)

    def part2(self) -> str:
        return next_password(next_password(self.password))