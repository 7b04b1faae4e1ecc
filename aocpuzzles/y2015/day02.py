"""Wrapping paper and ribbon for presents."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Present:
    """A box with length, width and height."""

    l: int
    w: int
    h: int

    def wrapping_paper(self) -> int:
        sides = (self.l * self.w, self.w * self.h, self.h * self.l)
        return 2 * sum(sides) + min(sides)

    def smallest_perimeter(self) -> int:
        return 2 * min(self.l + self.w, self.l + self.h, self.w + self.h)

    def volume(self) -> int:
        return self.l * self.w * self.h

    def ribbon(self) -> int:
        return self.smallest_perimeter() + self.volume()


def parse_present(line: str) -> Present:
    """Parse dimensions written as ``LxWxH``."""
    parts = line.split("x")
    if len(parts) < 3:
        raise ValueError(f"bad present: {line!r}")
    l, w, h = (int(p) for p in parts[:3])
    return Present(l, w, h)


def parse_input(text: str) -> list[Present]:
    return [parse_present(line) for line in text.splitlines()]


def total_paper(presents: list[Present]) -> int:
    return sum(p.wrapping_paper() for p in presents)


def total_ribbon(presents: list[Present]) -> int:
    return sum(p.ribbon() for p in presents)


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.presents = parse_input(text)

    def part1(self) -> str:
        return str(total_paper(self.presents))

    def part2(self) -> str:
        return str(total_ribbon(self.presents))