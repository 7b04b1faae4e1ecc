"""A small pixel screen driven by rect and rotate instructions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

WIDTH = 50
HEIGHT = 6

_LIT = "█"
_DARK = " "

_PATTERNS = {
    "rect": re.compile(r"rect (\d+)x(\d+)"),
    "rotate row": re.compile(r"rotate row y=(\d+) by (\d+)"),
    "rotate column": re.compile(r"rotate column x=(\d+) by (\d+)"),
}


class Screen:
    """A 50x6 grid of pixels, all off to begin with."""

    def __init__(self) -> None:
        self.pixels = [[False] * WIDTH for _ in range(HEIGHT)]

    def light_rect(self, width: int, height: int) -> None:
        """Turn on every pixel in the top-left ``width`` x ``height`` rectangle."""
        if width > WIDTH or height > HEIGHT:
            raise ValueError(f"rectangle {width}x{height} does not fit the screen")
        for row in self.pixels[:height]:
            row[:width] = [True] * width

    def rotate_row(self, row: int, by: int) -> None:
        """Shift a row right by ``by`` pixels, wrapping around."""
        pixels = self.pixels[row]
        k = by % WIDTH
        if k:
            self.pixels[row] = pixels[-k:] + pixels[:-k]

    def rotate_column(self, col: int, by: int) -> None:
        """Shift a column down by ``by`` pixels, wrapping around."""
        column = [row[col] for row in self.pixels]
        k = by % HEIGHT
        if k:
            column = column[-k:] + column[:-k]
        for row, value in zip(self.pixels, column):
            row[col] = value

    def count_lit(self) -> int:
        return sum(sum(row) for row in self.pixels)

    def __str__(self) -> str:
        return "".join(
            "".join(_LIT if p else _DARK for p in row) + "\n" for row in self.pixels
        )


@dataclass(frozen=True)
class Instruction:
    """One screen operation: ``rect`` (a=width, b=height), or
    ``rotate row`` / ``rotate column`` (a=index, b=amount)."""

    kind: str
    a: int
    b: int

    def __post_init__(self) -> None:
        if self.kind not in _PATTERNS:
            raise ValueError(f"unknown instruction kind: {self.kind!r}")


def _parse_line(line: str) -> Instruction:
    for kind, pattern in _PATTERNS.items():
        m = pattern.fullmatch(line)
        if m is not None:
            return Instruction(kind, int(m[1]), int(m[2]))
    raise ValueError(f"Invalid instruction: {line}")


def parse_input(text: str) -> list[Instruction]:
    return [_parse_line(line) for line in text.splitlines()]


def process(instructions: Sequence[Instruction]) -> Screen:
    """Apply every instruction to a fresh screen."""
    screen = Screen()
    for inst in instructions:
        if inst.kind == "rect":
            screen.light_rect(inst.a, inst.b)
        elif inst.kind == "rotate row":
            screen.rotate_row(inst.a, inst.b)
        else:
            screen.rotate_column(inst.a, inst.b)
    return screen


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.instructions = parse_input(text)

    def part1(self) -> str:
        return str(process(self.instructions).count_lit())

    def part2(self) -> str:
        return str(process(self.instructions))