"""Game-of-life animation on a square light grid."""

from __future__ import annotations

from collections import Counter

_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class Grid:
    """A square grid of lights; with broken corners, the corners stay on."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.lights: set[tuple[int, int]] = set()
        self.broken = False

    def turn_on(self, x: int, y: int) -> None:
        self.lights.add((x, y))

    def turn_off(self, x: int, y: int) -> None:
        self.lights.discard((x, y))

    def count(self) -> int:
        return len(self.lights)

    def break_corners(self) -> None:
        """Mark the four corners as permanently on."""
        self.broken = True
        last = self.size - 1
        for corner in ((0, 0), (0, last), (last, 0), (last, last)):
            self.turn_on(*corner)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def count_neighbours(self, x: int, y: int) -> int:
        return sum((x + dx, y + dy) in self.lights for dx, dy in _OFFSETS)

    def _next(self) -> Grid:
        neighbours = Counter(
            (x + dx, y + dy)
            for x, y in self.lights
            for dx, dy in _OFFSETS
            if self._inside(x + dx, y + dy)
        )
        grid = Grid(self.size)
        grid.lights = {
            pos for pos, n in neighbours.items() if n == 3 or (n == 2 and pos in self.lights)
        }
        if self.broken:
            grid.break_corners()
        return grid

    def step(self, count: int = 1) -> Grid:
        """Return the grid after ``count`` animation steps."""
        if count < 1:
            raise ValueError("step count must be at least 1")
        grid = self
        for _ in range(count):
            grid = grid._next()
        return grid

    def _clone(self) -> Grid:
        grid = Grid(self.size)
        grid.lights = set(self.lights)
        grid.broken = self.broken
        return grid

    def __str__(self) -> str:
        return "".join(
            "".join("#" if (x, y) in self.lights else "." for x in range(self.size)) + "\n"
            for y in range(self.size)
        )


def parse_input(text: str) -> Grid:
    lines = text.splitlines()
    grid = Grid(len(lines))
    for y, line in enumerate(lines):
        for x, c in enumerate(line):
            if c == "#":
                grid.turn_on(x, y)
            elif c != ".":
                raise ValueError(f"unexpected char: {c!r}")
    return grid


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.grid = parse_input(text)

    def part1(self) -> str:
        return str(self.grid.step(100).count())

    def part2(self) -> str:
        grid = self.grid._clone()
        grid.break_corners()
        return str(grid.step(100).count())