"""Molecule replacements and fabrication."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence


@dataclass(frozen=True)
class Replacement:
    """A rule that turns ``source`` into ``target``."""

    source: str
    target: str


def _positions(haystack: str, needle: str) -> Iterator[int]:
    """Start positions of non-overlapping occurrences of ``needle``."""
    return (m.start() for m in re.finditer(re.escape(needle), haystack))


def _substitute(molecule: str, pos: int, old: str, new: str) -> str:
    return molecule[:pos] + new + molecule[pos + len(old):]


def part1(replacements: Sequence[Replacement], molecule: str) -> int:
    """Number of distinct molecules one replacement away."""
    return len(
        {
            _substitute(molecule, pos, r.source, r.target)
            for r in replacements
            for pos in _positions(molecule, r.source)
        }
    )


def part2(replacements: Sequence[Replacement], molecule: str) -> int:
    """Steps to reduce ``molecule`` back to ``e`` along the first path found.

    The search is depth-first and stops at the first success, so it is not
    guaranteed to give the fewest steps for every input.
    """

    def dfs(current: str, depth: int) -> Optional[int]:
        if current == "e":
            return depth
        for r in replacements:
            for pos in _positions(current, r.target):
                found = dfs(_substitute(current, pos, r.target, r.source), depth + 1)
                if found is not None:
                    return found
        return None

    answer = dfs(molecule, 0)
    if answer is None:
        raise ValueError("molecule cannot be reduced to 'e'")
    return answer


def parse_input(text: str) -> tuple[list[Replacement], str]:
    lines = iter(text.splitlines())
    replacements: list[Replacement] = []
    for line in lines:
        if not line:
            break
        source, sep, target = line.partition(" => ")
        if not sep:
            raise ValueError(f"bad replacement: {line!r}")
        replacements.append(Replacement(source, target))
    molecule = next(lines, None)
    if molecule is None:
        raise ValueError("missing molecule")
    return replacements, molecule


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.replacements, self.molecule = parse_input(text)

    def part1(self) -> str:
        return str(part1(self.replacements, self.molecule))

    def part2(self) -> str:
        return str(part2(self.replacements, self.molecule))