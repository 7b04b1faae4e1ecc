"""Nice and naughty strings."""

from __future__ import annotations

from itertools import pairwise

_VOWELS = frozenset("aeiou")
_BAD = ("ab", "cd", "pq", "xy")


def count_vowels(word: str) -> int:
    return sum(1 for c in word if c in _VOWELS)


def contains_double(word: str) -> bool:
    return any(a == b for a, b in pairwise(word))


def contains_bad(word: str) -> bool:
    return any(bad in word for bad in _BAD)


def is_nice(word: str) -> bool:
    return count_vowels(word) >= 3 and contains_double(word) and not contains_bad(word)


def contains_non_overlapping_pair(word: str) -> bool:
    """True if some letter pair appears twice without overlapping."""
    return any(word[i:i + 2] in word[i + 2:] for i in range(len(word) - 1))


def contains_sandwiched_letter(word: str) -> bool:
    return any(a == c for a, c in zip(word, word[2:]))


def is_nice2(word: str) -> bool:
    return contains_non_overlapping_pair(word) and contains_sandwiched_letter(word)


def parse_input(text: str) -> list[str]:
    return text.splitlines()


def part1(words: list[str]) -> int:
    return sum(1 for w in words if is_nice(w))


def part2(words: list[str]) -> int:
    return sum(1 for w in words if is_nice2(w))


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.words = parse_input(text)

    def part1(self) -> str:
        return str(part1(self.words))

    def part2(self) -> str:
        return str(part2(self.words))