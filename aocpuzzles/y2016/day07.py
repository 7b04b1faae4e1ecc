"""IPv7 addresses supporting TLS and SSL."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IPv7:
    """An address split into parts outside and inside square brackets."""

    address: str
    supernets: tuple[str, ...]
    hypernets: tuple[str, ...]

    def supports_tls(self) -> bool:
        """An ABBA outside brackets and none inside."""
        return any(has_abba(p) for p in self.supernets) and not any(
            has_abba(p) for p in self.hypernets
        )

    def supports_ssl(self) -> bool:
        """An ABA outside brackets with its BAB inside."""
        return any(
            has_bab(hyper, a, b)
            for sup in self.supernets
            for a, b in find_abas(sup)
            for hyper in self.hypernets
        )


def parse_address(line: str) -> IPv7:
    supernets: list[str] = []
    hypernets: list[str] = []
    rest = line
    while True:
        start = rest.find("[")
        if start < 0:
            supernets.append(rest)
            break
        supernets.append(rest[:start])
        rest = rest[start + 1:]
        end = rest.find("]")
        if end < 0:
            raise ValueError(f"unclosed bracket in {line!r}")
        hypernets.append(rest[:end])
        rest = rest[end + 1:]
    return IPv7(line, tuple(supernets), tuple(hypernets))


def has_abba(part: str) -> bool:
    return any(
        a == d and b == c and a != b
        for a, b, c, d in zip(part, part[1:], part[2:], part[3:])
    )


def find_abas(part: str) -> list[tuple[str, str]]:
    return [(a, b) for a, b, c in zip(part, part[1:], part[2:]) if a == c and a != b]


def has_bab(part: str, a: str, b: str) -> bool:
    return b + a + b in part


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.addresses = [parse_address(line) for line in text.splitlines()]

    def part1(self) -> str:
        return str(sum(a.supports_tls() for a in self.addresses))

    def part2(self) -> str:
        return str(sum(a.supports_ssl() for a in self.addresses))