"""Real rooms, checksums and shift-cipher names."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class Room:
    encrypted_name: str
    sector_id: int
    checksum: str

    def is_real(self) -> bool:
        return self.checksum == self.calc_checksum()

    def calc_checksum(self) -> str:
        """Five most common letters, ties broken alphabetically."""
        counts = Counter(c for c in self.encrypted_name if c in _ALPHABET)
        ranked = sorted(counts, key=lambda c: (-counts[c], c))[:5]
        return "".join(ranked).ljust(5, "a")

    def name(self) -> str:
        """Decrypt the name by shifting each letter by the sector id."""
        out = []
        for c in self.encrypted_name:
            if c == "-":
                out.append(" ")
            elif c in _ALPHABET:
                out.append(_ALPHABET[(_ALPHABET.index(c) + self.sector_id) % 26])
            else:
                raise ValueError(f"invalid character in room name: {c!r}")
        return "".join(out)


def parse_room(line: str) -> Room:
    """Parse ``name-with-dashes-123[check]``."""
    dash = line.rfind("-")
    open_bracket = line.rfind("[")
    close_bracket = line.rfind("]")
    if min(dash, open_bracket, close_bracket) < 0:
        raise ValueError(f"bad room: {line!r}")
    return Room(
        line[:dash],
        int(line[dash + 1:open_bracket]),
        line[open_bracket + 1:close_bracket],
    )


def parse_input(text: str) -> list[Room]:
    return [parse_room(line) for line in text.splitlines()]


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.rooms = parse_input(text)

    def part1(self) -> str:
        return str(sum(room.sector_id for room in self.rooms if room.is_real()))

    def part2(self) -> str:
        for room in self.rooms:
            if room.is_real() and room.name() == "northpole object storage":
                return str(room.sector_id)
        raise ValueError("no room stores north pole objects")