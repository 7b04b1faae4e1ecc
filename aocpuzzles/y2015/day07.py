"""16-bit wire circuit evaluation."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MASK = 0xFFFF


@dataclass(frozen=True)
class Wire:
    """A gate feeding a wire.

    ``op`` is one of SIGNAL, DIRECT, AND, OR, LSHIFT, RSHIFT, NOT. ``inputs``
    names the wires (or literal numbers) read, ``value`` holds the signal or
    shift amount.
    """

    op: str
    inputs: tuple[str, ...] = ()
    value: int = 0


_RE_SIGNAL = re.compile(r"(\d+) -> (\w+)")
_RE_BINARY = re.compile(r"(\w+) (AND|OR) (\w+) -> (\w+)")
_RE_SHIFT = re.compile(r"(\w+) (LSHIFT|RSHIFT) (\d+) -> (\w+)")
_RE_NOT = re.compile(r"NOT (\w+) -> (\w+)")
_RE_DIRECT = re.compile(r"(\w+) -> (\w+)")


def _u16(text: str) -> int:
    value = int(text)
    if not 0 <= value <= _MASK:
        raise ValueError(f"value out of range: {text}")
    return value


def parse_input(text: str) -> dict[str, Wire]:
    wires: dict[str, Wire] = {}
    for line in text.splitlines():
        if m := _RE_SIGNAL.fullmatch(line):
            wires[m[2]] = Wire("SIGNAL", value=_u16(m[1]))
        elif m := _RE_BINARY.fullmatch(line):
            wires[m[4]] = Wire(m[2], (m[1], m[3]))
        elif m := _RE_SHIFT.fullmatch(line):
            wires[m[4]] = Wire(m[2], (m[1],), _u16(m[3]))
        elif m := _RE_NOT.fullmatch(line):
            wires[m[2]] = Wire("NOT", (m[1],))
        elif m := _RE_DIRECT.fullmatch(line):
            wires[m[2]] = Wire("DIRECT", (m[1],))
        else:
            raise ValueError(f"unexpected instruction: {line!r}")
    return wires


def measure(wires: dict[str, Wire], target: str, cache: dict[str, int]) -> int:
    """Return the signal on ``target``, memoising results in ``cache``."""
    if target in cache:
        return cache[target]

    wire = wires.get(target)
    if wire is None:
        signal = _u16(target)
    else:
        args = [measure(wires, name, cache) for name in wire.inputs]
        if wire.op == "SIGNAL":
            signal = wire.value
        elif wire.op == "DIRECT":
            signal = args[0]
        elif wire.op == "AND":
            signal = args[0] & args[1]
        elif wire.op == "OR":
            signal = args[0] | args[1]
        elif wire.op == "LSHIFT":
            signal = (args[0] << wire.value) & _MASK
        elif wire.op == "RSHIFT":
            signal = args[0] >> wire.value
        elif wire.op == "NOT":
            signal = ~args[0] & _MASK
        else:
            raise ValueError(f"unknown gate: {wire.op}")
    cache[target] = signal
    return signal


def measure_a(wires: dict[str, Wire]) -> int:
    return measure(wires, "a", {})


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.wires = parse_input(text)

    def part1(self) -> str:
        return str(measure_a(self.wires))

    def part2(self) -> str:
        wires = dict(self.wires)
        wires["b"] = Wire("SIGNAL", value=measure_a(wires))
        return str(measure_a(wires))