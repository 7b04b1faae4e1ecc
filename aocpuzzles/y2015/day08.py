"""String literal escaping: decoded and re-encoded lengths."""

from __future__ import annotations

_HEX_DIGITS = {ord(c): i for i, c in enumerate("0123456789abcdef")}
_HEX_DIGITS[ord("A")] = 10

_QUOTE = ord('"')
_BACKSLASH = ord("\\")


def parse_input(text: str) -> list[bytes]:
    """Return each input line as raw bytes."""
    return [line.encode() for line in text.splitlines()]


def hexdigit(c: int) -> int:
    """Return the value of a single hex digit byte."""
    try:
        return _HEX_DIGITS[c]
    except KeyError:
        raise ValueError(f"non-hex character in hex escape: {c}") from None


def decode(s: bytes) -> bytes:
    """Return the in-memory bytes of a quoted, escaped literal."""
    if not s or s[0] != _QUOTE or s[-1] != _QUOTE:
        raise ValueError(f"literal is not surrounded by quotes: {s!r}")
    out = bytearray()
    i = 1
    try:
        while i < len(s) - 1:
            if s[i] == _BACKSLASH:
                if s[i + 1] == ord("x"):
                    out.append(hexdigit(s[i + 2]) * 16 + hexdigit(s[i + 3]))
                    i += 4
                else:
                    out.append(s[i + 1])
                    i += 2
            else:
                out.append(s[i])
                i += 1
    except IndexError:
        raise ValueError(f"truncated escape in {s!r}") from None
    return bytes(out)


def encode(s: bytes) -> bytes:
    """Return ``s`` as a quoted literal with quotes and backslashes escaped."""
    out = bytearray(b'"')
    for b in s:
        if b in (_BACKSLASH, _QUOTE):
            out += bytes((_BACKSLASH, b))
        elif 0x20 <= b <= 0x7E:
            out.append(b)
        else:
            raise ValueError(f"unable to encode: {b}")
    out.append(_QUOTE)
    return bytes(out)


def part1(lines: list[bytes]) -> int:
    return sum(len(line) - len(decode(line)) for line in lines)


def part2(lines: list[bytes]) -> int:
    return sum(len(encode(line)) - len(line) for line in lines)


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.lines = parse_input(text)

    def part1(self) -> str:
        return str(part1(self.lines))

    def part2(self) -> str:
        return str(part2(self.lines))