"""Summing numbers in a JSON document."""

from __future__ import annotations

import json
from typing import Any


def parse_input(text: str) -> Any:
    return json.loads(text)


def json_sum(value: Any, exclude: str) -> int:
    """Sum all integers, skipping objects that have a string value equal to ``exclude``."""
    if value is None or isinstance(value, (bool, str)):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        raise ValueError(f"not an integer: {value}")
    if isinstance(value, list):
        return sum(json_sum(v, exclude) for v in value)
    if isinstance(value, dict):
        if any(isinstance(v, str) and v == exclude for v in value.values()):
            return 0
        return sum(json_sum(v, exclude) for v in value.values())
    raise TypeError(f"unexpected JSON value: {value!r}")


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.document = parse_input(text)

    def part1(self) -> str:
        return str(json_sum(self.document, ""))

    def part2(self) -> str:
        return str(json_sum(self.document, "red"))