import pytest

from aocpuzzles.y2015.day03 import (
    Direction,
    Solver,
    deliver_presents,
    parse_input,
    part1,
    part2,
)


@pytest.mark.parametrize("text, expected", [(">", 2), ("^>v<", 4), ("^v^v^v^v^v", 2)])
def test_part1(text, expected):
    assert part1(parse_input(text)) == expected


@pytest.mark.parametrize("text, expected", [("^>", 3), ("^>v<", 3), ("^v^v^v^v^v", 11)])
def test_part2(text, expected):
    assert part2(parse_input(text)) == expected


def test_parse_rejects_bad_char():
    with pytest.raises(ValueError):
        parse_input("^x")


def test_deliver_presents_positions():
    houses = set()
    deliver_presents(houses, [Direction.NORTH, Direction.EAST])
    assert houses == {(0, 0), (0, -1), (1, -1)}


def test_solver():
    solver = Solver("^>v<\n")
    assert solver.part1() == "4"
    assert solver.part2() == "3"