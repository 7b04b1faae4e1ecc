import pytest

from aocpuzzles.y2015.day01 import Solver, find_basement, lift, parse_input


@pytest.mark.parametrize(
    "text, expected",
    [
        ("(())\n", 0),
        ("()()\n", 0),
        ("(((\n", 3),
        ("(()(()(\n", 3),
        ("))(((((\n", 3),
        ("())\n", -1),
        ("))(\n", -1),
        (")))\n", -3),
        (")())())\n", -3),
    ],
)
def test_lift(text, expected):
    assert lift(parse_input(text)) == expected


@pytest.mark.parametrize("text, expected", [(")\n", 1), ("()())\n", 5)])
def test_find_basement(text, expected):
    assert find_basement(parse_input(text)) == expected


def test_find_basement_never_reached():
    with pytest.raises(ValueError):
        find_basement(parse_input("(((\n"))


def test_solver():
    solver = Solver("()())\n")
    assert solver.part1() == "-1"
    assert solver.part2() == "5"


def test_parse_input_only_first_line():
    assert parse_input("()\n((\n") == ["(", ")"]