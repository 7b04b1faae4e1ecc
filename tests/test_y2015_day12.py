import pytest

from aocpuzzles.y2015.day12 import Solver, json_sum, parse_input


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[1,2,3]", 6),
        ('{"a":2,"b":4}', 6),
        ("[[[3]]]", 3),
        ('{"a":{"b":4},"c":-1}', 3),
        ('{"a":[-1,1]}', 0),
        ('[-1,{"a":1}]', 0),
        ("[]", 0),
        ("{}", 0),
    ],
)
def test_sum_all(text, expected):
    assert json_sum(parse_input(text), "") == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[1,2,3]", 6),
        ('[1,{"c":"red","b":2},3]', 4),
        ('{"d":"red","e":[1,2,3,4],"f":5}', 0),
        ('[1,"red",5]', 6),
    ],
)
def test_sum_except_red(text, expected):
    assert json_sum(parse_input(text), "red") == expected


def test_solver():
    solver = Solver('[1,{"c":"red","b":2},3]')
    assert solver.part1() == "6"
    assert solver.part2() == "4"


def test_float_rejected():
    with pytest.raises(ValueError):
        json_sum(parse_input("[1.5]"), "")