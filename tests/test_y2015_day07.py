import pytest

from aocpuzzles.y2015.day07 import Solver, Wire, measure, measure_a, parse_input

EXAMPLE = """\
123 -> x
456 -> y
x AND y -> d
x OR y -> e
x LSHIFT 2 -> f
y RSHIFT 2 -> g
NOT x -> h
NOT y -> i
"""


@pytest.mark.parametrize(
    "wire, expected",
    [
        ("d", 72),
        ("e", 507),
        ("f", 492),
        ("g", 114),
        ("h", 65412),
        ("i", 65079),
        ("x", 123),
        ("y", 456),
    ],
)
def test_measure(wire, expected):
    assert measure(parse_input(EXAMPLE), wire, {}) == expected


def test_parse_literal_operand():
    wires = parse_input("1 AND x -> a\n3 -> x\n")
    assert wires["a"] == Wire("AND", ("1", "x"))
    assert measure_a(wires) == 1


def test_parse_bad_line():
    with pytest.raises(ValueError):
        parse_input("x XOR y -> z\n")


def test_solver_override_b():
    solver = Solver("5 -> b\nb LSHIFT 1 -> a\n")
    assert solver.part1() == "10"
    assert solver.part2() == "20"


def test_lshift_wraps_to_16_bits():
    wires = parse_input("65535 -> x\nx LSHIFT 1 -> a\n")
    assert measure_a(wires) == 65534