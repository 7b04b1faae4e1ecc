import pytest

from aocpuzzles.y2015.day13 import Diners, Solver, parse_input

PREFERENCES = [
    ("Alice", 54, "Bob"),
    ("Alice", -79, "Carol"),
    ("Alice", -2, "David"),
    ("Bob", 83, "Alice"),
    ("Bob", -7, "Carol"),
    ("Bob", -63, "David"),
    ("Carol", -62, "Alice"),
    ("Carol", 60, "Bob"),
    ("Carol", 55, "David"),
    ("David", 46, "Alice"),
    ("David", -7, "Bob"),
    ("David", 41, "Carol"),
]


def _render(who, amount, neighbour):
    verb = "gain" if amount >= 0 else "lose"
    return f"{who} would {verb} {abs(amount)} happiness units by sitting next to {neighbour}."


TEST_INPUT = "".join(_render(*entry) + "\n" for entry in PREFERENCES)


def test_happiest():
    assert parse_input(TEST_INPUT).happiest() == 330


def test_happy_pair():
    diners = parse_input(TEST_INPUT)
    assert diners.happy_pair(0, 1) == 54 + 83
    assert diners.happy_pair(1, 0) == 54 + 83


def test_add_myself():
    diners = parse_input(TEST_INPUT)
    diners.add_myself()
    assert diners.names[-1] == "Me"
    assert diners.happy_pair(0, 4) == 0


def test_solver_part2_leaves_part1_intact():
    solver = Solver(TEST_INPUT)
    solver.part2()
    assert len(solver.diners.names) == 4
    assert solver.part1() == "330"


def test_empty():
    with pytest.raises(ValueError):
        Diners().happiest()


def test_bad_line():
    with pytest.raises(ValueError):
        parse_input("Alice likes Bob.\n")