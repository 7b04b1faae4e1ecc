import pytest

from aocpuzzles.y2015.day19 import Replacement, Solver, parse_input, part1, part2


def test_parse_input():
    replacements, molecule = parse_input("H => HO\nH => OH\nO => HH\n\nHOH\n")
    assert len(replacements) == 3
    assert molecule == "HOH"
    assert replacements[0] == Replacement("H", "HO")
    assert replacements[1] == Replacement("H", "OH")
    assert replacements[2] == Replacement("O", "HH")


def test_part1():
    replacements, molecule = parse_input("H => HO\nH => OH\nO => HH\n\nHOH\n")
    assert part1(replacements, molecule) == 4

    replacements, molecule = parse_input("H => HO\nH => OH\nO => HH\n\nHOHOHO\n")
    assert part1(replacements, molecule) == 7


def test_part2():
    replacements, molecule = parse_input("e => H\ne => O\nH => HO\nH => OH\nO => HH\n\nHOH\n")
    assert part2(replacements, molecule) == 3

    replacements, molecule = parse_input(
        "e => H\ne => O\nH => HO\nH => OH\nO => HH\n\nHOHOHO\n"
    )
    assert part2(replacements, molecule) == 6


def test_solver():
    solver = Solver("e => H\ne => O\nH => HO\nH => OH\nO => HH\n\nHOH\n")
    assert solver.part1() == "4"
    assert solver.part2() == "3"


def test_part2_unreachable_raises():
    with pytest.raises(ValueError):
        part2([Replacement("e", "H")], "O")


def test_missing_molecule_raises():
    with pytest.raises(ValueError):
        parse_input("H => HO\n\n")


def test_bad_replacement_raises():
    with pytest.raises(ValueError):
        parse_input("H -> HO\n\nHOH\n")