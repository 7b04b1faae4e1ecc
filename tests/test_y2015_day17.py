import pytest

from aocpuzzles.y2015.day17 import Solver, Stats, combinations, parse_input


def test_example():
    result = combinations(parse_input("20\n15\n10\n5\n5"), 25)
    assert result.total_combinations() == 4
    assert result.min_containers() == 2
    assert result.min_combinations() == 3


def test_empty_stats():
    stats = Stats()
    assert stats.total_combinations() == 0
    assert stats.min_containers() == 0
    assert stats.min_combinations() == 0


def test_no_combination_fits():
    result = combinations([20, 15], 150)
    assert result.total_combinations() == 0
    assert result.min_combinations() == 0


def test_solver():
    solver = Solver("100\n50\n150\n")
    assert solver.part1() == "2"
    assert solver.part2() == "1"


def test_parse_rejects_non_numbers():
    with pytest.raises(ValueError):
        parse_input("20\nabc\n")