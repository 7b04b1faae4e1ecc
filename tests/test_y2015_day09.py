import pytest

from aocpuzzles.y2015.day09 import Solver, parse_input

TEST_INPUT = """\
London to Dublin = 464
London to Belfast = 518
Dublin to Belfast = 141
"""


def test_minmax():
    assert parse_input(TEST_INPUT).minmax_distance() == (605, 982)


def test_parse_names():
    graph = parse_input(TEST_INPUT)
    assert graph.names == ["London", "Dublin", "Belfast"]
    assert graph.distance[1, 0] == 464


def test_str():
    assert str(parse_input(TEST_INPUT)) == TEST_INPUT


def test_solver():
    solver = Solver(TEST_INPUT)
    assert solver.part1() == "605"
    assert solver.part2() == "982"


def test_bad_line():
    with pytest.raises(ValueError):
        parse_input("London to Dublin\n")