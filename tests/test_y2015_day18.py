import pytest

from aocpuzzles.y2015.day18 import Grid, parse_input

TEST_INPUT = ".#.#.#\n...##.\n#....#\n..#...\n#.#..#\n####.."


def test_part1_steps():
    grid = parse_input(TEST_INPUT)
    assert grid.count() == 15
    expected = [
        "..##..\n..##.#\n...##.\n......\n#.....\n#.##..\n",
        "..###.\n......\n..###.\n......\n.#....\n.#....\n",
        "...#..\n......\n...#..\n..##..\n......\n......\n",
        "......\n......\n..##..\n..##..\n......\n......\n",
    ]
    for e in expected:
        grid = grid.step(1)
        assert str(grid) == e
    assert grid.count() == 4


def test_part2_steps():
    grid = parse_input(TEST_INPUT)
    grid.break_corners()
    assert grid.count() == 17
    expected = [
        "#.##.#\n####.#\n...##.\n......\n#...#.\n#.####\n",
        "#..#.#\n#....#\n.#.##.\n...##.\n.#..##\n##.###\n",
        "#...##\n####.#\n..##.#\n......\n##....\n####.#\n",
        "#.####\n#....#\n...#..\n.##...\n#.....\n#.#..#\n",
        "##.###\n.##..#\n.##...\n.##...\n#.#...\n##...#\n",
    ]
    for e in expected:
        grid = grid.step(1)
        assert str(grid) == e
    assert grid.count() == 17


def test_multi_step_equals_repeated_single_steps():
    grid = parse_input(TEST_INPUT)
    assert str(grid.step(4)) == str(grid.step(1).step(1).step(1).step(1))


def test_str_round_trip():
    grid = parse_input(TEST_INPUT)
    assert str(grid) == TEST_INPUT + "\n"


def test_turn_on_off_and_neighbours():
    grid = Grid(3)
    grid.turn_on(0, 0)
    grid.turn_on(2, 2)
    assert grid.count_neighbours(1, 1) == 2
    grid.turn_off(0, 0)
    assert grid.count_neighbours(1, 1) == 1
    assert grid.count() == 1


def test_step_count_must_be_positive():
    with pytest.raises(ValueError):
        parse_input(TEST_INPUT).step(0)


def test_bad_char():
    with pytest.raises(ValueError):
        parse_input("#.\n.x\n")