import pytest

from aocpuzzles.y2016.day07 import (
    Solver,
    find_abas,
    has_abba,
    has_bab,
    parse_address,
)


@pytest.mark.parametrize(
    "address, expected",
    [
        ("abba[mnop]qrst", True),
        ("abcd[bddb]xyyx", False),
        ("aaaa[qwer]tyui", False),
        ("ioxxoj[asdfgh]zxcvbn", True),
    ],
)
def test_tls(address, expected):
    assert parse_address(address).supports_tls() is expected


@pytest.mark.parametrize(
    "address, expected",
    [
        ("aba[bab]xyz", True),
        ("xyx[xyx]xyx", False),
        ("aaa[kek]eke", True),
        ("zazbz[bzb]cdb", True),
    ],
)
def test_ssl(address, expected):
    assert parse_address(address).supports_ssl() is expected


def test_parse_address_parts():
    ip = parse_address("ab[cd]ef[gh]ij")
    assert ip.supernets == ("ab", "ef", "ij")
    assert ip.hypernets == ("cd", "gh")


def test_parse_unclosed_bracket():
    with pytest.raises(ValueError):
        parse_address("ab[cd")


def test_helpers():
    assert has_abba("xabba")
    assert not has_abba("ab")
    assert find_abas("zazbz") == [("z", "a"), ("z", "b")]
    assert has_bab("bzb", "z", "b")
    assert not has_bab("bzb", "b", "z")


def test_solver():
    solver = Solver("abba[mnop]qrst\naba[bab]xyz\nxyx[xyx]xyx\n")
    assert solver.part1() == "1"
    assert solver.part2() == "1"