import pytest

from aocpuzzles.y2016.day04 import Room, Solver, parse_room

ROOMS = [
    "aaaaa-bbb-z-y-x-123[abxyz]",
    "a-b-c-d-e-f-g-h-987[abcde]",
    "not-a-real-room-404[oarel]",
    "totally-real-room-200[decoy]",
]


@pytest.mark.parametrize(
    "line, name, sector, checksum, real",
    [
        (ROOMS[0], "aaaaa-bbb-z-y-x", 123, "abxyz", True),
        (ROOMS[1], "a-b-c-d-e-f-g-h", 987, "abcde", True),
        (ROOMS[2], "not-a-real-room", 404, "oarel", True),
        (ROOMS[3], "totally-real-room", 200, "decoy", False),
    ],
)
def test_rooms(line, name, sector, checksum, real):
    room = parse_room(line)
    assert room.encrypted_name == name
    assert room.sector_id == sector
    assert room.checksum == checksum
    assert room.is_real() is real


def test_decrypt_name():
    assert parse_room("qzmt-zixmtkozy-ivhz-343[xxxxx]").name() == "very encrypted name"


def test_invalid_name_character():
    with pytest.raises(ValueError):
        Room("ab_c", 1, "abc").name()


def test_parse_invalid():
    with pytest.raises(ValueError):
        parse_room("no-brackets-here")


def test_part1():
    assert Solver("\n".join(ROOMS)).part1() == "1514"


def test_part2():
    room = parse_room("northpole-object-storage-26[oetra]")
    assert room.calc_checksum() == "oetra"
    assert Solver("\n".join(ROOMS + ["northpole-object-storage-26[oetra]"])).part2() == "26"


def test_part2_missing_room():
    with pytest.raises(ValueError):
        Solver("\n".join(ROOMS)).part2()