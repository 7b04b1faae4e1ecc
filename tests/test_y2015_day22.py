import pytest

from aocpuzzles.y2015.day22 import GameState, Solver, Spell, find_cheapest_mana_win, parse_input


def test_examples():
    assert find_cheapest_mana_win(GameState(10, 250, 13, 8)) == 226
    assert find_cheapest_mana_win(GameState(10, 250, 14, 8)) == 641


@pytest.mark.parametrize(
    ("spell", "expected"),
    [
        (Spell.MAGIC_MISSILE, 53),
        (Spell.DRAIN, 73),
        (Spell.SHIELD, 113),
        (Spell.POISON, 173),
        (Spell.RECHARGE, 229),
    ],
)
def test_spell_costs(spell, expected):
    assert spell.cost() == expected


def test_valid_spells_limited_by_mana():
    state = GameState(10, 100, 13, 8)
    assert state.valid_spells() == [Spell.MAGIC_MISSILE, Spell.DRAIN]


def test_valid_spells_excludes_running_effects():
    state = GameState(10, 500, 13, 8, shield_timer=3, poison_timer=1)
    spells = state.valid_spells()
    assert Spell.SHIELD not in spells
    assert Spell.POISON in spells


def test_hard_copy():
    state = GameState(10, 250, 13, 8)
    hard = state.hard()
    assert hard.hard_mode is True
    assert state.hard_mode is False


def test_hard_mode_can_kill_player_before_casting():
    state = GameState(1, 250, 13, 8).hard()
    after = state.player_turn(Spell.MAGIC_MISSILE)
    assert after.player_hp == 0
    assert after.spent_mana == 0


def test_player_turn_spends_mana():
    after = GameState(10, 250, 13, 8).player_turn(Spell.MAGIC_MISSILE)
    assert after.player_mana == 250 - 53
    assert after.spent_mana == 53
    assert after.boss_hp == 9


def test_negative_mana_raises():
    with pytest.raises(ValueError):
        GameState(10, 10, 13, 8).player_turn(Spell.RECHARGE)


def test_shield_reduces_boss_damage():
    state = GameState(10, 250, 13, 8, shield_timer=2)
    assert state.player_armor() == 7
    assert state.boss_turn().player_hp == 9


def test_no_win_possible():
    assert find_cheapest_mana_win(GameState(1, 0, 13, 8)) is None


def test_parse_input():
    state = parse_input("Hit Points: 13\nDamage: 8\n")
    assert state == GameState(50, 500, 13, 8)


def test_parse_unknown_stat():
    with pytest.raises(ValueError):
        parse_input("Armor: 3\n")


def test_solver_part1_matches_search():
    solver = Solver("Hit Points: 13\nDamage: 8\n")
    assert solver.part1() == str(find_cheapest_mana_win(GameState(50, 500, 13, 8)))