"""Wizard duel: cheapest mana spend that defeats the boss."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, replace
from enum import Enum
from itertools import count
from typing import Optional


class Spell(Enum):
    MAGIC_MISSILE = "Magic Missile"
    DRAIN = "Drain"
    SHIELD = "Shield"
    POISON = "Poison"
    RECHARGE = "Recharge"

    def cost(self) -> int:
        return _COSTS[self]


_COSTS = {
    Spell.MAGIC_MISSILE: 53,
    Spell.DRAIN: 73,
    Spell.SHIELD: 113,
    Spell.POISON: 173,
    Spell.RECHARGE: 229,
}


@dataclass(frozen=True)
class GameState:
    player_hp: int
    player_mana: int
    boss_hp: int
    boss_damage: int
    spent_mana: int = 0
    shield_timer: int = 0
    poison_timer: int = 0
    recharge_timer: int = 0
    hard_mode: bool = False

    def hard(self) -> GameState:
        """Return a copy where the player loses 1 hp at the start of each turn."""
        return replace(self, hard_mode=True)

    def valid_spells(self) -> list[Spell]:
        timers = {
            Spell.SHIELD: self.shield_timer,
            Spell.POISON: self.poison_timer,
            Spell.RECHARGE: self.recharge_timer,
        }
        return [
            spell
            for spell in Spell
            if self.player_mana >= spell.cost() and timers.get(spell, 0) <= 1
        ]

    def _with_effects(self) -> GameState:
        state = self
        if state.shield_timer > 0:
            state = replace(state, shield_timer=state.shield_timer - 1)
        if state.poison_timer > 0:
            state = replace(state, boss_hp=state.boss_hp - 3, poison_timer=state.poison_timer - 1)
        if state.recharge_timer > 0:
            state = replace(
                state,
                player_mana=state.player_mana + 101,
                recharge_timer=state.recharge_timer - 1,
            )
        return state

    def player_turn(self, spell: Spell) -> GameState:
        state = self
        if state.hard_mode:
            state = replace(state, player_hp=state.player_hp - 1)
            if state.player_hp <= 0:
                return state
        state = state._with_effects()
        if state.boss_hp <= 0:
            return state
        mana = state.player_mana - spell.cost()
        if mana < 0:
            raise ValueError("Player has negative mana!")
        state = replace(state, player_mana=mana, spent_mana=state.spent_mana + spell.cost())
        if spell is Spell.MAGIC_MISSILE:
            return replace(state, boss_hp=state.boss_hp - 4)
        if spell is Spell.DRAIN:
            return replace(state, boss_hp=state.boss_hp - 2, player_hp=state.player_hp + 2)
        if spell is Spell.SHIELD:
            return replace(state, shield_timer=6)
        if spell is Spell.POISON:
            return replace(state, poison_timer=6)
        return replace(state, recharge_timer=5)

    def player_armor(self) -> int:
        return 7 if self.shield_timer > 0 else 0

    def boss_turn(self) -> GameState:
        state = self._with_effects()
        if state.boss_hp > 0:
            damage = max(1, self.boss_damage - self.player_armor())
            state = replace(state, player_hp=state.player_hp - damage)
        return state


def find_cheapest_mana_win(initial_state: GameState) -> Optional[int]:
    """Search states by mana spent; return the spend of the first win found."""
    tie = count()
    frontier = [(initial_state.spent_mana, next(tie), initial_state)]
    while frontier:
        _, _, state = heapq.heappop(frontier)
        if state.boss_hp <= 0:
            raise AssertionError("should never pop a state where boss_hp <= 0")
        for spell in state.valid_spells():
            after = state.player_turn(spell)
            if after.player_hp <= 0:
                continue
            if after.boss_hp <= 0:
                return after.spent_mana
            after = after.boss_turn()
            if after.boss_hp <= 0:
                return after.spent_mana
            if after.player_hp <= 0:
                continue
            heapq.heappush(frontier, (after.spent_mana, next(tie), after))
    return None


def parse_input(text: str) -> GameState:
    boss_hp = 0
    boss_damage = 0
    for line in text.splitlines():
        stat, sep, value = line.partition(": ")
        if not sep:
            raise ValueError(f"bad line: {line!r}")
        if stat == "Hit Points":
            boss_hp = int(value)
        elif stat == "Damage":
            boss_damage = int(value)
        else:
            raise ValueError(f"Unknown stat: {stat}")
    return GameState(50, 500, boss_hp, boss_damage)


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.state = parse_input(text)

    def part1(self) -> str:
        return str(_require(find_cheapest_mana_win(self.state)))

    def part2(self) -> str:
        return str(_require(find_cheapest_mana_win(self.state.hard())))


def _require(result: Optional[int]) -> int:
    if result is None:
        raise ValueError("the boss cannot be beaten")
    return result