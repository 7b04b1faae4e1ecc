"""Shop loadouts against a boss in a turn-based duel."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations

_PLAYER_HP = 100
_NO_WIN = 2**31 - 1


@dataclass(frozen=True)
class Boss:
    hit_points: int
    damage: int
    armor: int


@dataclass(frozen=True)
class Item:
    """Something for sale in the shop."""

    cost: int
    damage: int
    armor: int
    descr: str


WEAPONS = (
    Item(8, 4, 0, "Dagger"),
    Item(10, 5, 0, "Shortsword"),
    Item(25, 6, 0, "Warhammer"),
    Item(40, 7, 0, "Longsword"),
    Item(74, 8, 0, "Greataxe"),
)

ARMORS = (
    Item(13, 0, 1, "Leather"),
    Item(31, 0, 2, "Chainmail"),
    Item(53, 0, 3, "Splintmail"),
    Item(75, 0, 4, "Bandedmail"),
    Item(102, 0, 5, "Platemail"),
    Item(0, 0, 0, "No armor"),
)

RINGS = (
    Item(25, 1, 0, "Damage +1"),
    Item(50, 2, 0, "Damage +2"),
    Item(100, 3, 0, "Damage +3"),
    Item(20, 0, 1, "Defense +1"),
    Item(40, 0, 2, "Defense +2"),
    Item(80, 0, 3, "Defense +3"),
    Item(0, 0, 0, "No left ring"),
    Item(0, 0, 0, "No right ring"),
)


def calc_damage(damage: int, armor: int) -> int:
    """Damage dealt per hit: attack minus armor, but always at least 1."""
    return damage - armor if damage > armor else 1


def _rounds(hit_points: int, per_hit: int) -> int:
    return -(-hit_points // per_hit)


def fight(boss: Boss, player_damage: int, player_armor: int) -> bool:
    """Return True if the player, who strikes first, wins."""
    to_kill_boss = _rounds(boss.hit_points, calc_damage(player_damage, boss.armor))
    to_kill_player = _rounds(_PLAYER_HP, calc_damage(boss.damage, player_armor))
    return to_kill_boss <= to_kill_player


def solve(boss: Boss) -> tuple[int, int]:
    """Return (cheapest winning cost, most expensive losing cost)."""
    cheapest_win = _NO_WIN
    most_expensive_loss = 0
    for weapon in WEAPONS:
        for armor in ARMORS:
            for left, right in combinations(RINGS, 2):
                cost = weapon.cost + armor.cost + left.cost + right.cost
                if cheapest_win <= cost <= most_expensive_loss:
                    continue
                damage = weapon.damage + left.damage + right.damage
                defence = armor.armor + left.armor + right.armor
                won = fight(boss, damage, defence)
                if won and cost < cheapest_win:
                    cheapest_win = cost
                elif not won and cost > most_expensive_loss:
                    most_expensive_loss = cost
    return cheapest_win, most_expensive_loss


def parse_input(text: str) -> Boss:
    stats = {"Hit Points": 0, "Damage": 0, "Armor": 0}
    for line in text.splitlines():
        name, _, value = line.partition(": ")
        if name not in stats:
            raise ValueError(f"Unknown input: {line}")
        stats[name] = int(value)
    return Boss(stats["Hit Points"], stats["Damage"], stats["Armor"])


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.result = solve(parse_input(text))

    def part1(self) -> str:
        return str(self.result[0])

    def part2(self) -> str:
        return str(self.result[1])