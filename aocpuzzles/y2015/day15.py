"""Best-scoring cookie recipe from a fixed number of teaspoons."""

from __future__ import annotations

from dataclasses import dataclass
from math import prod
from typing import Iterator, Optional, Sequence

_TEASPOONS = 100
_PROPERTIES = ("capacity", "durability", "flavor", "texture", "calories")


@dataclass(frozen=True)
class Ingredient:
    name: str
    capacity: int
    durability: int
    flavor: int
    texture: int
    calories: int


def parse_ingredient(line: str) -> Ingredient:
    """Parse ``Name: capacity N, durability N, flavor N, texture N, calories N``."""
    name, sep, rest = line.partition(": ")
    if not sep:
        raise ValueError(f"bad ingredient: {line!r}")
    props: dict[str, int] = {}
    for part in rest.split(", "):
        key, _, value = part.partition(" ")
        props[key] = int(value)
    try:
        return Ingredient(name, *(props[p] for p in _PROPERTIES))
    except KeyError as exc:
        raise ValueError(f"missing property {exc} in {line!r}") from None


def parse_input(text: str) -> list[Ingredient]:
    return [parse_ingredient(line) for line in text.splitlines()]


def recipes(count: int, total: int) -> Iterator[tuple[int, ...]]:
    """Yield every split of ``total`` teaspoons between ``count`` ingredients."""
    if count < 1:
        raise ValueError("a recipe needs at least one ingredient")
    if count == 1:
        yield (total,)
        return
    for first in range(total + 1):
        for rest in recipes(count - 1, total - first):
            yield (first, *rest)


def _totals(ingredients: Sequence[Ingredient], recipe: Sequence[int]) -> dict[str, int]:
    return {
        prop: sum(getattr(ing, prop) * amount for ing, amount in zip(ingredients, recipe))
        for prop in _PROPERTIES
    }


def cookie_score(ingredients: Sequence[Ingredient], recipe: Sequence[int]) -> int:
    """Product of the non-calorie property totals, each clamped at zero."""
    totals = _totals(ingredients, recipe)
    return prod(max(0, totals[p]) for p in _PROPERTIES if p != "calories")


def cookie_calories(ingredients: Sequence[Ingredient], recipe: Sequence[int]) -> int:
    return _totals(ingredients, recipe)["calories"]


def best_score(ingredients: Sequence[Ingredient], calories: Optional[int] = None) -> int:
    """Highest score over all recipes, optionally only those with exactly ``calories``."""
    best = 0
    for recipe in recipes(len(ingredients), _TEASPOONS):
        if calories is not None and cookie_calories(ingredients, recipe) != calories:
            continue
        best = max(best, cookie_score(ingredients, recipe))
    return best


class Solver:
    """Solves both parts for one puzzle input."""

    def __init__(self, text: str) -> None:
        self.ingredients = parse_input(text)

    def part1(self) -> str:
        return str(best_score(self.ingredients, None))

    def part2(self) -> str:
        return str(best_score(self.ingredients, 500))