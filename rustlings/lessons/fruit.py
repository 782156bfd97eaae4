"""Fruit baskets kept as mappings from fruit to count."""

from __future__ import annotations

from collections.abc import MutableMapping
from enum import Enum


class Fruit(Enum):
    """Kinds of fruit that can go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket with three kinds of fruit, two of each."""
    return {"banana": 2, "apple": 2, "strawberry": 2}


def fill_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add two of every kind of fruit that is not yet in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 2)