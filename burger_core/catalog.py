"""
Catalog: the fixed sizes, stuffings and toppings an order can be built from.

Immutable reference data. Each variant is an Enum member (tagged identity);
price and calories ride along on a frozen CatalogEntry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class CatalogEntry:
    """Price and calories of one catalog variant. Immutable."""

    identifier: str
    price: float
    calories: float

    def __post_init__(self) -> None:
        if self.price < 0 or self.calories < 0:
            raise ValueError(f"{self.identifier}: price and calories must be non-negative")


class CatalogGroup(Enum):
    """
    Base for the catalog groups. Members are compared by identity, never by
    their price or calories.
    """

    @property
    def identifier(self) -> str:
        return self.value.identifier

    @property
    def price(self) -> float:
        return self.value.price

    @property
    def calories(self) -> float:
        return self.value.calories

    @classmethod
    def lookup(cls, identifier: str):
        """Member whose identifier matches, or None."""
        for member in cls:
            if member.identifier == identifier:
                return member
        return None


class Size(CatalogGroup):
    SMALL = CatalogEntry("small", 50, 20)
    LARGE = CatalogEntry("large", 100, 20)


class Stuffing(CatalogGroup):
    CHEESE = CatalogEntry("cheese", 10, 20)
    SALAD = CatalogEntry("salad", 20, 5)
    POTATO = CatalogEntry("potato", 15, 10)


class Topping(CatalogGroup):
    MAYO = CatalogEntry("mayo", 20, 5)
    SPICE = CatalogEntry("spice", 15, 0)


CATALOG_GROUPS: tuple[type[CatalogGroup], ...] = (Size, Stuffing, Topping)
