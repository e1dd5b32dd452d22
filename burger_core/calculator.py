"""
Calculator: totals over size, stuffing and the current toppings.

Computed from live order state on every call; nothing is cached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from burger_core.catalog import CatalogGroup
    from burger_core.order import Order


def _components(order: "Order") -> list["CatalogGroup"]:
    return [order.get_size(), order.get_stuffing(), *order.get_toppings()]


def calculate_price(order: "Order") -> float:
    """Sum of size, stuffing and topping prices."""
    return sum(c.price for c in _components(order))


def calculate_calories(order: "Order") -> float:
    """Sum of size, stuffing and topping calories."""
    return sum(c.calories for c in _components(order))
