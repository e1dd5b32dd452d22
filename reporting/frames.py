"""
DataFrame views of the catalog and of an order's components.
"""

from __future__ import annotations

import pandas as pd

from burger_core.catalog import CATALOG_GROUPS
from burger_core.order import Order

CATALOG_COLUMNS = ["group", "identifier", "price", "calories"]
BREAKDOWN_COLUMNS = ["component", "identifier", "price", "calories"]


def catalog_frame() -> pd.DataFrame:
    """One row per catalog variant, grouped as sizes, stuffings, toppings."""
    rows = [
        {"group": group.__name__.lower(), "identifier": m.identifier, "price": m.price, "calories": m.calories}
        for group in CATALOG_GROUPS
        for m in group
    ]
    return pd.DataFrame(rows, columns=CATALOG_COLUMNS)


def order_breakdown(order: Order) -> pd.DataFrame:
    """
    One row per component of the order: size, stuffing, then each topping
    in insertion order. Column sums equal the calculator totals.

    Raises InvalidToppingError if a stored topping no longer resolves.
    """
    size = order.get_size()
    stuffing = order.get_stuffing()
    rows = [
        {"component": "size", "identifier": size.identifier, "price": size.price, "calories": size.calories},
        {"component": "stuffing", "identifier": stuffing.identifier, "price": stuffing.price, "calories": stuffing.calories},
    ]
    rows += [
        {"component": "topping", "identifier": t.identifier, "price": t.price, "calories": t.calories}
        for t in order.get_toppings()
    ]
    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)
