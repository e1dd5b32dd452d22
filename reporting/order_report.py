"""
Order report: print a summary of an order and its totals.
"""

from __future__ import annotations

from dataclasses import dataclass

from burger_core.order import Order
from reporting.frames import order_breakdown


@dataclass(frozen=True)
class OrderTotals:
    """Totals of one order at the time the report was printed."""

    price: float
    calories: float
    toppings: int


def print_report(order: Order, *, title: str = "Order") -> OrderTotals:
    """
    Print the component breakdown and totals of an order.

    Parameters
    ----------
    order : Order
        The order to summarise.
    title : str
        Heading printed above the table (default "Order").

    Returns
    -------
    OrderTotals
        Price, calories and topping count (e.g. for programmatic use).
    """
    df = order_breakdown(order)
    totals = OrderTotals(
        price=float(df["price"].sum()),
        calories=float(df["calories"].sum()),
        toppings=int((df["component"] == "topping").sum()),
    )
    print(f"--- {title} ---")
    print(df.to_string(index=False))
    print(f"Price:     {totals.price:,.2f}")
    print(f"Calories:  {totals.calories:,.0f}")
    print(f"Toppings:  {totals.toppings}")
    print("-" * (len(title) + 8))
    return totals
