"""
Tests for reporting: catalog and order DataFrames, printed report.
"""

import pytest

from burger_core import InvalidToppingError, Order, Size, Stuffing
from reporting import OrderTotals, catalog_frame, order_breakdown, print_report


def _order():
    order = Order(Size.SMALL, Stuffing.CHEESE)
    order.add_topping("mayo")
    order.add_topping("spice")
    return order


def test_catalog_frame():
    df = catalog_frame()
    assert list(df.columns) == ["group", "identifier", "price", "calories"]
    assert len(df) == 7
    assert df["group"].tolist().count("topping") == 2
    row = df[df["identifier"] == "large"].iloc[0]
    assert row["group"] == "size"
    assert row["price"] == 100


def test_order_breakdown_rows_and_sums():
    order = _order()
    df = order_breakdown(order)
    assert list(df.columns) == ["component", "identifier", "price", "calories"]
    assert df["component"].tolist() == ["size", "stuffing", "topping", "topping"]
    assert df["identifier"].tolist() == ["small", "cheese", "mayo", "spice"]
    assert df["price"].sum() == order.calculate_price() == 95
    assert df["calories"].sum() == order.calculate_calories() == 45


def test_order_breakdown_unknown_topping():
    order = Order(Size.SMALL, Stuffing.CHEESE)
    order.add_topping("ketchup")
    with pytest.raises(InvalidToppingError):
        order_breakdown(order)


def test_print_report(capsys):
    totals = print_report(_order(), title="Test order")
    assert totals == OrderTotals(price=95.0, calories=45.0, toppings=2)
    out = capsys.readouterr().out
    assert "--- Test order ---" in out
    assert "Price:     95.00" in out
    assert "Toppings:  2" in out
