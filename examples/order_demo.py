"""
Order demo: build a small cheese burger, change toppings, print totals.

Then tries the invalid cases (missing arguments, a topping passed as size,
a duplicate topping) and reports each error the core raises.
"""

from __future__ import annotations

import logging

from burger_core import Order, OrderError, Size, Stuffing, Topping
from reporting import catalog_frame, print_report

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("--- Catalog ---")
    print(catalog_frame().to_string(index=False))

    print("\n--- Small burger with cheese ---")
    burger = Order(Size.SMALL, Stuffing.CHEESE)
    burger.add_topping("mayo")
    print(f"Calories: {burger.calculate_calories()}")
    print(f"Price: {burger.calculate_price()}")

    # Changed my mind: more topping
    burger.add_topping("spice")
    print(f"Price with sauce: {burger.calculate_price()}")
    print(f"Is burger large: {burger.is_large()}")

    burger.remove_topping("spice")
    print(f"Have {len(burger.get_toppings())} toppings")
    print()
    print_report(burger, title="Small cheese burger")

    print("\n--- Invalid orders ---")
    try:
        Order(None, None)
    except OrderError as e:
        logger.error("%s: %s", type(e).__name__, e)

    try:
        Order(Topping.SPICE, Topping.SPICE)
    except OrderError as e:
        logger.error("%s: %s", type(e).__name__, e)

    other = Order(Size.SMALL, Stuffing.CHEESE)
    other.add_topping(Topping.MAYO)
    try:
        other.add_topping(Topping.MAYO)
    except OrderError as e:
        logger.error("%s: %s", type(e).__name__, e)


if __name__ == "__main__":
    main()
