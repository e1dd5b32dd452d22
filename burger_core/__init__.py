"""
burger-core: a configurable burger order with derived price and calories.

No persistence, no I/O. Catalog variants are immutable; errors propagate to the caller.
"""

__version__ = "0.1.0"

from burger_core.catalog import CatalogEntry, Size, Stuffing, Topping
from burger_core.errors import (
    DuplicateToppingError,
    InvalidArgumentError,
    InvalidSizeError,
    InvalidStuffingError,
    InvalidToppingError,
    OrderError,
    ToppingNotFoundError,
)
from burger_core.order import Order, OrderItem
from burger_core.calculator import calculate_calories, calculate_price
from burger_core.validation import resolve_topping, validate_size, validate_stuffing

__all__ = [
    "CatalogEntry",
    "Size",
    "Stuffing",
    "Topping",
    "Order",
    "OrderItem",
    "OrderError",
    "InvalidSizeError",
    "InvalidStuffingError",
    "InvalidToppingError",
    "DuplicateToppingError",
    "ToppingNotFoundError",
    "InvalidArgumentError",
    "calculate_price",
    "calculate_calories",
    "validate_size",
    "validate_stuffing",
    "resolve_topping",
]
