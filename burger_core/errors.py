"""
Order errors.

Raised where a rule is violated and propagated to the caller; the core
never catches or logs them itself.
"""

from __future__ import annotations


class OrderError(Exception):
    """Base class for every error raised while building an order."""


class InvalidSizeError(OrderError):
    """Size is missing or not one of the catalog sizes."""


class InvalidStuffingError(OrderError):
    """Stuffing is missing or not one of the catalog stuffings."""


class InvalidToppingError(OrderError):
    """A topping identifier names no catalog topping."""


class DuplicateToppingError(OrderError):
    """The topping is already on the order."""


class ToppingNotFoundError(OrderError):
    """The topping to remove was never added."""


class InvalidArgumentError(OrderError, TypeError):
    """An argument has the wrong type (e.g. a non-sequence of toppings)."""
