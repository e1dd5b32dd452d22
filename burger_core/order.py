"""
Order: one burger with a fixed size and stuffing and a mutable set of toppings.

Size and stuffing are validated at construction and cannot change afterwards.
Toppings are stored as bare identifiers and only resolved against the catalog
when read (get_toppings), so unknown identifiers surface in one place.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from burger_core import calculator
from burger_core.catalog import Size, Stuffing, Topping
from burger_core.errors import DuplicateToppingError, InvalidArgumentError, ToppingNotFoundError
from burger_core.validation import resolve_topping, validate_size, validate_stuffing

logger = logging.getLogger(__name__)


@dataclass
class OrderItem:
    """Per-order state. Mutable; owned by exactly one Order."""

    size: Size
    stuffing: Stuffing
    toppings: list[str] = field(default_factory=list)


def _topping_identifier(topping: Any) -> str:
    """Identifier to store for topping. Catalog membership is not checked here."""
    if isinstance(topping, Topping):
        return topping.identifier
    if not isinstance(topping, str):
        raise InvalidArgumentError(f"topping must be a string identifier, got {type(topping).__name__}")
    return topping


class Order:
    """
    A configured burger. Construction fails outright on a missing or invalid
    size/stuffing; there is no partially-built Order.
    """

    def __init__(self, size: Size, stuffing: Stuffing) -> None:
        self._item = OrderItem(size=validate_size(size), stuffing=validate_stuffing(stuffing))

    def __repr__(self) -> str:
        return (
            f"Order(size={self._item.size.name}, stuffing={self._item.stuffing.name}, "
            f"toppings={self._item.toppings!r})"
        )

    @property
    def size(self) -> Size:
        return self._item.size

    @property
    def stuffing(self) -> Stuffing:
        return self._item.stuffing

    def add_topping(self, topping: "str | Topping") -> None:
        """Append topping. Raises DuplicateToppingError if it is already on the order."""
        identifier = _topping_identifier(topping)
        if identifier in self._item.toppings:
            raise DuplicateToppingError(f"duplicate topping {identifier!r}")
        self._item.toppings.append(identifier)
        logger.debug("Added topping %s (now %s)", identifier, self._item.toppings)

    def remove_topping(self, topping: "str | Topping") -> None:
        """Remove topping. Raises ToppingNotFoundError if it was never added."""
        identifier = _topping_identifier(topping)
        if identifier not in self._item.toppings:
            raise ToppingNotFoundError(f"nothing to remove: {identifier!r} is not on the order")
        self._item.toppings.remove(identifier)
        logger.debug("Removed topping %s (now %s)", identifier, self._item.toppings)

    def set_toppings(self, toppings: Sequence[str]) -> None:
        """
        Replace all toppings at once. Rejects non-sequences and duplicates;
        on failure the current toppings are left untouched.
        """
        if isinstance(toppings, (str, bytes)) or not isinstance(toppings, Sequence):
            raise InvalidArgumentError(f"toppings must be a sequence, got {type(toppings).__name__}")
        identifiers = [_topping_identifier(t) for t in toppings]
        seen: set[str] = set()
        for identifier in identifiers:
            if identifier in seen:
                raise DuplicateToppingError(f"duplicate topping {identifier!r}")
            seen.add(identifier)
        self._item.toppings[:] = identifiers
        logger.debug("Replaced toppings with %s", identifiers)

    def get_topping_identifiers(self) -> list[str]:
        """Copy of the topping identifiers in insertion order."""
        return list(self._item.toppings)

    def get_toppings(self) -> list[Topping]:
        """Catalog toppings on this order. Raises InvalidToppingError for an unknown identifier."""
        return [resolve_topping(t) for t in self._item.toppings]

    def get_size(self) -> Size:
        return self._item.size

    def get_stuffing(self) -> Stuffing:
        return self._item.stuffing

    def is_large(self) -> bool:
        return self._item.size is Size.LARGE

    def calculate_price(self) -> float:
        return calculator.calculate_price(self)

    def calculate_calories(self) -> float:
        return calculator.calculate_calories(self)
