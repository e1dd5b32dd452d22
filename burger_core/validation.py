"""
Validator: map candidate options back to catalog variants.

Matching is by membership in the variant's Enum group, never by comparing
price or calories.
"""

from __future__ import annotations

from typing import Any

from burger_core.catalog import Size, Stuffing, Topping
from burger_core.errors import InvalidSizeError, InvalidStuffingError, InvalidToppingError


def validate_size(candidate: Any) -> Size:
    """Return candidate if it is a catalog Size; raise InvalidSizeError otherwise."""
    if candidate is None:
        raise InvalidSizeError("no size given")
    if not isinstance(candidate, Size):
        raise InvalidSizeError(f"invalid size {candidate!r}")
    return candidate


def validate_stuffing(candidate: Any) -> Stuffing:
    """Return candidate if it is a catalog Stuffing; raise InvalidStuffingError otherwise."""
    if candidate is None:
        raise InvalidStuffingError("no stuffing given")
    if not isinstance(candidate, Stuffing):
        raise InvalidStuffingError(f"invalid stuffing {candidate!r}")
    return candidate


def resolve_topping(identifier: "str | Topping") -> Topping:
    """
    Resolve a topping identifier (e.g. "mayo") to its catalog Topping.
    A Topping member is returned unchanged.
    """
    if isinstance(identifier, Topping):
        return identifier
    topping = Topping.lookup(identifier) if isinstance(identifier, str) else None
    if topping is None:
        raise InvalidToppingError(f"incorrect topping value {identifier!r}")
    return topping
