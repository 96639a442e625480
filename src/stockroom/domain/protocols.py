# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Capability protocols for inventory items.

Capabilities are structural: an item supports a capability when it defines the
protocol's methods. Static type checkers use the protocols directly; runtime
callers go through ``as_stock_trackable`` and ``as_price_adjustable``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from stockroom.errors import UnsupportedCapabilityError


@runtime_checkable
class StockTrackable(Protocol):
    """Items whose quantity can be received and issued."""

    def receive(self, qty: int) -> None: ...

    def issue(self, qty: int) -> bool: ...


@runtime_checkable
class PriceAdjustable(Protocol):
    """Items whose unit price can be discounted or surcharged by a percentage."""

    def apply_discount(self, percent: float) -> None: ...

    def apply_surcharge(self, percent: float) -> None: ...


def _describe(item: Any) -> dict[str, Any]:
    return {"item_type": type(item).__name__, "sku": getattr(item, "sku", None)}


def as_stock_trackable(item: Any) -> StockTrackable:
    """Return item typed as StockTrackable or raise UnsupportedCapabilityError."""
    if not isinstance(item, StockTrackable):
        raise UnsupportedCapabilityError(
            f"{type(item).__name__} does not track stock",
            capability="stock_trackable",
            **_describe(item),
        )
    return item


def as_price_adjustable(item: Any) -> PriceAdjustable:
    """Return item typed as PriceAdjustable or raise UnsupportedCapabilityError."""
    if not isinstance(item, PriceAdjustable):
        raise UnsupportedCapabilityError(
            f"{type(item).__name__} does not support price adjustment",
            capability="price_adjustable",
            **_describe(item),
        )
    return item
