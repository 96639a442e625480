# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
InventoryManager: an ordered, in-memory collection of inventory items.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, overload

from stockroom.domain.items import ITEM_TYPES, InventoryItem
from stockroom.domain.protocols import as_stock_trackable
from stockroom.domain.validation import require_present, require_text
from stockroom.errors import UnsupportedCapabilityError
from stockroom.logging import get_logger

logger = get_logger(__name__)


class InventoryManager:
    """Owns a list of items in insertion order.

    SKUs are not deduplicated; lookups return the first match.
    """

    def __init__(self) -> None:
        self._items: list[InventoryItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[InventoryItem]:
        return iter(self._items)

    @property
    def items(self) -> tuple[InventoryItem, ...]:
        return tuple(self._items)

    def add_item(self, item: InventoryItem) -> None:
        """Append an item.

        Raises:
            InvalidArgumentError: If item is None
            UnsupportedCapabilityError: If item is not an inventory item
        """
        require_present(item, "item")
        if not isinstance(item, ITEM_TYPES):
            raise UnsupportedCapabilityError(
                f"{type(item).__name__} is not an inventory item",
                capability="inventory_item",
                item_type=type(item).__name__,
            )
        self._items.append(item)
        logger.debug(
            "item added", sku=item.sku, category=item.category(), count=len(self._items)
        )

    def find_by_sku(self, sku: str) -> InventoryItem | None:
        """Return the first item whose SKU matches exactly, or None."""
        require_text(sku, "sku")
        return next((item for item in self._items if item.sku == sku), None)

    def total_value(self) -> float:
        return sum((item.value() for item in self._items), 0.0)

    def total_quantity_by_category(self, category: str) -> int:
        """Sum quantities of items whose category matches, ignoring case."""
        wanted = require_text(category, "category").casefold()
        return sum(
            item.quantity
            for item in self._items
            if item.category().casefold() == wanted
        )

    @overload
    def issue(self, target: str, qty: int) -> bool: ...

    @overload
    def issue(self, target: InventoryItem | None, qty: int) -> bool: ...

    def issue(self, target: Any, qty: int) -> bool:
        """Issue qty units from an item given by SKU or by reference.

        An unknown SKU returns False, the same as insufficient stock.

        Raises:
            InvalidArgumentError: If the SKU is blank, the item is None or
                qty is not positive
            UnsupportedCapabilityError: If the item does not track stock
        """
        if isinstance(target, str):
            item = self.find_by_sku(target)
            if item is None:
                logger.info("issue rejected: unknown sku", sku=target, qty=qty)
                return False
        else:
            item = require_present(target, "item")

        issued = as_stock_trackable(item).issue(qty)
        if not issued:
            logger.info(
                "issue rejected: insufficient stock",
                sku=item.sku,
                qty=qty,
                quantity=item.quantity,
            )
        return issued
