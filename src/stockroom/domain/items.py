# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Inventory item variants.

Every variant embeds a StockRecord holding its SKU, name, unit price and
quantity on hand, and adds the fields of its category:

    apple = Perishable("P1", "Apple", 0.5, 10)
    apple.receive(100)
    apple.issue(60)      # True, 40 left

    phone = Electronic("E1", "Phone", 200.0, 12)
    phone.apply_discount(10)   # unit price 180.0

Only Electronic items are price-adjustable.
"""

from __future__ import annotations

from typing import Any, ClassVar, Final, TypeAlias

from pydantic import ValidationInfo, field_validator

from stockroom.domain.model import DomainModel
from stockroom.domain.stock import StockRecord
from stockroom.domain.validation import (
    require_non_negative_int,
    require_percent,
    require_text,
)
from stockroom.errors import UnsupportedCapabilityError
from stockroom.logging import get_logger

logger = get_logger(__name__)

STOCK_TRACKABLE: Final = "stock_trackable"
PRICE_ADJUSTABLE: Final = "price_adjustable"


class StockedItem(DomainModel):
    """Fields and behaviour common to every item variant."""

    CATEGORY: ClassVar[str]
    DETAIL_FIELDS: ClassVar[tuple[str, ...]] = ()

    stock: StockRecord

    @property
    def sku(self) -> str:
        return self.stock.sku

    @property
    def name(self) -> str:
        return self.stock.name

    @property
    def quantity(self) -> int:
        return self.stock.quantity

    @property
    def unit_price(self) -> float:
        return self.stock.unit_price

    def value(self) -> float:
        """Quantity on hand times the current unit price."""
        return self.stock.value

    def category(self) -> str:
        return self.CATEGORY

    def receive(self, qty: int) -> None:
        """Add stock. Raises InvalidArgumentError unless qty is positive."""
        self.stock.receive(qty)
        logger.debug("stock received", sku=self.sku, qty=qty, quantity=self.quantity)

    def issue(self, qty: int) -> bool:
        """Remove stock if enough is on hand.

        Raises InvalidArgumentError unless qty is positive. Returns False and
        leaves the quantity unchanged when fewer than qty units are on hand.
        """
        issued = self.stock.issue(qty)
        logger.debug(
            "stock issue",
            sku=self.sku,
            qty=qty,
            issued=issued,
            quantity=self.quantity,
        )
        return issued

    def details(self) -> dict[str, Any]:
        """Variant specific fields, in display order."""
        return {field: getattr(self, field) for field in self.DETAIL_FIELDS}

    def describe(self, separator: str = "/") -> str:
        parts = [
            self.sku,
            self.name,
            self.category(),
            f"qty={self.quantity}",
            f"unit_price={self.unit_price}",
            f"value={self.value()}",
        ]
        parts.extend(f"{key}={value}" for key, value in self.details().items())
        return separator.join(parts)

    def __str__(self) -> str:
        return self.describe()


class Perishable(StockedItem):
    CATEGORY: ClassVar[str] = "Perishable"
    DETAIL_FIELDS: ClassVar[tuple[str, ...]] = ("shelf_life_days",)

    shelf_life_days: int

    def __init__(
        self, sku: str, name: str, unit_price: float, shelf_life_days: int
    ) -> None:
        super().__init__(
            stock=StockRecord(sku=sku, name=name, unit_price=unit_price),
            shelf_life_days=shelf_life_days,
        )

    @field_validator("shelf_life_days", mode="before")
    @classmethod
    def _validate_shelf_life(cls, v: Any) -> int:
        return require_non_negative_int(v, "shelf_life_days")


class Electronic(StockedItem):
    CATEGORY: ClassVar[str] = "Electronic"
    DETAIL_FIELDS: ClassVar[tuple[str, ...]] = ("warranty_months",)

    warranty_months: int

    def __init__(
        self, sku: str, name: str, unit_price: float, warranty_months: int
    ) -> None:
        super().__init__(
            stock=StockRecord(sku=sku, name=name, unit_price=unit_price),
            warranty_months=warranty_months,
        )

    @field_validator("warranty_months", mode="before")
    @classmethod
    def _validate_warranty(cls, v: Any) -> int:
        return require_non_negative_int(v, "warranty_months")

    def apply_discount(self, percent: float) -> None:
        """Lower the unit price by percent (0 to 100). Repeated calls compound."""
        percent = require_percent(percent)
        price = self.stock.scale_price(1 - percent / 100)
        logger.debug(
            "discount applied", sku=self.sku, percent=percent, unit_price=price
        )

    def apply_surcharge(self, percent: float) -> None:
        """Raise the unit price by percent (0 to 100). Repeated calls compound."""
        percent = require_percent(percent)
        price = self.stock.scale_price(1 + percent / 100)
        logger.debug(
            "surcharge applied", sku=self.sku, percent=percent, unit_price=price
        )


class Clothing(StockedItem):
    CATEGORY: ClassVar[str] = "Clothing"
    DETAIL_FIELDS: ClassVar[tuple[str, ...]] = ("size", "material")

    size: str
    material: str

    def __init__(
        self, sku: str, name: str, unit_price: float, size: str, material: str
    ) -> None:
        super().__init__(
            stock=StockRecord(sku=sku, name=name, unit_price=unit_price),
            size=size,
            material=material,
        )

    @field_validator("size", "material", mode="before")
    @classmethod
    def _validate_text(cls, v: Any, info: ValidationInfo) -> str:
        return require_text(v, info.field_name)


InventoryItem: TypeAlias = Perishable | Electronic | Clothing

ITEM_TYPES: Final = (Perishable, Electronic, Clothing)


def capabilities(item: InventoryItem) -> frozenset[str]:
    """Return the names of the capabilities the item's variant supports."""
    match item:
        case Electronic():
            return frozenset({STOCK_TRACKABLE, PRICE_ADJUSTABLE})
        case Perishable() | Clothing():
            return frozenset({STOCK_TRACKABLE})
        case _:
            raise UnsupportedCapabilityError(
                f"{type(item).__name__} is not an inventory item",
                capability="inventory_item",
                item_type=type(item).__name__,
            )
