# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Stock record shared by every inventory item.

A StockRecord holds the identity, price and quantity on hand of one item and
owns the rules for changing quantity and price. Item variants embed one.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from stockroom.domain.model import DomainModel
from stockroom.domain.validation import (
    require_non_negative_int,
    require_non_negative_number,
    require_positive_quantity,
    require_text,
)


class StockRecord(DomainModel):
    sku: str = Field(frozen=True)
    name: str
    unit_price: float
    quantity: int = 0

    @field_validator("sku", "name", mode="before")
    @classmethod
    def _validate_text(cls, v: Any, info: ValidationInfo) -> str:
        return require_text(v, info.field_name)

    @field_validator("unit_price", mode="before")
    @classmethod
    def _validate_unit_price(cls, v: Any) -> float:
        return require_non_negative_number(v, "unit_price")

    @field_validator("quantity", mode="before")
    @classmethod
    def _validate_quantity(cls, v: Any) -> int:
        return require_non_negative_int(v, "quantity")

    @property
    def value(self) -> float:
        """Quantity on hand times unit price."""
        return self.quantity * self.unit_price

    def receive(self, qty: int) -> int:
        """Add qty to the quantity on hand and return the new quantity."""
        qty = require_positive_quantity(qty)
        self.quantity = self.quantity + qty
        return self.quantity

    def issue(self, qty: int) -> bool:
        """Remove qty if enough is on hand.

        Returns False, leaving the quantity unchanged, when stock is short.
        """
        qty = require_positive_quantity(qty)
        if self.quantity < qty:
            return False
        self.quantity = self.quantity - qty
        return True

    def scale_price(self, factor: float) -> float:
        """Multiply the unit price by factor and return the new price."""
        self.unit_price = require_non_negative_number(
            self.unit_price * factor, "unit_price"
        )
        return self.unit_price
