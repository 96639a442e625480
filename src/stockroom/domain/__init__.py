# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Inventory domain model: stock records, item variants and the manager.
"""

from stockroom.domain.items import (
    ITEM_TYPES,
    PRICE_ADJUSTABLE,
    STOCK_TRACKABLE,
    Clothing,
    Electronic,
    InventoryItem,
    Perishable,
    StockedItem,
    capabilities,
)
from stockroom.domain.manager import InventoryManager
from stockroom.domain.protocols import (
    PriceAdjustable,
    StockTrackable,
    as_price_adjustable,
    as_stock_trackable,
)
from stockroom.domain.stock import StockRecord

__all__ = [
    "ITEM_TYPES",
    "PRICE_ADJUSTABLE",
    "STOCK_TRACKABLE",
    "Clothing",
    "Electronic",
    "InventoryItem",
    "InventoryManager",
    "Perishable",
    "PriceAdjustable",
    "StockRecord",
    "StockTrackable",
    "StockedItem",
    "as_price_adjustable",
    "as_stock_trackable",
    "capabilities",
]
