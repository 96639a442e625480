# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
stockroom: an in-memory inventory of perishable, electronic and clothing items.
"""

from stockroom.domain import (
    Clothing,
    Electronic,
    InventoryItem,
    InventoryManager,
    Perishable,
    PriceAdjustable,
    StockRecord,
    StockTrackable,
    as_price_adjustable,
    as_stock_trackable,
    capabilities,
)
from stockroom.errors import (
    ConfigError,
    InvalidArgumentError,
    StockroomError,
    UnsupportedCapabilityError,
)

__version__ = "0.1.0"

__all__ = [
    "Clothing",
    "ConfigError",
    "Electronic",
    "InvalidArgumentError",
    "InventoryItem",
    "InventoryManager",
    "Perishable",
    "PriceAdjustable",
    "StockRecord",
    "StockTrackable",
    "StockroomError",
    "UnsupportedCapabilityError",
    "__version__",
    "as_price_adjustable",
    "as_stock_trackable",
    "capabilities",
]
