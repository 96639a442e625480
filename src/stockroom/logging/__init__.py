# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom

"""
Structured logging for stockroom.
"""

from __future__ import annotations

from stockroom.logging.config import LoggingSettings
from stockroom.logging.level import LogLevel
from stockroom.logging.logger import (
    StockroomLogger,
    StructuredFormatter,
    get_logger,
    set_package_level,
)

__all__ = [
    "LogLevel",
    "LoggingSettings",
    "StockroomLogger",
    "StructuredFormatter",
    "get_logger",
    "set_package_level",
]
