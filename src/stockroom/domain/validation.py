# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Field validation helpers shared by the stock record and the item variants.

Each helper returns the validated value unchanged or raises
InvalidArgumentError naming the offending field.
"""

from __future__ import annotations

import math
from typing import Any

from stockroom.errors import InvalidArgumentError


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    if not isinstance(value, int | float) or isinstance(value, bool):
        return False
    return not math.isnan(value)


def require_text(value: Any, field: str) -> str:
    """Require a string that is neither empty nor whitespace-only."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(
            f"{field} must be a non-empty string", field=field, value=value
        )
    return value


def require_non_negative_int(value: Any, field: str) -> int:
    if not _is_int(value) or value < 0:
        raise InvalidArgumentError(
            f"{field} must be a non-negative integer", field=field, value=value
        )
    return value


def require_non_negative_number(value: Any, field: str) -> float:
    if not _is_number(value) or value < 0:
        raise InvalidArgumentError(
            f"{field} must be a non-negative number", field=field, value=value
        )
    return float(value)


def require_positive_quantity(qty: Any) -> int:
    """Require a strictly positive integer quantity for receive/issue."""
    if not _is_int(qty) or qty <= 0:
        raise InvalidArgumentError("quantity must be positive", field="qty", value=qty)
    return qty


def require_percent(percent: Any, field: str = "percent") -> float:
    """Require a percentage in the closed range [0, 100]."""
    if not _is_number(percent) or not 0 <= percent <= 100:
        raise InvalidArgumentError(
            f"{field} must be between 0 and 100", field=field, value=percent
        )
    return float(percent)


def require_present(value: Any, field: str) -> Any:
    if value is None:
        raise InvalidArgumentError(f"{field} is required", field=field)
    return value
