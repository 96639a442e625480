# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
"""Tests for item capabilities."""

import pytest

from stockroom.domain import (
    PRICE_ADJUSTABLE,
    STOCK_TRACKABLE,
    PriceAdjustable,
    StockTrackable,
    as_price_adjustable,
    as_stock_trackable,
    capabilities,
)
from stockroom.errors import UnsupportedCapabilityError


def test_every_variant_tracks_stock(apple, phone, shirt):
    for item in (apple, phone, shirt):
        assert isinstance(item, StockTrackable)
        assert as_stock_trackable(item) is item


def test_only_electronic_adjusts_price(apple, phone, shirt):
    assert isinstance(phone, PriceAdjustable)
    assert not isinstance(apple, PriceAdjustable)
    assert not isinstance(shirt, PriceAdjustable)


def test_as_price_adjustable(phone):
    adjustable = as_price_adjustable(phone)
    adjustable.apply_discount(50)
    assert phone.unit_price == pytest.approx(100.0)


def test_as_price_adjustable_rejects_perishable(apple):
    with pytest.raises(UnsupportedCapabilityError) as exc_info:
        as_price_adjustable(apple)
    err = exc_info.value
    assert isinstance(err, TypeError)
    assert err.context["capability"] == "price_adjustable"
    assert err.context["sku"] == "P1"
    assert err.context["item_type"] == "Perishable"


def test_as_stock_trackable_rejects_other_objects():
    with pytest.raises(UnsupportedCapabilityError):
        as_stock_trackable("not an item")


def test_capabilities(apple, phone, shirt):
    assert capabilities(phone) == {STOCK_TRACKABLE, PRICE_ADJUSTABLE}
    assert capabilities(apple) == {STOCK_TRACKABLE}
    assert capabilities(shirt) == {STOCK_TRACKABLE}
    with pytest.raises(UnsupportedCapabilityError):
        capabilities(object())
