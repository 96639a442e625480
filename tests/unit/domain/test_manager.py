# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
"""Tests for InventoryManager."""

import pytest

from stockroom.domain import Electronic, InventoryManager, Perishable
from stockroom.errors import InvalidArgumentError, UnsupportedCapabilityError


def test_empty_manager():
    manager = InventoryManager()
    assert len(manager) == 0
    assert manager.total_value() == 0
    assert manager.total_quantity_by_category("Perishable") == 0
    assert manager.items == ()


def test_add_item_preserves_insertion_order(apple, phone, shirt):
    manager = InventoryManager()
    for item in (shirt, apple, phone):
        manager.add_item(item)
    assert list(manager) == [shirt, apple, phone]
    assert manager.items == (shirt, apple, phone)
    assert len(manager) == 3


def test_add_item_rejects_none():
    with pytest.raises(InvalidArgumentError, match="item is required"):
        InventoryManager().add_item(None)


def test_add_item_rejects_non_items():
    with pytest.raises(UnsupportedCapabilityError):
        InventoryManager().add_item("P1")


def test_duplicate_skus_are_kept_and_first_wins():
    manager = InventoryManager()
    first = Perishable("P1", "Apple", 0.5, 10)
    second = Perishable("P1", "Pear", 0.7, 5)
    manager.add_item(first)
    manager.add_item(second)
    assert len(manager) == 2
    assert manager.find_by_sku("P1") is first


def test_find_by_sku_is_exact_and_case_sensitive(stocked_manager, phone):
    assert stocked_manager.find_by_sku("E1") is phone
    assert stocked_manager.find_by_sku("e1") is None
    assert stocked_manager.find_by_sku("E1 ") is None
    assert stocked_manager.find_by_sku("X9") is None


@pytest.mark.parametrize("sku", ["", "  ", None])
def test_find_by_sku_rejects_blank(stocked_manager, sku):
    with pytest.raises(InvalidArgumentError):
        stocked_manager.find_by_sku(sku)


def test_total_value():
    manager = InventoryManager()
    apple = Perishable("P1", "Apple", 0.5, 10)
    phone = Electronic("E1", "Phone", 180.0, 12)
    apple.receive(40)
    phone.receive(50)
    manager.add_item(apple)
    manager.add_item(phone)
    assert manager.total_value() == pytest.approx(9020.0)


def test_total_value_tracks_price_changes(stocked_manager, phone):
    phone.apply_discount(10)
    assert stocked_manager.total_value() == pytest.approx(50.0 + 9000.0 + 600.0)


def test_total_quantity_by_category_ignores_case(stocked_manager):
    assert stocked_manager.total_quantity_by_category("Perishable") == 100
    assert stocked_manager.total_quantity_by_category("perishable") == 100
    assert stocked_manager.total_quantity_by_category("CLOTHING") == 30
    assert stocked_manager.total_quantity_by_category("Furniture") == 0


def test_total_quantity_sums_all_matching_items(stocked_manager):
    extra = Perishable("P2", "Pear", 0.7, 5)
    extra.receive(15)
    stocked_manager.add_item(extra)
    assert stocked_manager.total_quantity_by_category("Perishable") == 115


@pytest.mark.parametrize("category", ["", "   ", None])
def test_total_quantity_rejects_blank_category(stocked_manager, category):
    with pytest.raises(InvalidArgumentError):
        stocked_manager.total_quantity_by_category(category)


def test_issue_by_sku_sequence(stocked_manager, apple):
    assert stocked_manager.issue("P1", 60) is True
    assert apple.quantity == 40
    assert stocked_manager.issue("P1", 20) is True
    assert apple.quantity == 20
    assert stocked_manager.issue("P1", 21) is False
    assert apple.quantity == 20


def test_issue_unknown_sku_returns_false(stocked_manager):
    assert stocked_manager.issue("NOPE", 1) is False


def test_issue_blank_sku_raises(stocked_manager):
    with pytest.raises(InvalidArgumentError):
        stocked_manager.issue("  ", 1)


def test_issue_by_sku_propagates_invalid_quantity(stocked_manager, apple):
    with pytest.raises(InvalidArgumentError):
        stocked_manager.issue("P1", 0)
    assert apple.quantity == 100


def test_issue_by_reference(stocked_manager, shirt):
    assert stocked_manager.issue(shirt, 30) is True
    assert shirt.quantity == 0
    assert stocked_manager.issue(shirt, 1) is False


def test_issue_by_reference_works_for_items_not_in_manager():
    loose = Perishable("P9", "Plum", 0.3, 4)
    loose.receive(2)
    assert InventoryManager().issue(loose, 2) is True


def test_issue_none_item_raises(stocked_manager):
    with pytest.raises(InvalidArgumentError, match="item is required"):
        stocked_manager.issue(None, 1)


def test_issue_by_reference_propagates_invalid_quantity(stocked_manager, phone):
    with pytest.raises(InvalidArgumentError):
        stocked_manager.issue(phone, -1)


def test_issue_requires_stock_tracking(stocked_manager):
    with pytest.raises(UnsupportedCapabilityError):
        stocked_manager.issue(object(), 1)


def test_end_to_end_electronic_scenario():
    manager = InventoryManager()
    phone = Electronic("E1", "Phone", 200.0, 12)
    phone.receive(50)
    manager.add_item(phone)
    phone.apply_discount(10)
    assert phone.unit_price == pytest.approx(180.0)
    assert manager.total_value() == pytest.approx(9000.0)
