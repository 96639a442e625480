"""Top-level pytest configuration for stockroom."""

import pytest

from stockroom.config import get_settings
from stockroom.domain import Clothing, Electronic, InventoryManager, Perishable


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test without STOCKROOM_* variables or a stray .env file."""
    import os

    for key in list(os.environ):
        if key.startswith("STOCKROOM_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def apple() -> Perishable:
    return Perishable("P1", "Apple", 0.5, 10)


@pytest.fixture
def phone() -> Electronic:
    return Electronic("E1", "Phone", 200.0, 12)


@pytest.fixture
def shirt() -> Clothing:
    return Clothing("C1", "Shirt", 20.0, "M", "Cotton")


@pytest.fixture
def stocked_manager(apple, phone, shirt) -> InventoryManager:
    """Manager holding the demo items after receiving 100/50/30 units."""
    apple.receive(100)
    phone.receive(50)
    shirt.receive(30)
    manager = InventoryManager()
    for item in (apple, phone, shirt):
        manager.add_item(item)
    return manager
