"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from stockledger.config import reset_settings
from stockledger.core.entities.inventory import Batch


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate every test from the developer's .env and cached settings."""
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def widget_batches() -> list[Batch]:
    """Two Widget batches: 5 @ 2.00 bought in January, 3 @ 2.50 in February."""
    return [
        Batch(
            id="b1",
            name="Widget",
            quantity=Decimal("5"),
            price=Decimal("2.00"),
            purchase_date=date(2024, 1, 1),
        ),
        Batch(
            id="b2",
            name="Widget",
            quantity=Decimal("3"),
            price=Decimal("2.50"),
            purchase_date=date(2024, 2, 1),
        ),
    ]


@pytest.fixture
def mixed_batches(widget_batches) -> list[Batch]:
    """Widget batches plus a Gadget batch carrying a custom value."""
    return widget_batches + [
        Batch(
            id="g1",
            name="Gadget",
            quantity=Decimal("10"),
            price=Decimal("1.25"),
            purchase_date=date(2024, 3, 1),
            custom_values={"supplier": "Acme"},
        ),
    ]
