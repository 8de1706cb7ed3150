"""Request DTOs for API endpoints.

Pydantic v2 models for request validation.
"""

import datetime as dt
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from stockledger.core.entities.field_definition import FieldType
from stockledger.core.services.pricing import PriceMode

# Derived totals must fit the 28-digit default decimal context
MAX_QUANTITY = Decimal("1000000000000")
MAX_PRICE = Decimal("1000000000")


# --- Batches ---


class SaveBatchRequest(BaseModel):
    """Request to stock in a new batch or edit an existing one."""

    name: str = Field(..., min_length=1, description="Item name (case-sensitive)")
    quantity: Decimal = Field(..., ge=0, le=MAX_QUANTITY, description="Remaining quantity")
    purchase_date: date = Field(..., description="Purchase date (YYYY-MM-DD)")
    price_mode: PriceMode = Field(
        default=PriceMode.UNIT,
        description="Which price field drives the other",
    )
    unit_price: Decimal | None = Field(
        default=None, ge=0, le=MAX_PRICE, description="Unit price"
    )
    total_price: Decimal | None = Field(
        default=None, ge=0, le=MAX_QUANTITY * MAX_PRICE, description="Total price"
    )
    custom_values: dict[str, str | int | float] = Field(
        default_factory=dict,
        description="Custom field values keyed by field ID",
    )

    @property
    def has_price(self) -> bool:
        if self.price_mode is PriceMode.UNIT:
            return self.unit_price is not None
        return self.total_price is not None


# --- Withdrawals ---


class WithdrawStockRequest(BaseModel):
    """Request to withdraw stock FIFO from an item."""

    name: str = Field(..., min_length=1, description="Item name to withdraw from")
    quantity: Decimal = Field(
        ..., le=MAX_QUANTITY, description="Quantity to withdraw, must be positive"
    )
    date: dt.date | None = Field(
        default=None,
        description="Withdrawal date (defaults to today)",
    )
    notes: str | None = Field(default=None, max_length=1000, description="Notes")


# --- Pricing ---


class ReconcilePriceRequest(BaseModel):
    """Derive unit or total price from the other."""

    quantity: Decimal = Field(..., ge=0, le=MAX_QUANTITY)
    mode: PriceMode = PriceMode.UNIT
    unit_price: Decimal | None = Field(default=None, ge=0, le=MAX_PRICE)
    total_price: Decimal | None = Field(default=None, ge=0, le=MAX_QUANTITY * MAX_PRICE)


# --- Custom fields ---


class CreateFieldRequest(BaseModel):
    """Request to define a custom batch attribute."""

    name: str = Field(..., min_length=1, max_length=100)
    type: FieldType = FieldType.TEXT
    options: list[str] | None = Field(default=None, description="Choices for select fields")
