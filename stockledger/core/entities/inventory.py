"""Inventory domain entities."""

import datetime as dt
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

ZERO = Decimal("0")


class Role(str, Enum):
    """Caller roles and the capabilities they carry."""

    MANAGER = "manager"
    WAREHOUSE = "warehouse"

    @property
    def can_view_pricing(self) -> bool:
        return self is Role.MANAGER

    @property
    def can_manage_fields(self) -> bool:
        return self is Role.MANAGER

    @property
    def can_delete_batches(self) -> bool:
        return self is Role.MANAGER


class Batch(BaseModel):
    """One inventory lot received on a given date at a given unit price."""

    id: str | None = None
    name: str = Field(..., min_length=1)
    quantity: Decimal = Field(default=ZERO, ge=0)
    price: Decimal = Field(default=ZERO, ge=0)  # unit price
    purchase_date: date  # FIFO ordering key
    custom_values: dict[str, str | int | float] = Field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def line_value(self) -> Decimal:
        """Asset value of the remaining quantity."""
        return self.quantity * self.price

    @property
    def is_depleted(self) -> bool:
        return self.quantity == 0


class WithdrawalRecord(BaseModel):
    """Immutable audit entry for a completed stock-out."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str = Field(..., min_length=1)
    quantity: Decimal = Field(..., gt=0)
    total_cost: Decimal = Field(default=ZERO, ge=0)  # frozen at withdrawal time
    date: dt.date
    notes: str | None = None
    created_at: datetime | None = None


@dataclass
class GroupedItem:
    """Per-name aggregate of all batches sharing a name. Never persisted."""

    name: str
    total_quantity: Decimal = ZERO
    total_value: Decimal = ZERO
    batch_count: int = 0
    batches: list[Batch] = field(default_factory=list)
    latest_price: Decimal = ZERO

    @property
    def average_price(self) -> Decimal:
        if self.total_quantity == 0:
            return ZERO
        return self.total_value / self.total_quantity
