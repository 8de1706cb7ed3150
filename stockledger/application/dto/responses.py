"""Response DTOs for API endpoints.

Pricing fields are optional: they are ``None`` when the caller's role may
not view pricing.
"""

import datetime as dt
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field


class BatchResponse(BaseModel):
    """One batch as shown in item history."""

    id: str
    name: str
    quantity: float
    price: float | None = Field(default=None, description="Unit price")
    line_value: float | None = Field(default=None, description="quantity * price")
    purchase_date: date
    custom_values: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SaveBatchResponse(BaseModel):
    batch: BatchResponse
    created: bool


class GroupedItemResponse(BaseModel):
    """Per-item aggregate."""

    name: str
    total_quantity: float
    batch_count: int
    total_value: float | None = None
    average_price: float | None = None
    latest_price: float | None = None
    batches: list[BatchResponse] = Field(default_factory=list)


class InventorySummaryResponse(BaseModel):
    """Whole-system totals."""

    item_count: int
    batch_count: int
    total_quantity: float
    total_value: float | None = None


class InventoryOverviewResponse(BaseModel):
    items: list[GroupedItemResponse]
    total: int
    summary: InventorySummaryResponse


class PlanLineResponse(BaseModel):
    """One segment of a FIFO depletion plan."""

    batch_id: str
    quantity_consumed: float
    quantity_after: float
    unit_price: float | None = None
    line_cost: float | None = None


class WithdrawalRecordResponse(BaseModel):
    id: str
    name: str
    quantity: float
    total_cost: float | None = None
    date: dt.date
    notes: str | None = None
    created_at: datetime | None = None


class WithdrawStockResponse(BaseModel):
    record: WithdrawalRecordResponse
    plan: list[PlanLineResponse]


class ItemHistoryResponse(BaseModel):
    name: str
    batches: list[BatchResponse]
    withdrawals: list[WithdrawalRecordResponse]


class NameSuggestionsResponse(BaseModel):
    query: str
    names: list[str]


class FieldDefinitionResponse(BaseModel):
    id: str
    name: str
    type: str
    options: list[str] | None = None
    created_at: datetime | None = None


class ReconcilePriceResponse(BaseModel):
    """Reconciled prices, serialized as strings at their stored precision."""

    mode: str
    quantity: Decimal
    unit_price: Decimal
    total_price: Decimal


class HealthResponse(BaseModel):
    """Service health status."""

    status: str
    version: str
    uptime_seconds: float
    database: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. INSUFFICIENT_STOCK)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    details: dict[str, Any] = Field(default_factory=dict, description="Structured context")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
