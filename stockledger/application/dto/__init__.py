"""Data transfer objects."""

from stockledger.application.dto.requests import (
    CreateFieldRequest,
    ReconcilePriceRequest,
    SaveBatchRequest,
    WithdrawStockRequest,
)
from stockledger.application.dto.responses import (
    BatchResponse,
    ErrorResponse,
    FieldDefinitionResponse,
    GroupedItemResponse,
    HealthResponse,
    InventoryOverviewResponse,
    InventorySummaryResponse,
    ItemHistoryResponse,
    NameSuggestionsResponse,
    PlanLineResponse,
    ReconcilePriceResponse,
    SaveBatchResponse,
    WithdrawalRecordResponse,
    WithdrawStockResponse,
)

__all__ = [
    # Requests
    "CreateFieldRequest",
    "ReconcilePriceRequest",
    "SaveBatchRequest",
    "WithdrawStockRequest",
    # Responses
    "BatchResponse",
    "ErrorResponse",
    "FieldDefinitionResponse",
    "GroupedItemResponse",
    "HealthResponse",
    "InventoryOverviewResponse",
    "InventorySummaryResponse",
    "ItemHistoryResponse",
    "NameSuggestionsResponse",
    "PlanLineResponse",
    "ReconcilePriceResponse",
    "SaveBatchResponse",
    "WithdrawalRecordResponse",
    "WithdrawStockResponse",
]
