"""Application use cases."""

from stockledger.application.use_cases.export_inventory import (
    ExportInventoryUseCase,
    ExportResult,
)
from stockledger.application.use_cases.inventory_overview import (
    InventoryOverviewUseCase,
    ItemHistoryResult,
    ItemHistoryUseCase,
    NameSuggestionsUseCase,
    OverviewResult,
)
from stockledger.application.use_cases.manage_fields import ManageFieldsUseCase
from stockledger.application.use_cases.save_batch import (
    DeleteBatchUseCase,
    SaveBatchResult,
    SaveBatchUseCase,
)
from stockledger.application.use_cases.withdraw_stock import (
    WithdrawStockResult,
    WithdrawStockUseCase,
)

__all__ = [
    "DeleteBatchUseCase",
    "ExportInventoryUseCase",
    "ExportResult",
    "InventoryOverviewUseCase",
    "ItemHistoryResult",
    "ItemHistoryUseCase",
    "ManageFieldsUseCase",
    "NameSuggestionsUseCase",
    "OverviewResult",
    "SaveBatchResult",
    "SaveBatchUseCase",
    "WithdrawStockResult",
    "WithdrawStockUseCase",
]
