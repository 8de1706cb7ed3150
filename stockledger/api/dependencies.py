"""
Dependency injection container for FastAPI.

Provides stores, use cases and the caller role to route handlers.
"""

from fastapi import Request

from stockledger.application.use_cases import (
    DeleteBatchUseCase,
    ExportInventoryUseCase,
    InventoryOverviewUseCase,
    ItemHistoryUseCase,
    ManageFieldsUseCase,
    NameSuggestionsUseCase,
    SaveBatchUseCase,
    WithdrawStockUseCase,
)
from stockledger.config import get_settings
from stockledger.core.entities.inventory import Role
from stockledger.core.exceptions import ValidationError
from stockledger.core.interfaces import IBatchStore, IFieldStore
from stockledger.infrastructure.storage import get_batch_store, get_field_store


def get_role(request: Request) -> Role:
    """
    Resolve the caller's role from the configured header.

    Authentication happens upstream; a missing header means the least
    privileged role.
    """
    api = get_settings().api
    raw = request.headers.get(api.role_header) or api.default_role
    try:
        return Role(raw.strip().lower())
    except ValueError:
        raise ValidationError("role", "Unknown role", raw) from None


# Store dependencies
async def get_batches() -> IBatchStore:
    """Get batch store."""
    return await get_batch_store()


async def get_fields() -> IFieldStore:
    """Get field definition store."""
    return await get_field_store()


# Use case dependencies
async def get_save_batch_use_case() -> SaveBatchUseCase:
    return SaveBatchUseCase(batch_store=await get_batch_store())


async def get_delete_batch_use_case() -> DeleteBatchUseCase:
    return DeleteBatchUseCase(batch_store=await get_batch_store())


async def get_withdraw_stock_use_case() -> WithdrawStockUseCase:
    return WithdrawStockUseCase(batch_store=await get_batch_store())


async def get_overview_use_case() -> InventoryOverviewUseCase:
    return InventoryOverviewUseCase(batch_store=await get_batch_store())


async def get_item_history_use_case() -> ItemHistoryUseCase:
    return ItemHistoryUseCase(batch_store=await get_batch_store())


async def get_suggestions_use_case() -> NameSuggestionsUseCase:
    return NameSuggestionsUseCase(batch_store=await get_batch_store())


async def get_export_use_case() -> ExportInventoryUseCase:
    return ExportInventoryUseCase(batch_store=await get_batch_store())


async def get_manage_fields_use_case() -> ManageFieldsUseCase:
    return ManageFieldsUseCase(field_store=await get_field_store())
