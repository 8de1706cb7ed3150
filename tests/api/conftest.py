"""Fixtures for API tests: the app wired to fresh in-memory stores."""

import pytest
from httpx import ASGITransport, AsyncClient

from stockledger.api import dependencies as deps
from stockledger.api.main import app
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
from stockledger.core.services.item_locks import ItemLockRegistry
from stockledger.infrastructure.storage.memory import InMemoryBatchStore, InMemoryFieldStore


@pytest.fixture
def batch_store(mixed_batches) -> InMemoryBatchStore:
    return InMemoryBatchStore(mixed_batches)


@pytest.fixture
def field_store() -> InMemoryFieldStore:
    return InMemoryFieldStore()


@pytest.fixture
def overrides(batch_store, field_store) -> dict:
    locks = ItemLockRegistry()
    return {
        deps.get_batches: lambda: batch_store,
        deps.get_fields: lambda: field_store,
        deps.get_save_batch_use_case: lambda: SaveBatchUseCase(batch_store=batch_store),
        deps.get_delete_batch_use_case: lambda: DeleteBatchUseCase(batch_store=batch_store),
        deps.get_withdraw_stock_use_case: lambda: WithdrawStockUseCase(
            batch_store=batch_store, item_locks=locks
        ),
        deps.get_overview_use_case: lambda: InventoryOverviewUseCase(batch_store=batch_store),
        deps.get_item_history_use_case: lambda: ItemHistoryUseCase(batch_store=batch_store),
        deps.get_suggestions_use_case: lambda: NameSuggestionsUseCase(batch_store=batch_store),
        deps.get_export_use_case: lambda: ExportInventoryUseCase(batch_store=batch_store),
        deps.get_manage_fields_use_case: lambda: ManageFieldsUseCase(field_store=field_store),
    }


@pytest.fixture
async def client(overrides):
    app.dependency_overrides.update(overrides)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    for dependency in overrides:
        app.dependency_overrides.pop(dependency, None)
