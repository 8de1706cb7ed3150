"""Tests for ExportInventoryUseCase."""

from datetime import date

import pytest

from stockledger.application.use_cases.export_inventory import ExportInventoryUseCase
from stockledger.config import reset_settings
from stockledger.core.entities.inventory import Role
from stockledger.core.services.report_exporter import BOM
from stockledger.infrastructure.storage.memory import InMemoryBatchStore


@pytest.fixture
def use_case(mixed_batches):
    return ExportInventoryUseCase(batch_store=InMemoryBatchStore(mixed_batches))


class TestExportInventoryUseCase:
    async def test_manager_full_report(self, use_case):
        result = await use_case.execute(Role.MANAGER, on=date(2024, 5, 1))

        assert result.filename == "inventory_full_2024-05-01.csv"
        assert result.include_pricing
        assert result.row_count == 2
        lines = result.content[len(BOM):].split("\r\n")
        assert lines[0] == "Item Name,Total Quantity,Total Value,Average Price"
        assert lines[1] == "Gadget,10,12.50,1.2500"
        assert lines[2] == "Widget,8,17.50,2.1875"

    async def test_warehouse_redacted_report(self, use_case):
        result = await use_case.execute(Role.WAREHOUSE, on=date(2024, 5, 1))

        assert result.filename == "inventory_redacted_2024-05-01.csv"
        assert not result.include_pricing
        assert "Total Value" not in result.content
        assert "17.50" not in result.content

    async def test_prefix_from_settings(self, use_case, monkeypatch):
        monkeypatch.setenv("LEDGER_EXPORT_FILENAME_PREFIX", "stock")
        reset_settings()

        result = await use_case.execute(Role.MANAGER, on=date(2024, 5, 1))

        assert result.filename == "stock_full_2024-05-01.csv"
