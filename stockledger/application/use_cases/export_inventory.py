"""Export Inventory Use Case: CSV report with role-based columns."""

from dataclasses import dataclass
from datetime import date

from stockledger.config import get_logger, get_settings
from stockledger.core.entities.inventory import Role
from stockledger.core.interfaces.batch_store import IBatchStore
from stockledger.core.services.aggregator import aggregate
from stockledger.core.services.report_exporter import export_csv, export_filename

logger = get_logger(__name__)


@dataclass
class ExportResult:
    """Rendered report."""

    filename: str
    content: str
    include_pricing: bool
    row_count: int


class ExportInventoryUseCase:
    """Render every item's aggregate as CSV for download."""

    def __init__(self, batch_store: IBatchStore | None = None):
        self._batch_store = batch_store

    async def _get_batch_store(self) -> IBatchStore:
        if self._batch_store is None:
            from stockledger.infrastructure.storage import get_batch_store

            self._batch_store = await get_batch_store()
        return self._batch_store

    async def execute(self, role: Role, on: date | None = None) -> ExportResult:
        """Execute export; pricing columns follow the role's capability."""
        store = await self._get_batch_store()
        groups = aggregate(await store.list_batches())
        include_pricing = role.can_view_pricing
        ledger = get_settings().ledger

        content = export_csv(
            groups.values(),
            include_pricing=include_pricing,
            delimiter=ledger.export_delimiter,
            price_places=ledger.price_decimals,
            money_places=ledger.money_decimals,
        )
        filename = export_filename(
            include_pricing,
            on or date.today(),
            prefix=ledger.export_filename_prefix,
        )

        logger.info(
            "inventory_exported",
            role=role.value,
            rows=len(groups),
            include_pricing=include_pricing,
        )
        return ExportResult(
            filename=filename,
            content=content,
            include_pricing=include_pricing,
            row_count=len(groups),
        )
