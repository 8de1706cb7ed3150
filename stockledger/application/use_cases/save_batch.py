"""Save Batch Use Case: stock-in, replenishment and batch edits."""

from dataclasses import dataclass
from decimal import Decimal

from stockledger.application.dto.requests import SaveBatchRequest
from stockledger.application.dto.responses import SaveBatchResponse
from stockledger.application.presenters import batch_response
from stockledger.config import get_logger, get_settings
from stockledger.core.entities.inventory import Batch, Role
from stockledger.core.exceptions import BatchNotFoundError, PermissionDeniedError
from stockledger.core.interfaces.batch_store import IBatchStore
from stockledger.core.services.pricing import reconcile, resolve_stored_price

logger = get_logger(__name__)


@dataclass
class SaveBatchResult:
    """Result of saving a batch."""

    batch: Batch
    created: bool = False  # True if a new batch was stocked in


class SaveBatchUseCase:
    """
    Create or update a batch.

    Managers enter a unit or total price and the other is derived. Roles
    without pricing visibility cannot change the price: edits keep the
    stored price and new batches start at 0.
    """

    def __init__(self, batch_store: IBatchStore | None = None):
        self._batch_store = batch_store

    async def _get_batch_store(self) -> IBatchStore:
        if self._batch_store is None:
            from stockledger.infrastructure.storage import get_batch_store

            self._batch_store = await get_batch_store()
        return self._batch_store

    def _entered_unit_price(self, request: SaveBatchRequest, role: Role) -> Decimal | None:
        if not role.can_view_pricing or not request.has_price:
            return None
        ledger = get_settings().ledger
        unit_price, _ = reconcile(
            quantity=request.quantity,
            mode=request.price_mode,
            unit_price=request.unit_price,
            total_price=request.total_price,
            price_places=ledger.price_decimals,
            money_places=ledger.money_decimals,
        )
        return unit_price

    async def execute(
        self,
        request: SaveBatchRequest,
        role: Role,
        batch_id: str | None = None,
    ) -> SaveBatchResult:
        """Execute save batch use case."""
        logger.info(
            "save_batch_started",
            batch_id=batch_id,
            name=request.name,
            quantity=str(request.quantity),
            role=role.value,
        )
        store = await self._get_batch_store()

        existing: Batch | None = None
        if batch_id is not None:
            existing = await store.get_batch(batch_id)
            if existing is None:
                raise BatchNotFoundError(batch_id)

        price = resolve_stored_price(
            role,
            self._entered_unit_price(request, role),
            existing.price if existing else None,
        )

        batch = Batch(
            id=batch_id,
            name=request.name,
            quantity=request.quantity,
            price=price,
            purchase_date=request.purchase_date,
            custom_values=request.custom_values,
            created_at=existing.created_at if existing else None,
        )

        if existing is None:
            saved = await store.create_batch(batch)
        else:
            saved = await store.update_batch(batch)

        logger.info("save_batch_complete", batch_id=saved.id, created=existing is None)
        return SaveBatchResult(batch=saved, created=existing is None)

    def to_response(self, result: SaveBatchResult, role: Role) -> SaveBatchResponse:
        return SaveBatchResponse(
            batch=batch_response(result.batch, role.can_view_pricing),
            created=result.created,
        )


class DeleteBatchUseCase:
    """Permanently remove a batch. Manager only."""

    def __init__(self, batch_store: IBatchStore | None = None):
        self._batch_store = batch_store

    async def _get_batch_store(self) -> IBatchStore:
        if self._batch_store is None:
            from stockledger.infrastructure.storage import get_batch_store

            self._batch_store = await get_batch_store()
        return self._batch_store

    async def execute(self, batch_id: str, role: Role) -> None:
        if not role.can_delete_batches:
            raise PermissionDeniedError(role.value, "delete batches")
        store = await self._get_batch_store()
        await store.delete_batch(batch_id)
        logger.info("batch_removed", batch_id=batch_id, role=role.value)
