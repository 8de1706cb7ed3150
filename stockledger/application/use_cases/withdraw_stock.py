"""Withdraw Stock Use Case: FIFO stock-out with frozen cost."""

from dataclasses import dataclass
from datetime import date

from stockledger.application.dto.requests import WithdrawStockRequest
from stockledger.application.dto.responses import WithdrawStockResponse
from stockledger.application.presenters import plan_line_response, withdrawal_response
from stockledger.config import get_logger, get_settings
from stockledger.core.entities.inventory import Batch, Role, WithdrawalRecord
from stockledger.core.exceptions import (
    AdapterFailureError,
    InvalidQuantityError,
    StorageError,
    UnknownItemError,
)
from stockledger.core.interfaces.batch_store import IBatchStore
from stockledger.core.services.fifo_engine import DepletionPlan, plan_withdrawal
from stockledger.core.services.item_locks import ItemLockRegistry, get_item_locks
from stockledger.core.services.pricing import round_money, to_decimal

logger = get_logger(__name__)


@dataclass
class WithdrawStockResult:
    """Result of a completed withdrawal."""

    record: WithdrawalRecord
    plan: DepletionPlan
    updated_batches: list[Batch]


class WithdrawStockUseCase:
    """
    Withdraw stock from an item, oldest batches first.

    The item's lock is held across reading batches, planning, writing every
    batch update and recording the withdrawal, so two withdrawals of the
    same item never plan against the same snapshot. Batches are re-read
    inside the lock rather than trusting a snapshot held by the caller.

    A store failure while applying the plan is not compensated: the error
    is raised as AdapterFailureError listing the batches already written,
    and the caller must reload before allowing another attempt.
    """

    def __init__(
        self,
        batch_store: IBatchStore | None = None,
        item_locks: ItemLockRegistry | None = None,
    ):
        self._batch_store = batch_store
        self._item_locks = item_locks or get_item_locks()

    async def _get_batch_store(self) -> IBatchStore:
        if self._batch_store is None:
            from stockledger.infrastructure.storage import get_batch_store

            self._batch_store = await get_batch_store()
        return self._batch_store

    async def execute(self, request: WithdrawStockRequest) -> WithdrawStockResult:
        """Execute withdraw stock use case."""
        quantity = to_decimal(request.quantity)
        logger.info("withdrawal_started", name=request.name, quantity=str(quantity))

        # 1. Validate input before touching the engine
        if quantity <= 0:
            raise InvalidQuantityError(request.quantity)

        store = await self._get_batch_store()
        if request.name not in await store.list_item_names():
            raise UnknownItemError(request.name)

        withdrawal_date = request.date or date.today()
        money_places = get_settings().ledger.money_decimals

        async with self._item_locks.hold(request.name):
            # 2. Read authoritative batches and plan
            batches = await store.list_batches(name=request.name)
            plan = plan_withdrawal(batches, quantity)
            logger.info(
                "withdrawal_planned",
                name=request.name,
                lines=len(plan.lines),
                total_cost=str(plan.total_cost),
            )

            # 3. Apply batch updates in plan order, then record
            applied: list[str] = []
            operation = "update_batch"
            try:
                updated: list[Batch] = []
                for batch in plan.updated_batches(batches):
                    updated.append(await store.update_batch(batch))
                    applied.append(batch.id)  # type: ignore[arg-type]

                operation = "create_withdrawal"
                record = await store.create_withdrawal(
                    WithdrawalRecord(
                        name=request.name,
                        quantity=quantity,
                        total_cost=round_money(plan.total_cost, money_places),
                        date=withdrawal_date,
                        notes=request.notes,
                    )
                )
            except StorageError as e:
                logger.error(
                    "withdrawal_apply_failed",
                    name=request.name,
                    operation=operation,
                    applied_batch_ids=applied,
                    error=str(e),
                )
                raise AdapterFailureError(operation, e.message, applied) from e

        logger.info(
            "withdrawal_complete",
            name=request.name,
            withdrawal_id=record.id,
            total_cost=str(record.total_cost),
        )

        return WithdrawStockResult(record=record, plan=plan, updated_batches=updated)

    def to_response(self, result: WithdrawStockResult, role: Role) -> WithdrawStockResponse:
        """Convert result to API response."""
        show_pricing = role.can_view_pricing
        return WithdrawStockResponse(
            record=withdrawal_response(result.record, show_pricing),
            plan=[plan_line_response(line, show_pricing) for line in result.plan.lines],
        )
