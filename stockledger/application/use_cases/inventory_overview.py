"""Inventory overview, item history and name suggestion use cases."""

from dataclasses import dataclass

from stockledger.application.dto.responses import (
    InventoryOverviewResponse,
    ItemHistoryResponse,
    NameSuggestionsResponse,
)
from stockledger.application.presenters import (
    batch_response,
    grouped_item_response,
    summary_response,
    withdrawal_response,
)
from stockledger.config import get_logger
from stockledger.core.entities.inventory import Batch, GroupedItem, Role, WithdrawalRecord
from stockledger.core.exceptions import ItemNotFoundError
from stockledger.core.interfaces.batch_store import IBatchStore
from stockledger.core.services.aggregator import (
    InventorySummary,
    aggregate,
    filter_groups,
    suggest_names,
    summarize,
)

logger = get_logger(__name__)


class _BatchStoreMixin:
    _batch_store: IBatchStore | None

    async def _get_batch_store(self) -> IBatchStore:
        if self._batch_store is None:
            from stockledger.infrastructure.storage import get_batch_store

            self._batch_store = await get_batch_store()
        return self._batch_store


@dataclass
class OverviewResult:
    """Grouped items matching the query plus whole-system totals."""

    groups: list[GroupedItem]
    summary: InventorySummary


class InventoryOverviewUseCase(_BatchStoreMixin):
    """Aggregate all batches into per-item summaries, optionally filtered."""

    def __init__(self, batch_store: IBatchStore | None = None):
        self._batch_store = batch_store

    async def execute(self, query: str | None = None) -> OverviewResult:
        store = await self._get_batch_store()
        groups = aggregate(await store.list_batches())
        matched = filter_groups(groups.values(), query)
        matched.sort(key=lambda g: g.name.lower())
        logger.debug("inventory_overview", items=len(groups), matched=len(matched))
        # Totals always cover the full system, not just the filtered view
        return OverviewResult(groups=matched, summary=summarize(groups.values()))

    def to_response(
        self,
        result: OverviewResult,
        role: Role,
        include_batches: bool = True,
    ) -> InventoryOverviewResponse:
        show_pricing = role.can_view_pricing
        return InventoryOverviewResponse(
            items=[
                grouped_item_response(g, show_pricing, include_batches)
                for g in result.groups
            ],
            total=len(result.groups),
            summary=summary_response(result.summary, show_pricing),
        )


@dataclass
class ItemHistoryResult:
    name: str
    batches: list[Batch]  # most recent first, depleted batches included
    withdrawals: list[WithdrawalRecord]  # newest first


class ItemHistoryUseCase(_BatchStoreMixin):
    """Batch and withdrawal history for one item."""

    def __init__(self, batch_store: IBatchStore | None = None):
        self._batch_store = batch_store

    async def execute(self, name: str) -> ItemHistoryResult:
        store = await self._get_batch_store()
        group = aggregate(await store.list_batches(name=name)).get(name)
        withdrawals = await store.list_withdrawals(name=name)
        if group is None and not withdrawals:
            raise ItemNotFoundError(name)
        withdrawals.sort(key=lambda r: r.date, reverse=True)
        return ItemHistoryResult(
            name=name,
            batches=group.batches if group else [],
            withdrawals=withdrawals,
        )

    def to_response(self, result: ItemHistoryResult, role: Role) -> ItemHistoryResponse:
        show_pricing = role.can_view_pricing
        return ItemHistoryResponse(
            name=result.name,
            batches=[batch_response(b, show_pricing) for b in result.batches],
            withdrawals=[withdrawal_response(r, show_pricing) for r in result.withdrawals],
        )


class NameSuggestionsUseCase(_BatchStoreMixin):
    """Autocomplete over known item names."""

    def __init__(self, batch_store: IBatchStore | None = None):
        self._batch_store = batch_store

    async def execute(self, query: str, exclude_exact: bool = True) -> NameSuggestionsResponse:
        store = await self._get_batch_store()
        names = suggest_names(await store.list_item_names(), query, exclude_exact)
        return NameSuggestionsResponse(query=query, names=names)
