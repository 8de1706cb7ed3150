"""Entity to response DTO conversion with role-based redaction."""

from stockledger.application.dto.responses import (
    BatchResponse,
    GroupedItemResponse,
    InventorySummaryResponse,
    PlanLineResponse,
    WithdrawalRecordResponse,
)
from stockledger.core.entities.inventory import Batch, GroupedItem, WithdrawalRecord
from stockledger.core.services.aggregator import InventorySummary
from stockledger.core.services.fifo_engine import PlanLine
from stockledger.core.services.pricing import round_money, round_price


def batch_response(batch: Batch, show_pricing: bool) -> BatchResponse:
    return BatchResponse(
        id=batch.id,  # type: ignore[arg-type]
        name=batch.name,
        quantity=float(batch.quantity),
        price=float(round_price(batch.price)) if show_pricing else None,
        line_value=float(round_money(batch.line_value)) if show_pricing else None,
        purchase_date=batch.purchase_date,
        custom_values=dict(batch.custom_values),
        created_at=batch.created_at,
        updated_at=batch.updated_at,
    )


def grouped_item_response(
    group: GroupedItem,
    show_pricing: bool,
    include_batches: bool = True,
) -> GroupedItemResponse:
    response = GroupedItemResponse(
        name=group.name,
        total_quantity=float(group.total_quantity),
        batch_count=group.batch_count,
        batches=(
            [batch_response(b, show_pricing) for b in group.batches]
            if include_batches
            else []
        ),
    )
    if show_pricing:
        response.total_value = float(round_money(group.total_value))
        response.average_price = float(round_price(group.average_price))
        response.latest_price = float(round_price(group.latest_price))
    return response


def summary_response(summary: InventorySummary, show_pricing: bool) -> InventorySummaryResponse:
    return InventorySummaryResponse(
        item_count=summary.item_count,
        batch_count=summary.batch_count,
        total_quantity=float(summary.total_quantity),
        total_value=float(round_money(summary.total_value)) if show_pricing else None,
    )


def withdrawal_response(record: WithdrawalRecord, show_pricing: bool) -> WithdrawalRecordResponse:
    return WithdrawalRecordResponse(
        id=record.id,  # type: ignore[arg-type]
        name=record.name,
        quantity=float(record.quantity),
        total_cost=float(record.total_cost) if show_pricing else None,
        date=record.date,
        notes=record.notes,
        created_at=record.created_at,
    )


def plan_line_response(line: PlanLine, show_pricing: bool) -> PlanLineResponse:
    return PlanLineResponse(
        batch_id=line.batch_id,
        quantity_consumed=float(line.quantity_consumed),
        quantity_after=float(line.quantity_after),
        unit_price=float(line.unit_price) if show_pricing else None,
        line_cost=float(round_money(line.line_cost)) if show_pricing else None,
    )
