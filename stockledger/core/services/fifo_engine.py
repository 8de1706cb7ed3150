"""
FIFO withdrawal engine.

Plans a stock-out against the batches of one item, oldest purchase date
first. Planning is pure: it reads a snapshot of batches, computes which
batches are drawn down and by how much, and returns the plan together with
its cost. Nothing is written here; the caller persists the plan.

Exhausted batches are left at exactly zero and are never deleted, so the
batch history of an item stays complete.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal

from stockledger.core.entities.inventory import Batch
from stockledger.core.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    ValidationError,
)
from stockledger.core.services.pricing import to_decimal

ZERO = Decimal("0")
_NO_TIMESTAMP = datetime.min.replace(tzinfo=UTC)


@dataclass(frozen=True)
class PlanLine:
    """One batch segment consumed by a withdrawal."""

    batch_id: str
    quantity_consumed: Decimal
    unit_price: Decimal
    line_cost: Decimal
    quantity_before: Decimal
    quantity_after: Decimal

    @property
    def exhausts_batch(self) -> bool:
        return self.quantity_after == 0


@dataclass(frozen=True)
class DepletionPlan:
    """Ordered depletion plan for a single withdrawal request."""

    name: str
    requested: Decimal
    lines: tuple[PlanLine, ...]
    total_cost: Decimal  # exact sum of line costs, unrounded

    @property
    def quantity_consumed(self) -> Decimal:
        return sum((line.quantity_consumed for line in self.lines), ZERO)

    def updated_batches(self, batches: Iterable[Batch]) -> list[Batch]:
        """
        Copies of the touched batches with their post-withdrawal quantities.

        Returned in plan order; untouched batches are omitted.
        """
        by_id = {batch.id: batch for batch in batches}
        return [
            by_id[line.batch_id].model_copy(update={"quantity": line.quantity_after})
            for line in self.lines
        ]


def fifo_order(batches: Iterable[Batch]) -> list[Batch]:
    """
    Oldest purchase date first, then earliest created.

    Batches without a creation timestamp sort ahead of timestamped ones on
    the same date and otherwise keep their input order.
    """
    return sorted(
        batches,
        key=lambda b: (b.purchase_date, b.created_at or _NO_TIMESTAMP),
    )


def total_available(batches: Iterable[Batch]) -> Decimal:
    return sum((batch.quantity for batch in batches), ZERO)


def plan_withdrawal(
    batches: list[Batch],
    requested: Decimal | int | float | str,
) -> DepletionPlan:
    """
    Compute the FIFO depletion plan for withdrawing ``requested`` units.

    Args:
        batches: Every batch of one item, in any order.
        requested: Quantity to withdraw, strictly positive.

    Returns:
        DepletionPlan whose lines sum exactly to ``requested``.

    Raises:
        InvalidQuantityError: ``requested`` is not positive.
        ValidationError: batches span several names or lack store IDs.
        InsufficientStockError: total quantity is below ``requested``.
    """
    requested = to_decimal(requested)
    if requested <= 0:
        raise InvalidQuantityError(requested)

    names = {batch.name for batch in batches}
    if len(names) > 1:
        raise ValidationError(
            field="batches",
            message="all batches must belong to one item",
            value=sorted(names),
        )
    if any(batch.id is None for batch in batches):
        raise ValidationError(field="batches", message="batch has no store ID")

    name = batches[0].name if batches else None
    available = total_available(batches)
    if available < requested:
        raise InsufficientStockError(name=name, available=available, requested=requested)

    remaining = requested
    total_cost = ZERO
    lines: list[PlanLine] = []

    for batch in fifo_order(batches):
        if remaining == 0:
            break
        if batch.quantity == 0:
            continue

        if batch.quantity <= remaining:
            used = batch.quantity
            after = ZERO
        else:
            used = remaining
            after = batch.quantity - used
        remaining -= used

        line_cost = used * batch.price
        total_cost += line_cost
        lines.append(
            PlanLine(
                batch_id=batch.id,  # type: ignore[arg-type]
                quantity_consumed=used,
                unit_price=batch.price,
                line_cost=line_cost,
                quantity_before=batch.quantity,
                quantity_after=after,
            )
        )

    return DepletionPlan(
        name=name,  # type: ignore[arg-type]
        requested=requested,
        lines=tuple(lines),
        total_cost=total_cost,
    )
