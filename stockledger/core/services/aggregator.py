"""
Inventory aggregation.

Groups a flat list of batches into one GroupedItem per item name and
filters the groups by free-text query.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from stockledger.core.entities.inventory import Batch, GroupedItem

ZERO = Decimal("0")


@dataclass(frozen=True)
class InventorySummary:
    """Whole-system overview totals."""

    item_count: int
    batch_count: int
    total_quantity: Decimal
    total_value: Decimal


def _recency_key(batch: Batch) -> tuple[str, str, str]:
    created = batch.created_at.isoformat() if batch.created_at else ""
    return (batch.purchase_date.isoformat(), created, batch.id or "")


def aggregate(batches: Iterable[Batch]) -> dict[str, GroupedItem]:
    """
    Group batches by exact (case-sensitive) name.

    Each group's batches are sorted most recent first and ``latest_price``
    is taken from the most recent batch.
    """
    groups: dict[str, GroupedItem] = {}
    for batch in batches:
        group = groups.get(batch.name)
        if group is None:
            group = groups[batch.name] = GroupedItem(name=batch.name)
        group.total_quantity += batch.quantity
        group.total_value += batch.quantity * batch.price
        group.batch_count += 1
        group.batches.append(batch)

    for group in groups.values():
        group.batches.sort(key=_recency_key, reverse=True)
        group.latest_price = group.batches[0].price if group.batches else ZERO

    return groups


def matches_query(group: GroupedItem, query: str) -> bool:
    """Case-insensitive substring match on the name or any custom value."""
    needle = query.lower()
    if needle in group.name.lower():
        return True
    return any(
        needle in str(value).lower()
        for batch in group.batches
        for value in batch.custom_values.values()
    )


def filter_groups(groups: Iterable[GroupedItem], query: str | None) -> list[GroupedItem]:
    groups = list(groups)
    if not query:
        return groups
    return [group for group in groups if matches_query(group, query)]


def summarize(groups: Iterable[GroupedItem]) -> InventorySummary:
    groups = list(groups)
    return InventorySummary(
        item_count=len(groups),
        batch_count=sum(g.batch_count for g in groups),
        total_quantity=sum((g.total_quantity for g in groups), ZERO),
        total_value=sum((g.total_value for g in groups), ZERO),
    )


def suggest_names(names: Iterable[str], query: str, exclude_exact: bool = True) -> list[str]:
    """Known names containing ``query`` (case-insensitive), sorted."""
    needle = query.strip().lower()
    if not needle:
        return []
    return sorted(
        name
        for name in set(names)
        if needle in name.lower() and not (exclude_exact and name == query)
    )
