"""Pure domain services."""

from stockledger.core.services.aggregator import (
    InventorySummary,
    aggregate,
    filter_groups,
    matches_query,
    suggest_names,
    summarize,
)
from stockledger.core.services.fifo_engine import (
    DepletionPlan,
    PlanLine,
    fifo_order,
    plan_withdrawal,
    total_available,
)
from stockledger.core.services.item_locks import ItemLockRegistry, get_item_locks
from stockledger.core.services.pricing import (
    PriceEntry,
    PriceMode,
    reconcile,
    resolve_stored_price,
    round_money,
    round_price,
    total_from_unit,
    unit_from_total,
)
from stockledger.core.services.report_exporter import export_csv, export_filename

__all__ = [
    # Aggregation
    "InventorySummary",
    "aggregate",
    "filter_groups",
    "matches_query",
    "suggest_names",
    "summarize",
    # FIFO engine
    "DepletionPlan",
    "PlanLine",
    "fifo_order",
    "plan_withdrawal",
    "total_available",
    # Locks
    "ItemLockRegistry",
    "get_item_locks",
    # Pricing
    "PriceEntry",
    "PriceMode",
    "reconcile",
    "resolve_stored_price",
    "round_money",
    "round_price",
    "total_from_unit",
    "unit_from_total",
    # Export
    "export_csv",
    "export_filename",
]
