"""API route modules."""

from stockledger.api.routes.batches import router as batches_router
from stockledger.api.routes.fields import router as fields_router
from stockledger.api.routes.health import router as health_router
from stockledger.api.routes.inventory import router as inventory_router
from stockledger.api.routes.pricing import router as pricing_router
from stockledger.api.routes.withdrawals import router as withdrawals_router

__all__ = [
    "health_router",
    "inventory_router",
    "batches_router",
    "withdrawals_router",
    "fields_router",
    "pricing_router",
]
