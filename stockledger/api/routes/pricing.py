"""Price reconciliation endpoint used by batch entry forms."""

from fastapi import APIRouter, Depends

from stockledger.api.dependencies import get_role
from stockledger.application.dto.requests import ReconcilePriceRequest
from stockledger.application.dto.responses import ErrorResponse, ReconcilePriceResponse
from stockledger.config import get_settings
from stockledger.core.entities.inventory import Role
from stockledger.core.exceptions import PermissionDeniedError
from stockledger.core.services.pricing import reconcile, round_money, round_price

router = APIRouter(prefix="/api/pricing", tags=["pricing"])


@router.post(
    "/reconcile",
    response_model=ReconcilePriceResponse,
    responses={403: {"model": ErrorResponse}},
)
async def reconcile_price(
    request: ReconcilePriceRequest,
    role: Role = Depends(get_role),
) -> ReconcilePriceResponse:
    """Derive the dependent price field from the driving one."""
    if not role.can_view_pricing:
        raise PermissionDeniedError(role.value, "view pricing")

    ledger = get_settings().ledger
    unit_price, total_price = reconcile(
        quantity=request.quantity,
        mode=request.mode,
        unit_price=request.unit_price,
        total_price=request.total_price,
        price_places=ledger.price_decimals,
        money_places=ledger.money_decimals,
    )
    return ReconcilePriceResponse(
        mode=request.mode.value,
        quantity=request.quantity,
        unit_price=round_price(unit_price, ledger.price_decimals),
        total_price=round_money(total_price, ledger.money_decimals),
    )
