"""Withdrawal endpoints."""

from fastapi import APIRouter, Depends, Query

from stockledger.api.dependencies import get_batches, get_role, get_withdraw_stock_use_case
from stockledger.application.dto.requests import WithdrawStockRequest
from stockledger.application.dto.responses import (
    ErrorResponse,
    WithdrawalRecordResponse,
    WithdrawStockResponse,
)
from stockledger.application.presenters import withdrawal_response
from stockledger.application.use_cases import WithdrawStockUseCase
from stockledger.core.entities.inventory import Role
from stockledger.core.interfaces import IBatchStore

router = APIRouter(prefix="/api/withdrawals", tags=["withdrawals"])


@router.post(
    "",
    response_model=WithdrawStockResponse,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def withdraw_stock(
    request: WithdrawStockRequest,
    role: Role = Depends(get_role),
    use_case: WithdrawStockUseCase = Depends(get_withdraw_stock_use_case),
) -> WithdrawStockResponse:
    """Withdraw stock FIFO, oldest batches first."""
    result = await use_case.execute(request)
    return use_case.to_response(result, role)


@router.get("", response_model=list[WithdrawalRecordResponse])
async def list_withdrawals(
    name: str | None = Query(default=None, description="Only this item"),
    role: Role = Depends(get_role),
    store: IBatchStore = Depends(get_batches),
) -> list[WithdrawalRecordResponse]:
    """List recorded withdrawals, newest first."""
    records = await store.list_withdrawals(name=name)
    records.sort(key=lambda r: r.date, reverse=True)
    return [withdrawal_response(r, role.can_view_pricing) for r in records]
