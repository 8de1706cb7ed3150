"""Batch endpoints: stock in, edit and delete."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from stockledger.api.dependencies import (
    get_delete_batch_use_case,
    get_role,
    get_save_batch_use_case,
)
from stockledger.application.dto.requests import SaveBatchRequest
from stockledger.application.dto.responses import ErrorResponse, SaveBatchResponse
from stockledger.application.use_cases import DeleteBatchUseCase, SaveBatchUseCase
from stockledger.core.entities.inventory import Role

router = APIRouter(prefix="/api/batches", tags=["batches"])


@router.post(
    "",
    response_model=SaveBatchResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_batch(
    request: SaveBatchRequest,
    role: Role = Depends(get_role),
    use_case: SaveBatchUseCase = Depends(get_save_batch_use_case),
) -> SaveBatchResponse:
    """Stock in a new batch. Replenishment always creates a new batch."""
    result = await use_case.execute(request, role)
    return use_case.to_response(result, role)


@router.put(
    "/{batch_id}",
    response_model=SaveBatchResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def update_batch(
    batch_id: str,
    request: SaveBatchRequest,
    role: Role = Depends(get_role),
    use_case: SaveBatchUseCase = Depends(get_save_batch_use_case),
) -> SaveBatchResponse:
    """Edit an existing batch."""
    result = await use_case.execute(request, role, batch_id=batch_id)
    return use_case.to_response(result, role)


@router.delete(
    "/{batch_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_batch(
    batch_id: str,
    role: Role = Depends(get_role),
    use_case: DeleteBatchUseCase = Depends(get_delete_batch_use_case),
) -> Response:
    """Permanently delete a batch (manager only)."""
    await use_case.execute(batch_id, role)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
