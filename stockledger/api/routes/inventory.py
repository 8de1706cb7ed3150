"""Inventory read endpoints: grouped view, history, suggestions and export."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from stockledger.api.dependencies import (
    get_export_use_case,
    get_item_history_use_case,
    get_overview_use_case,
    get_role,
    get_suggestions_use_case,
)
from stockledger.application.dto.responses import (
    ErrorResponse,
    InventoryOverviewResponse,
    InventorySummaryResponse,
    ItemHistoryResponse,
    NameSuggestionsResponse,
)
from stockledger.application.use_cases import (
    ExportInventoryUseCase,
    InventoryOverviewUseCase,
    ItemHistoryUseCase,
    NameSuggestionsUseCase,
)
from stockledger.core.entities.inventory import Role

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("", response_model=InventoryOverviewResponse)
async def list_inventory(
    q: str | None = Query(default=None, description="Filter by item name or batch field"),
    include_batches: bool = True,
    role: Role = Depends(get_role),
    use_case: InventoryOverviewUseCase = Depends(get_overview_use_case),
) -> InventoryOverviewResponse:
    """Get every item grouped across its batches, most recent batch first."""
    result = await use_case.execute(q)
    return use_case.to_response(result, role, include_batches=include_batches)


@router.get("/summary", response_model=InventorySummaryResponse)
async def inventory_summary(
    role: Role = Depends(get_role),
    use_case: InventoryOverviewUseCase = Depends(get_overview_use_case),
) -> InventorySummaryResponse:
    """Get whole-system totals."""
    result = await use_case.execute()
    return use_case.to_response(result, role, include_batches=False).summary


@router.get("/suggestions", response_model=NameSuggestionsResponse)
async def name_suggestions(
    q: str = Query(default="", description="Partial item name"),
    use_case: NameSuggestionsUseCase = Depends(get_suggestions_use_case),
) -> NameSuggestionsResponse:
    """Autocomplete known item names."""
    return await use_case.execute(q)


@router.get(
    "/export",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}},
)
async def export_inventory(
    role: Role = Depends(get_role),
    use_case: ExportInventoryUseCase = Depends(get_export_use_case),
) -> Response:
    """Download the grouped inventory as CSV. Pricing columns follow the caller's role."""
    result = await use_case.execute(role)
    return Response(
        content=result.content.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )


@router.get(
    "/items/{name}/history",
    response_model=ItemHistoryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def item_history(
    name: str,
    role: Role = Depends(get_role),
    use_case: ItemHistoryUseCase = Depends(get_item_history_use_case),
) -> ItemHistoryResponse:
    """Get batches and withdrawals for one item."""
    result = await use_case.execute(name)
    return use_case.to_response(result, role)
