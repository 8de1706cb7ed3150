"""Custom field definition endpoints."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from stockledger.api.dependencies import get_manage_fields_use_case, get_role
from stockledger.application.dto.requests import CreateFieldRequest
from stockledger.application.dto.responses import ErrorResponse, FieldDefinitionResponse
from stockledger.application.use_cases import ManageFieldsUseCase
from stockledger.core.entities.inventory import Role

router = APIRouter(prefix="/api/fields", tags=["fields"])


@router.get("", response_model=list[FieldDefinitionResponse])
async def list_fields(
    use_case: ManageFieldsUseCase = Depends(get_manage_fields_use_case),
) -> list[FieldDefinitionResponse]:
    """List custom batch attributes in creation order."""
    return [use_case.to_response(f) for f in await use_case.list_fields()]


@router.post(
    "",
    response_model=FieldDefinitionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def create_field(
    request: CreateFieldRequest,
    role: Role = Depends(get_role),
    use_case: ManageFieldsUseCase = Depends(get_manage_fields_use_case),
) -> FieldDefinitionResponse:
    """Define a custom batch attribute (manager only)."""
    return use_case.to_response(await use_case.create_field(request, role))


@router.delete(
    "/{field_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_field(
    field_id: str,
    role: Role = Depends(get_role),
    use_case: ManageFieldsUseCase = Depends(get_manage_fields_use_case),
) -> Response:
    """Delete a custom field definition (manager only)."""
    await use_case.delete_field(field_id, role)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
