"""Manage Fields Use Case: custom attribute definitions."""

from stockledger.application.dto.requests import CreateFieldRequest
from stockledger.application.dto.responses import FieldDefinitionResponse
from stockledger.config import get_logger
from stockledger.core.entities.field_definition import FieldDefinition, FieldType
from stockledger.core.entities.inventory import Role
from stockledger.core.exceptions import PermissionDeniedError, ValidationError
from stockledger.core.interfaces.field_store import IFieldStore

logger = get_logger(__name__)


class ManageFieldsUseCase:
    """List, create and delete custom field definitions. Writes are manager only."""

    def __init__(self, field_store: IFieldStore | None = None):
        self._field_store = field_store

    async def _get_field_store(self) -> IFieldStore:
        if self._field_store is None:
            from stockledger.infrastructure.storage import get_field_store

            self._field_store = await get_field_store()
        return self._field_store

    async def list_fields(self) -> list[FieldDefinition]:
        store = await self._get_field_store()
        return await store.list_fields()

    async def create_field(self, request: CreateFieldRequest, role: Role) -> FieldDefinition:
        if not role.can_manage_fields:
            raise PermissionDeniedError(role.value, "manage custom fields")

        name = request.name.strip()
        if not name:
            raise ValidationError("name", "Field name cannot be blank", request.name)

        options = [o.strip() for o in request.options or [] if o.strip()]
        if request.type is FieldType.SELECT and not options:
            raise ValidationError("options", "Select fields need at least one option")

        store = await self._get_field_store()
        created = await store.create_field(
            FieldDefinition(name=name, type=request.type, options=options or None)
        )
        logger.info("field_defined", field_id=created.id, name=created.name)
        return created

    async def delete_field(self, field_id: str, role: Role) -> None:
        if not role.can_manage_fields:
            raise PermissionDeniedError(role.value, "manage custom fields")
        store = await self._get_field_store()
        await store.delete_field(field_id)

    @staticmethod
    def to_response(definition: FieldDefinition) -> FieldDefinitionResponse:
        return FieldDefinitionResponse(
            id=definition.id,  # type: ignore[arg-type]
            name=definition.name,
            type=definition.type.value,
            options=definition.options,
            created_at=definition.created_at,
        )
