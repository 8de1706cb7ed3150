"""Tests for ManageFieldsUseCase."""

from unittest.mock import AsyncMock

import pytest

from stockledger.application.dto.requests import CreateFieldRequest
from stockledger.application.use_cases.manage_fields import ManageFieldsUseCase
from stockledger.core.entities.field_definition import FieldDefinition, FieldType
from stockledger.core.entities.inventory import Role
from stockledger.core.exceptions import (
    FieldDefinitionNotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from stockledger.infrastructure.storage.memory import InMemoryFieldStore


@pytest.fixture
def use_case():
    return ManageFieldsUseCase(field_store=InMemoryFieldStore())


class TestManageFieldsUseCase:
    async def test_create_and_list_in_order(self, use_case):
        await use_case.create_field(CreateFieldRequest(name="Supplier"), Role.MANAGER)
        await use_case.create_field(
            CreateFieldRequest(name="Colour", type="select", options=["red", " blue "]),
            Role.MANAGER,
        )

        fields = await use_case.list_fields()

        assert [f.name for f in fields] == ["Supplier", "Colour"]
        assert fields[1].options == ["red", "blue"]

    async def test_name_trimmed(self, use_case):
        created = await use_case.create_field(CreateFieldRequest(name="  Lot  "), Role.MANAGER)
        assert created.name == "Lot"

    async def test_blank_name_rejected(self, use_case):
        with pytest.raises(ValidationError):
            await use_case.create_field(CreateFieldRequest(name="   "), Role.MANAGER)

    async def test_select_without_options_rejected(self, use_case):
        with pytest.raises(ValidationError):
            await use_case.create_field(
                CreateFieldRequest(name="Colour", type=FieldType.SELECT, options=[" "]),
                Role.MANAGER,
            )

    async def test_warehouse_cannot_create(self):
        store = AsyncMock()
        use_case = ManageFieldsUseCase(field_store=store)
        with pytest.raises(PermissionDeniedError):
            await use_case.create_field(CreateFieldRequest(name="Supplier"), Role.WAREHOUSE)
        store.create_field.assert_not_awaited()

    async def test_warehouse_cannot_delete(self, use_case):
        with pytest.raises(PermissionDeniedError):
            await use_case.delete_field("any", Role.WAREHOUSE)

    async def test_delete(self, use_case):
        created = await use_case.create_field(CreateFieldRequest(name="Supplier"), Role.MANAGER)
        await use_case.delete_field(created.id, Role.MANAGER)
        assert await use_case.list_fields() == []

    async def test_delete_missing(self, use_case):
        with pytest.raises(FieldDefinitionNotFoundError):
            await use_case.delete_field("missing", Role.MANAGER)

    def test_to_response(self):
        response = ManageFieldsUseCase.to_response(
            FieldDefinition(id="f1", name="Colour", type="select", options=["red"])
        )
        assert response.type == "select"
        assert response.options == ["red"]
