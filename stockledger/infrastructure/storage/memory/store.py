"""
In-memory store implementations.

Same contract as the SQLite stores, held in process memory. Entities are
copied on the way in and out so callers never share state with the store.
"""

import uuid
from datetime import UTC, datetime

from stockledger.config import get_logger
from stockledger.core.entities.field_definition import FieldDefinition
from stockledger.core.entities.inventory import Batch, WithdrawalRecord
from stockledger.core.exceptions import BatchNotFoundError, FieldDefinitionNotFoundError
from stockledger.core.interfaces.batch_store import IBatchStore
from stockledger.core.interfaces.field_store import IFieldStore

logger = get_logger(__name__)


class InMemoryBatchStore(IBatchStore):
    """Dictionary-backed batch and withdrawal record store."""

    def __init__(self, batches: list[Batch] | None = None) -> None:
        self._batches: dict[str, Batch] = {}
        self._withdrawals: dict[str, WithdrawalRecord] = {}
        for batch in batches or []:
            batch_id = batch.id or uuid.uuid4().hex
            self._batches[batch_id] = batch.model_copy(update={"id": batch_id}, deep=True)

    async def list_batches(self, name: str | None = None) -> list[Batch]:
        batches = [
            b.model_copy(deep=True)
            for b in self._batches.values()
            if name is None or b.name == name
        ]
        batches.sort(
            key=lambda b: (b.purchase_date, b.created_at or datetime.min.replace(tzinfo=UTC)),
            reverse=True,
        )
        return batches

    async def get_batch(self, batch_id: str) -> Batch | None:
        batch = self._batches.get(batch_id)
        return batch.model_copy(deep=True) if batch else None

    async def create_batch(self, batch: Batch) -> Batch:
        now = datetime.now(UTC)
        created = batch.model_copy(
            update={"id": uuid.uuid4().hex, "created_at": now, "updated_at": now},
            deep=True,
        )
        self._batches[created.id] = created  # type: ignore[index]
        logger.info("batch_created", batch_id=created.id, name=created.name)
        return created.model_copy(deep=True)

    async def update_batch(self, batch: Batch) -> Batch:
        if batch.id is None or batch.id not in self._batches:
            raise BatchNotFoundError(batch.id or "<unsaved>")
        updated = batch.model_copy(update={"updated_at": datetime.now(UTC)}, deep=True)
        self._batches[batch.id] = updated
        logger.info("batch_updated", batch_id=batch.id, quantity=str(updated.quantity))
        return updated.model_copy(deep=True)

    async def delete_batch(self, batch_id: str) -> None:
        if self._batches.pop(batch_id, None) is None:
            raise BatchNotFoundError(batch_id)
        logger.info("batch_deleted", batch_id=batch_id)

    async def list_item_names(self) -> list[str]:
        return sorted({b.name for b in self._batches.values()})

    async def list_withdrawals(self, name: str | None = None) -> list[WithdrawalRecord]:
        records = [r for r in self._withdrawals.values() if name is None or r.name == name]
        records.sort(
            key=lambda r: (r.date, r.created_at or datetime.min.replace(tzinfo=UTC)),
            reverse=True,
        )
        return records

    async def create_withdrawal(self, record: WithdrawalRecord) -> WithdrawalRecord:
        created = record.model_copy(
            update={"id": uuid.uuid4().hex, "created_at": datetime.now(UTC)}
        )
        self._withdrawals[created.id] = created  # type: ignore[index]
        logger.info("withdrawal_recorded", withdrawal_id=created.id, name=created.name)
        return created


class InMemoryFieldStore(IFieldStore):
    """List-backed field definition store preserving creation order."""

    def __init__(self) -> None:
        self._fields: list[FieldDefinition] = []

    async def list_fields(self) -> list[FieldDefinition]:
        return [f.model_copy(deep=True) for f in self._fields]

    async def create_field(self, definition: FieldDefinition) -> FieldDefinition:
        created = definition.model_copy(
            update={"id": uuid.uuid4().hex, "created_at": datetime.now(UTC)},
            deep=True,
        )
        self._fields.append(created)
        return created.model_copy(deep=True)

    async def delete_field(self, field_id: str) -> None:
        for index, definition in enumerate(self._fields):
            if definition.id == field_id:
                del self._fields[index]
                return
        raise FieldDefinitionNotFoundError(field_id)
