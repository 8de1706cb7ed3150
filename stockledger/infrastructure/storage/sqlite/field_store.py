"""SQLite implementation of custom field definition storage."""

import json
import uuid
from datetime import UTC, datetime

import aiosqlite

from stockledger.config import get_logger
from stockledger.core.entities.field_definition import FieldDefinition, FieldType
from stockledger.core.exceptions import FieldDefinitionNotFoundError
from stockledger.core.interfaces.field_store import IFieldStore
from stockledger.infrastructure.storage.sqlite.connection import (
    database_errors,
    get_connection,
    get_transaction,
)

logger = get_logger(__name__)


class SQLiteFieldStore(IFieldStore):
    """SQLite implementation of field definition storage."""

    async def list_fields(self) -> list[FieldDefinition]:
        with database_errors("list_fields"):
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT * FROM field_definitions ORDER BY created_at, rowid"
                )
                rows = await cursor.fetchall()
        return [self._row_to_field(row) for row in rows]

    async def create_field(self, definition: FieldDefinition) -> FieldDefinition:
        created = definition.model_copy(
            update={"id": uuid.uuid4().hex, "created_at": datetime.now(UTC)}
        )
        with database_errors("create_field"):
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO field_definitions (id, name, type, options, created_at)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (
                        created.id,
                        created.name,
                        created.type.value,
                        json.dumps(created.options) if created.options else None,
                        created.created_at.isoformat(),  # type: ignore[union-attr]
                    ),
                )
        logger.info("field_created", field_id=created.id, type=created.type.value)
        return created

    async def delete_field(self, field_id: str) -> None:
        with database_errors("delete_field"):
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    "DELETE FROM field_definitions WHERE id = ?", (field_id,)
                )
                if cursor.rowcount == 0:
                    raise FieldDefinitionNotFoundError(field_id)
        logger.info("field_deleted", field_id=field_id)

    @staticmethod
    def _row_to_field(row: aiosqlite.Row) -> FieldDefinition:
        options = json.loads(row["options"]) if row["options"] else None
        created_at = None
        if row["created_at"]:
            try:
                created_at = datetime.fromisoformat(row["created_at"])
            except (ValueError, TypeError):
                pass
        return FieldDefinition(
            id=row["id"],
            name=row["name"],
            type=FieldType(row["type"]),
            options=options,
            created_at=created_at,
        )
