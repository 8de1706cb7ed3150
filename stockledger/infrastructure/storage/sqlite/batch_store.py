"""SQLite implementation of batch and withdrawal record storage."""

import json
import uuid
from datetime import UTC, date, datetime
from decimal import Decimal

import aiosqlite

from stockledger.config import get_logger
from stockledger.core.entities.inventory import Batch, WithdrawalRecord
from stockledger.core.exceptions import BatchNotFoundError
from stockledger.core.interfaces.batch_store import IBatchStore
from stockledger.infrastructure.storage.sqlite.connection import (
    database_errors,
    get_connection,
    get_transaction,
)

logger = get_logger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class SQLiteBatchStore(IBatchStore):
    """SQLite implementation of inventory batch and withdrawal storage."""

    async def list_batches(self, name: str | None = None) -> list[Batch]:
        """List batches, most recent purchase date first."""
        query = "SELECT * FROM batches"
        params: tuple = ()
        if name is not None:
            query += " WHERE name = ?"
            params = (name,)
        query += " ORDER BY purchase_date DESC, created_at DESC"

        with database_errors("list_batches"):
            async with get_connection() as conn:
                cursor = await conn.execute(query, params)
                rows = await cursor.fetchall()
        return [self._row_to_batch(row) for row in rows]

    async def get_batch(self, batch_id: str) -> Batch | None:
        with database_errors("get_batch"):
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT * FROM batches WHERE id = ?", (batch_id,)
                )
                row = await cursor.fetchone()
        return self._row_to_batch(row) if row else None

    async def create_batch(self, batch: Batch) -> Batch:
        """Create a new batch."""
        now = datetime.now(UTC)
        created = batch.model_copy(
            update={"id": _new_id(), "created_at": now, "updated_at": now}
        )
        with database_errors("create_batch"):
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO batches (
                        id, name, quantity, price, purchase_date,
                        custom_values, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        created.id,
                        created.name,
                        str(created.quantity),
                        str(created.price),
                        created.purchase_date.isoformat(),
                        json.dumps(created.custom_values),
                        now.isoformat(),
                        now.isoformat(),
                    ),
                )
        logger.info(
            "batch_created",
            batch_id=created.id,
            name=created.name,
            quantity=str(created.quantity),
        )
        return created

    async def update_batch(self, batch: Batch) -> Batch:
        """Update an existing batch."""
        if batch.id is None:
            raise BatchNotFoundError("<unsaved>")
        updated = batch.model_copy(update={"updated_at": datetime.now(UTC)})
        with database_errors("update_batch"):
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    UPDATE batches SET
                        name = ?,
                        quantity = ?,
                        price = ?,
                        purchase_date = ?,
                        custom_values = ?,
                        updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        updated.name,
                        str(updated.quantity),
                        str(updated.price),
                        updated.purchase_date.isoformat(),
                        json.dumps(updated.custom_values),
                        updated.updated_at.isoformat(),  # type: ignore[union-attr]
                        updated.id,
                    ),
                )
                if cursor.rowcount == 0:
                    raise BatchNotFoundError(updated.id)  # type: ignore[arg-type]
        logger.info("batch_updated", batch_id=updated.id, quantity=str(updated.quantity))
        return updated

    async def delete_batch(self, batch_id: str) -> None:
        with database_errors("delete_batch"):
            async with get_transaction() as conn:
                cursor = await conn.execute("DELETE FROM batches WHERE id = ?", (batch_id,))
                if cursor.rowcount == 0:
                    raise BatchNotFoundError(batch_id)
        logger.info("batch_deleted", batch_id=batch_id)

    async def list_item_names(self) -> list[str]:
        with database_errors("list_item_names"):
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT DISTINCT name FROM batches ORDER BY name"
                )
                rows = await cursor.fetchall()
        return [row["name"] for row in rows]

    async def list_withdrawals(self, name: str | None = None) -> list[WithdrawalRecord]:
        """List withdrawal records, newest first."""
        query = "SELECT * FROM withdrawals"
        params: tuple = ()
        if name is not None:
            query += " WHERE name = ?"
            params = (name,)
        query += " ORDER BY date DESC, created_at DESC"

        with database_errors("list_withdrawals"):
            async with get_connection() as conn:
                cursor = await conn.execute(query, params)
                rows = await cursor.fetchall()
        return [self._row_to_withdrawal(row) for row in rows]

    async def create_withdrawal(self, record: WithdrawalRecord) -> WithdrawalRecord:
        """Persist a withdrawal record."""
        created = record.model_copy(
            update={"id": _new_id(), "created_at": datetime.now(UTC)}
        )
        with database_errors("create_withdrawal"):
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO withdrawals (
                        id, name, quantity, total_cost, date, notes, created_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        created.id,
                        created.name,
                        str(created.quantity),
                        str(created.total_cost),
                        created.date.isoformat(),
                        created.notes,
                        created.created_at.isoformat(),  # type: ignore[union-attr]
                    ),
                )
        logger.info(
            "withdrawal_recorded",
            withdrawal_id=created.id,
            name=created.name,
            quantity=str(created.quantity),
            total_cost=str(created.total_cost),
        )
        return created

    @staticmethod
    def _parse_timestamp(value: str | None) -> datetime | None:
        if not value:
            return None
        try:
            return datetime.fromisoformat(value)
        except (ValueError, TypeError):
            return None

    @classmethod
    def _row_to_batch(cls, row: aiosqlite.Row) -> Batch:
        """Convert a database row to a Batch entity."""
        try:
            custom_values = json.loads(row["custom_values"] or "{}")
        except json.JSONDecodeError:
            custom_values = {}

        return Batch(
            id=row["id"],
            name=row["name"],
            quantity=Decimal(row["quantity"]),
            price=Decimal(row["price"]),
            purchase_date=date.fromisoformat(row["purchase_date"]),
            custom_values=custom_values if isinstance(custom_values, dict) else {},
            created_at=cls._parse_timestamp(row["created_at"]),
            updated_at=cls._parse_timestamp(row["updated_at"]),
        )

    @classmethod
    def _row_to_withdrawal(cls, row: aiosqlite.Row) -> WithdrawalRecord:
        """Convert a database row to a WithdrawalRecord entity."""
        return WithdrawalRecord(
            id=row["id"],
            name=row["name"],
            quantity=Decimal(row["quantity"]),
            total_cost=Decimal(row["total_cost"]),
            date=date.fromisoformat(row["date"]),
            notes=row["notes"],
            created_at=cls._parse_timestamp(row["created_at"]),
        )
