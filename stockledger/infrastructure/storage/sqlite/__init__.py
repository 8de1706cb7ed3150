"""SQLite storage implementations."""

from stockledger.infrastructure.storage.sqlite.batch_store import SQLiteBatchStore
from stockledger.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from stockledger.infrastructure.storage.sqlite.field_store import SQLiteFieldStore

# Singleton instances
_batch_store: SQLiteBatchStore | None = None
_field_store: SQLiteFieldStore | None = None


async def get_sqlite_batch_store() -> SQLiteBatchStore:
    """Get singleton batch store instance."""
    global _batch_store
    if _batch_store is None:
        _batch_store = SQLiteBatchStore()
    return _batch_store


async def get_sqlite_field_store() -> SQLiteFieldStore:
    """Get singleton field definition store instance."""
    global _field_store
    if _field_store is None:
        _field_store = SQLiteFieldStore()
    return _field_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteBatchStore",
    "SQLiteFieldStore",
    # Factory functions
    "get_sqlite_batch_store",
    "get_sqlite_field_store",
]
