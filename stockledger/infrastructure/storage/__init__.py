"""
Storage backends.

The backend is selected by ``STORAGE_BACKEND`` (``sqlite`` or ``memory``).
"""

from stockledger.config import get_settings
from stockledger.core.interfaces import IBatchStore, IFieldStore
from stockledger.infrastructure.storage.memory import InMemoryBatchStore, InMemoryFieldStore

_memory_batch_store: InMemoryBatchStore | None = None
_memory_field_store: InMemoryFieldStore | None = None


async def get_batch_store() -> IBatchStore:
    """Get the configured batch store."""
    global _memory_batch_store
    if get_settings().storage.backend == "memory":
        if _memory_batch_store is None:
            _memory_batch_store = InMemoryBatchStore()
        return _memory_batch_store

    from stockledger.infrastructure.storage.sqlite import get_sqlite_batch_store

    return await get_sqlite_batch_store()


async def get_field_store() -> IFieldStore:
    """Get the configured field definition store."""
    global _memory_field_store
    if get_settings().storage.backend == "memory":
        if _memory_field_store is None:
            _memory_field_store = InMemoryFieldStore()
        return _memory_field_store

    from stockledger.infrastructure.storage.sqlite import get_sqlite_field_store

    return await get_sqlite_field_store()


__all__ = ["get_batch_store", "get_field_store"]
