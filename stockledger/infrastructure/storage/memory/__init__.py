"""In-memory storage implementations."""

from stockledger.infrastructure.storage.memory.store import (
    InMemoryBatchStore,
    InMemoryFieldStore,
)

__all__ = ["InMemoryBatchStore", "InMemoryFieldStore"]
