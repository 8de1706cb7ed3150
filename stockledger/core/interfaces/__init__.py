"""Core interfaces (ports) for dependency injection."""

from stockledger.core.interfaces.batch_store import IBatchStore
from stockledger.core.interfaces.field_store import IFieldStore

__all__ = [
    "IBatchStore",
    "IFieldStore",
]
