"""
Per-item mutual exclusion for withdrawals.

Holding an item's lock across read, plan, apply and record keeps at most one
withdrawal in flight per item name within this process.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class ItemLockRegistry:
    """Lazily created asyncio locks keyed by item name."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, name: str) -> AsyncIterator[None]:
        """
        Hold the lock for ``name`` for the duration of the block.

        Usage:
            async with registry.hold("Widget"):
                ...
        """
        lock = self._locks.setdefault(name, asyncio.Lock())
        self._holders[name] = self._holders.get(name, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[name] -= 1
            if self._holders[name] == 0:
                # Nobody holds or waits; drop the lock so the map stays small
                del self._holders[name]
                del self._locks[name]

    def is_locked(self, name: str) -> bool:
        lock = self._locks.get(name)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)


# Process-wide registry
_registry: ItemLockRegistry | None = None


def get_item_locks() -> ItemLockRegistry:
    """Get or create the process-wide lock registry."""
    global _registry
    if _registry is None:
        _registry = ItemLockRegistry()
    return _registry
