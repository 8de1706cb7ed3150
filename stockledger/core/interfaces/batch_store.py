"""Abstract interface for batch and withdrawal record storage."""

from abc import ABC, abstractmethod

from stockledger.core.entities.inventory import Batch, WithdrawalRecord


class IBatchStore(ABC):
    """
    Interface for inventory batch and withdrawal record persistence.

    Calls are independent: no transaction spans more than one call.
    """

    @abstractmethod
    async def list_batches(self, name: str | None = None) -> list[Batch]:
        """List batches, optionally for one item name, most recent first."""
        pass

    @abstractmethod
    async def get_batch(self, batch_id: str) -> Batch | None:
        """Get batch by ID."""
        pass

    @abstractmethod
    async def create_batch(self, batch: Batch) -> Batch:
        """Create a new batch and assign its ID."""
        pass

    @abstractmethod
    async def update_batch(self, batch: Batch) -> Batch:
        """Update an existing batch (quantity, price, date, custom values)."""
        pass

    @abstractmethod
    async def delete_batch(self, batch_id: str) -> None:
        """Delete a batch permanently."""
        pass

    @abstractmethod
    async def list_item_names(self) -> list[str]:
        """List distinct item names that have at least one batch."""
        pass

    @abstractmethod
    async def list_withdrawals(self, name: str | None = None) -> list[WithdrawalRecord]:
        """List withdrawal records, optionally for one item name, newest first."""
        pass

    @abstractmethod
    async def create_withdrawal(self, record: WithdrawalRecord) -> WithdrawalRecord:
        """Persist a withdrawal record and assign its ID."""
        pass
