"""Abstract interface for custom field definition storage."""

from abc import ABC, abstractmethod

from stockledger.core.entities.field_definition import FieldDefinition


class IFieldStore(ABC):
    """Interface for custom field definition persistence."""

    @abstractmethod
    async def list_fields(self) -> list[FieldDefinition]:
        """List field definitions in creation order."""
        pass

    @abstractmethod
    async def create_field(self, definition: FieldDefinition) -> FieldDefinition:
        """Create a field definition and assign its ID."""
        pass

    @abstractmethod
    async def delete_field(self, field_id: str) -> None:
        """Delete a field definition."""
        pass
