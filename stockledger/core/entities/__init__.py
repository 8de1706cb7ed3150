"""Core domain entities."""

from stockledger.core.entities.field_definition import FieldDefinition, FieldType
from stockledger.core.entities.inventory import (
    Batch,
    GroupedItem,
    Role,
    WithdrawalRecord,
)

__all__ = [
    "Batch",
    "WithdrawalRecord",
    "GroupedItem",
    "Role",
    "FieldDefinition",
    "FieldType",
]
