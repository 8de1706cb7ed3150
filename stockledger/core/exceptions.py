"""
Domain exceptions for the stock ledger.

Provides specific exception types for different error scenarios.
"""

from decimal import Decimal
from typing import Any


class LedgerError(Exception):
    """Base exception for all ledger errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Stock Exceptions
class InsufficientStockError(LedgerError):
    """Requested withdrawal exceeds the total available quantity."""

    def __init__(self, name: str | None, available: Decimal, requested: Decimal):
        super().__init__(
            f"Insufficient stock for '{name}': available {available}, requested {requested}",
            code="INSUFFICIENT_STOCK",
            details={
                "name": name,
                "available": str(available),
                "requested": str(requested),
            },
        )
        self.name = name
        self.available = available
        self.requested = requested


class PermissionDeniedError(LedgerError):
    """The caller's role lacks the capability for an action."""

    def __init__(self, role: str, action: str):
        super().__init__(
            f"Role '{role}' is not allowed to {action}",
            code="PERMISSION_DENIED",
            details={"role": role, "action": action},
        )


# Storage Exceptions
class StorageError(LedgerError):
    """Base exception for storage operations."""

    pass


class BatchNotFoundError(StorageError):
    """Batch not found in storage."""

    def __init__(self, batch_id: str):
        super().__init__(
            f"Batch not found: {batch_id}",
            code="BATCH_NOT_FOUND",
            details={"batch_id": batch_id},
        )


class FieldDefinitionNotFoundError(StorageError):
    """Custom field definition not found in storage."""

    def __init__(self, field_id: str):
        super().__init__(
            f"Field definition not found: {field_id}",
            code="FIELD_NOT_FOUND",
            details={"field_id": field_id},
        )


class ItemNotFoundError(StorageError):
    """No batches or withdrawals exist for an item name."""

    def __init__(self, name: str):
        super().__init__(
            f"Item not found: {name}",
            code="ITEM_NOT_FOUND",
            details={"name": name},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class AdapterFailureError(StorageError):
    """
    A store call failed while applying a withdrawal plan.

    No compensation is attempted. Batches listed in ``applied`` were already
    written; callers must reload authoritative state before retrying.
    """

    reload_required = True

    def __init__(self, operation: str, error: str, applied: list[str] | None = None):
        applied = applied or []
        super().__init__(
            f"Store failure during {operation}: {error}",
            code="ADAPTER_FAILURE",
            details={
                "operation": operation,
                "error": error,
                "applied_batch_ids": applied,
                "reload_required": True,
            },
        )
        self.applied = applied


# Validation Exceptions
class ValidationError(LedgerError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InvalidQuantityError(ValidationError):
    """Withdrawal quantity is not strictly positive."""

    def __init__(self, quantity: Any):
        super().__init__(
            field="quantity",
            message="Quantity must be greater than zero",
            value=quantity,
        )
        self.code = "INVALID_QUANTITY"


class UnknownItemError(ValidationError):
    """Withdrawal target is not among the known item names."""

    def __init__(self, name: str):
        super().__init__(
            field="name",
            message=f"No stock has ever been recorded for '{name}'",
            value=name,
        )
        self.code = "UNKNOWN_ITEM"
