"""Unit tests for domain exceptions."""

from decimal import Decimal

from stockledger.core.exceptions import (
    AdapterFailureError,
    BatchNotFoundError,
    DatabaseError,
    FieldDefinitionNotFoundError,
    InsufficientStockError,
    InvalidQuantityError,
    ItemNotFoundError,
    LedgerError,
    PermissionDeniedError,
    StorageError,
    UnknownItemError,
    ValidationError,
)


class TestLedgerError:
    """Tests for base LedgerError exception."""

    def test_basic_initialization(self):
        error = LedgerError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "LedgerError"
        assert error.details == {}

    def test_to_dict(self):
        error = LedgerError("Test error", code="TEST_CODE", details={"extra": "info"})
        assert error.to_dict() == {
            "error": "TEST_CODE",
            "message": "Test error",
            "details": {"extra": "info"},
        }


class TestStockErrors:
    def test_insufficient_stock_carries_quantities(self):
        error = InsufficientStockError("Widget", Decimal("8"), Decimal("10"))
        assert error.code == "INSUFFICIENT_STOCK"
        assert error.available == Decimal("8")
        assert error.requested == Decimal("10")
        assert error.details == {"name": "Widget", "available": "8", "requested": "10"}

    def test_permission_denied(self):
        error = PermissionDeniedError("warehouse", "delete batches")
        assert error.code == "PERMISSION_DENIED"
        assert "warehouse" in str(error)


class TestStorageErrors:
    def test_not_found_errors_are_storage_errors(self):
        assert isinstance(BatchNotFoundError("b1"), StorageError)
        assert isinstance(FieldDefinitionNotFoundError("f1"), StorageError)
        assert isinstance(ItemNotFoundError("Widget"), StorageError)
        assert ItemNotFoundError("Widget").details == {"name": "Widget"}

    def test_database_error(self):
        error = DatabaseError("update_batch", "disk I/O error")
        assert error.code == "DATABASE_ERROR"
        assert error.details["operation"] == "update_batch"

    def test_adapter_failure_lists_applied_batches(self):
        error = AdapterFailureError("update_batch", "locked", applied=["b1"])
        assert isinstance(error, StorageError)
        assert error.code == "ADAPTER_FAILURE"
        assert error.applied == ["b1"]
        assert error.reload_required is True
        assert error.details["applied_batch_ids"] == ["b1"]


class TestValidationErrors:
    def test_invalid_quantity(self):
        error = InvalidQuantityError(Decimal("0"))
        assert isinstance(error, ValidationError)
        assert error.code == "INVALID_QUANTITY"
        assert error.details["field"] == "quantity"

    def test_unknown_item(self):
        error = UnknownItemError("Sprocket")
        assert isinstance(error, ValidationError)
        assert error.code == "UNKNOWN_ITEM"
        assert error.details["value"] == "Sprocket"

    def test_value_truncated(self):
        error = ValidationError("name", "too long", "x" * 500)
        assert len(error.details["value"]) == 100
