"""
Domain exceptions for the Stockroom application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class StockroomError(Exception):
    """Base exception for all Stockroom errors."""

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


# Storage Exceptions
class StorageError(StockroomError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Lookup Exceptions
class NotFoundError(StockroomError):
    """Target entity of a read, update or delete does not exist."""

    entity = "Record"

    def __init__(self, entity_id: Any):
        super().__init__(
            f"{self.entity} not found with ID: {entity_id}",
            code=f"{self.entity.upper().replace(' ', '_')}_NOT_FOUND",
            details={"id": entity_id},
        )


class StockItemNotFoundError(NotFoundError):
    entity = "Stock item"


class SupplierNotFoundError(NotFoundError):
    entity = "Supplier"


class PurchaseNotFoundError(NotFoundError):
    entity = "Purchase"


class UsageNotFoundError(NotFoundError):
    entity = "Usage"


class ExpenseNotFoundError(NotFoundError):
    entity = "Expense"


class ReferenceNotFoundError(StockroomError):
    """A field of the request points at an entity that does not exist."""

    def __init__(self, field: str, entity_id: Any, message: str | None = None):
        super().__init__(
            message or f"Referenced entity not found for '{field}': {entity_id}",
            code="REFERENCE_NOT_FOUND",
            details={"field": field, "id": entity_id},
        )


# Validation Exceptions
class InvalidInputError(StockroomError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(
            message,
            code="INVALID_INPUT",
            details={
                "field": field,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InsufficientStockError(StockroomError):
    """Stock on hand cannot cover the requested outflow."""

    def __init__(
        self,
        stock_item_id: int | None,
        available: float,
        requested: float,
        additional: bool = False,
    ):
        label = "Additional quantity needed" if additional else "Requested"
        super().__init__(
            f"Insufficient stock. Available: {float(available)}, {label}: {float(requested)}",
            code="INSUFFICIENT_STOCK",
            details={
                "stock_item_id": stock_item_id,
                "available": float(available),
                "requested": float(requested),
            },
        )
        self.available = float(available)
        self.requested = float(requested)


# Access Exceptions
class AuthenticationRequiredError(StockroomError):
    """No caller identity was supplied for a protected operation."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="AUTHENTICATION_REQUIRED")


class ForbiddenError(StockroomError):
    """Caller is not allowed to perform the operation."""

    def __init__(self, message: str, username: str | None = None):
        super().__init__(
            message,
            code="FORBIDDEN",
            details={"username": username},
        )


class ConfigurationError(StockroomError):
    """Service cannot start or run with the current configuration or schema."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")
