"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from stockroom.application.dto.base import ApiModel
from stockroom.application.dto.requests import (
    CreateExpenseRequest,
    CreatePurchaseRequest,
    CreateStockItemRequest,
    CreateSupplierRequest,
    CreateUsageRequest,
    PurchaseItemRequest,
    UpdateExpenseRequest,
    UpdateStockItemRequest,
    UpdateSupplierRequest,
    UpdateUsageRequest,
)
from stockroom.application.dto.responses import (
    ErrorResponse,
    ExpenseResponse,
    HealthResponse,
    MonthlyReportResponse,
    ProviderHealthResponse,
    PurchaseItemResponse,
    PurchaseResponse,
    StockItemResponse,
    SupplierResponse,
    UsageResponse,
)

__all__ = [
    "ApiModel",
    # Requests
    "CreateStockItemRequest",
    "UpdateStockItemRequest",
    "CreateSupplierRequest",
    "UpdateSupplierRequest",
    "PurchaseItemRequest",
    "CreatePurchaseRequest",
    "CreateUsageRequest",
    "UpdateUsageRequest",
    "CreateExpenseRequest",
    "UpdateExpenseRequest",
    # Responses
    "StockItemResponse",
    "SupplierResponse",
    "PurchaseItemResponse",
    "PurchaseResponse",
    "UsageResponse",
    "ExpenseResponse",
    "MonthlyReportResponse",
    "ProviderHealthResponse",
    "HealthResponse",
    "ErrorResponse",
]
