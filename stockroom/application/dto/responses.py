"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

import datetime as dt

from pydantic import Field

from stockroom.application.dto.base import ApiModel
from stockroom.core.entities import Expense, MonthlyReport, Purchase, StockItem, Supplier, Usage


class StockItemResponse(ApiModel):
    """Stock item with its derived low-stock flag."""

    id: int
    name: str
    category: str
    quantity: float
    unit_price: float
    reorder_level: float
    low_stock: bool

    @classmethod
    def from_entity(cls, item: StockItem) -> "StockItemResponse":
        return cls(
            id=item.id,
            name=item.name,
            category=item.category,
            quantity=item.quantity,
            unit_price=item.unit_price,
            reorder_level=item.reorder_level,
            low_stock=item.is_low_stock,
        )


class SupplierResponse(ApiModel):
    id: int
    name: str
    phone: str
    email: str
    contact_person: str | None = None
    address: str | None = None

    @classmethod
    def from_entity(cls, supplier: Supplier) -> "SupplierResponse":
        return cls(**supplier.model_dump())


class PurchaseItemResponse(ApiModel):
    id: int
    stock_item_id: int
    quantity: float
    price: float


class PurchaseResponse(ApiModel):
    """Purchase with its items in submission order."""

    id: int
    supplier_id: int
    date: dt.date
    total_amount: float
    items: list[PurchaseItemResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, purchase: Purchase) -> "PurchaseResponse":
        return cls(
            id=purchase.id,
            supplier_id=purchase.supplier_id,
            date=purchase.date,
            total_amount=purchase.total_amount,
            items=[
                PurchaseItemResponse(
                    id=item.id,
                    stock_item_id=item.stock_item_id,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in purchase.items
            ],
        )


class UsageResponse(ApiModel):
    id: int
    stock_item_id: int
    quantity_used: float
    date: dt.date
    user: str | None = None

    @classmethod
    def from_entity(cls, usage: Usage) -> "UsageResponse":
        return cls(**usage.model_dump())


class ExpenseResponse(ApiModel):
    id: int
    category: str
    amount: float
    description: str
    date: dt.date

    @classmethod
    def from_entity(cls, expense: Expense) -> "ExpenseResponse":
        return cls(**expense.model_dump())


class MonthlyReportResponse(ApiModel):
    """Monthly totals for purchases and expenses plus stock indicators."""

    month: str
    purchases: float
    expenses: float
    low_stock: int
    usage_count: int

    @classmethod
    def from_entity(cls, report: MonthlyReport) -> "MonthlyReportResponse":
        return cls(
            month=report.month,
            purchases=report.purchases,
            expenses=report.expenses,
            low_stock=report.low_stock,
            usage_count=report.usage_count,
        )


class ProviderHealthResponse(ApiModel):
    """Backing service health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(ApiModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ProviderHealthResponse | None = None


class ErrorResponse(ApiModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. USAGE_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
