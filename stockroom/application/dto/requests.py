"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.

Fields the reconciliation engine validates itself (references and
quantities of purchases and usages) are left optional here so the engine
reports them in its own order and wording.
"""

import datetime as dt

from pydantic import EmailStr, Field, field_validator

from stockroom.application.dto.base import ApiModel


# --- Stock catalog ---


class CreateStockItemRequest(ApiModel):
    """Request to add an item to the stock catalog."""

    name: str = Field(..., min_length=1, description="Item name")
    category: str = Field(..., min_length=1, description="Item category")
    quantity: float = Field(default=0.0, ge=0, description="Opening quantity")
    unit_price: float = Field(..., gt=0, description="Price per unit")
    reorder_level: float = Field(default=0.0, ge=0, description="Low-stock threshold")

    @field_validator("name", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class UpdateStockItemRequest(ApiModel):
    """Administrative overwrite of a stock item. No bounds are enforced."""

    name: str
    category: str
    quantity: float
    unit_price: float
    reorder_level: float


# --- Suppliers ---


class CreateSupplierRequest(ApiModel):
    """Request to register a supplier."""

    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: EmailStr
    contact_person: str | None = None
    address: str | None = None


class UpdateSupplierRequest(CreateSupplierRequest):
    """Replace every field of a supplier."""


# --- Purchases ---


class PurchaseItemRequest(ApiModel):
    """One line of a purchase."""

    stock_item_id: int | None = None
    quantity: float | None = None
    price: float | None = None


class CreatePurchaseRequest(ApiModel):
    """Request to record a purchase. Any client total is ignored."""

    supplier_id: int | None = None
    date: dt.date | None = Field(default=None, description="Defaults to today")
    items: list[PurchaseItemRequest] | None = None


# --- Usages ---


class CreateUsageRequest(ApiModel):
    """Request to record stock consumption."""

    stock_item_id: int | None = None
    quantity_used: float | None = None
    date: dt.date | None = Field(default=None, description="Defaults to today")


class UpdateUsageRequest(CreateUsageRequest):
    """Request to edit a usage. An omitted date keeps the stored one."""


# --- Expenses ---


class CreateExpenseRequest(ApiModel):
    """Request to record an expense."""

    category: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)
    description: str = ""
    date: dt.date | None = Field(default=None, description="Defaults to today")


class UpdateExpenseRequest(CreateExpenseRequest):
    """Request to edit an expense. An omitted date keeps the stored one."""
