"""Purchase (stock inflow) domain entities."""

import datetime as dt

from pydantic import BaseModel, Field, model_validator


class PurchaseItem(BaseModel):
    """A single line of a purchase.

    Owned by its Purchase; it holds no reference back to the parent.
    """

    id: int | None = None
    stock_item_id: int  # FK → stock_items.id
    quantity: float
    price: float

    @property
    def line_total(self) -> float:
        return self.quantity * self.price


class Purchase(BaseModel):
    """Inbound stock event composed of one or more purchase items."""

    id: int | None = None
    supplier_id: int  # FK → suppliers.id
    date: dt.date = Field(default_factory=dt.date.today)
    total_amount: float = 0.0
    items: list[PurchaseItem] = Field(default_factory=list)

    @model_validator(mode="after")
    def compute_total(self) -> "Purchase":
        """Derive total_amount from the items; a supplied total is never trusted."""
        self.total_amount = sum(item.line_total for item in self.items)
        return self

    def quantities_by_stock_item(self) -> dict[int, float]:
        """Sum item quantities per referenced stock item, in first-seen order."""
        totals: dict[int, float] = {}
        for item in self.items:
            totals[item.stock_item_id] = totals.get(item.stock_item_id, 0.0) + item.quantity
        return totals
