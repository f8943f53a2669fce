"""
Stock quantity reconciliation rules.

Sign convention: an adjustment is the signed amount added to a stock item's
quantity. Purchases produce positive adjustments, recording a usage produces
a negative one, and deleting a usage credits its quantity back.

These functions are pure. The use cases call them inside a ledger
transaction so the checks and the writes see the same quantities.
"""

import math

from stockroom.core.entities.purchase import Purchase
from stockroom.core.entities.stock import StockItem
from stockroom.core.entities.usage import Usage
from stockroom.core.exceptions import InsufficientStockError, InvalidInputError


def ensure_positive(value: float | None, field: str, message: str) -> float:
    """Return value as float, or raise InvalidInputError unless it is finite and > 0."""
    if value is None or not math.isfinite(value) or value <= 0:
        raise InvalidInputError(message, field=field, value=value)
    return float(value)


def ensure_sufficient_stock(
    item: StockItem,
    requested: float,
    additional: bool = False,
) -> None:
    """Raise InsufficientStockError if the item cannot cover ``requested``.

    ``additional`` switches the message to the wording used when only the
    increase of an edited usage is being checked.
    """
    if item.quantity < requested:
        raise InsufficientStockError(
            stock_item_id=item.id,
            available=item.quantity,
            requested=requested,
            additional=additional,
        )


def purchase_adjustments(purchase: Purchase) -> dict[int, float]:
    """Positive quantity adjustment per stock item for a new purchase."""
    return purchase.quantities_by_stock_item()


def usage_delta(old_quantity: float, new_quantity: float) -> float:
    """Signed change in quantity used when a usage is edited."""
    return new_quantity - old_quantity


def usage_update_adjustment(
    item: StockItem,
    old_quantity: float,
    new_quantity: float,
) -> float:
    """Adjustment to apply to ``item`` when a usage changes quantity.

    Only a positive delta needs stock to be available, and only the delta
    itself is checked, not the full new amount. The returned adjustment is
    ``-delta``, so a reduced usage credits stock back.
    """
    delta = usage_delta(old_quantity, new_quantity)
    if delta > 0:
        ensure_sufficient_stock(item, delta, additional=True)
    return -delta


def usage_delete_adjustment(usage: Usage) -> float:
    """Compensating credit for a deleted usage."""
    return usage.quantity_used
