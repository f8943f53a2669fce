"""Domain services."""

from stockroom.core.services.reconciliation import (
    ensure_positive,
    ensure_sufficient_stock,
    purchase_adjustments,
    usage_delete_adjustment,
    usage_delta,
    usage_update_adjustment,
)

__all__ = [
    "ensure_positive",
    "ensure_sufficient_stock",
    "purchase_adjustments",
    "usage_delete_adjustment",
    "usage_delta",
    "usage_update_adjustment",
]
