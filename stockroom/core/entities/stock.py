"""Stock catalog domain entities."""

from pydantic import BaseModel


class StockItem(BaseModel):
    """Catalog entry with on-hand quantity and reorder threshold.

    Bounds (quantity >= 0, unit_price > 0, reorder_level >= 0) are enforced
    where items enter the system, not here: an administrative overwrite may
    store any value and the entity must still load.
    """

    id: int | None = None
    name: str
    category: str
    quantity: float = 0.0
    unit_price: float
    reorder_level: float = 0.0

    @property
    def is_low_stock(self) -> bool:
        """True when quantity has fallen to or below the reorder level."""
        return self.quantity <= self.reorder_level
