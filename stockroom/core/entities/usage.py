"""Usage (stock outflow) domain entities."""

import datetime as dt

from pydantic import BaseModel, Field


class Usage(BaseModel):
    """Outbound stock event against a single stock item."""

    id: int | None = None
    stock_item_id: int  # FK → stock_items.id (not enforced)
    quantity_used: float
    date: dt.date = Field(default_factory=dt.date.today)
    user: str | None = None  # username of the recording caller

    def is_owned_by(self, username: str | None) -> bool:
        """Usages without a recorded user may be edited by anyone."""
        if self.user is None:
            return True
        return username is not None and self.user == username
