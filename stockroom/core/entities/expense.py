"""Expense ledger entities."""

import datetime as dt

from pydantic import BaseModel, Field


class Expense(BaseModel):
    """Append-style expense record with no effect on stock."""

    id: int | None = None
    category: str
    amount: float
    description: str
    date: dt.date = Field(default_factory=dt.date.today)
