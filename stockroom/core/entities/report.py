"""Reporting value objects."""

import datetime as dt

from pydantic import BaseModel


class MonthlyReport(BaseModel):
    """Read-only aggregate over one calendar month."""

    month: str  # YYYY-MM
    start: dt.date
    end: dt.date  # exclusive
    purchases: float = 0.0
    expenses: float = 0.0
    low_stock: int = 0
    usage_count: int = 0
