"""API route modules."""

from stockroom.api.routes.expenses import router as expenses_router
from stockroom.api.routes.health import router as health_router
from stockroom.api.routes.purchases import router as purchases_router
from stockroom.api.routes.reports import router as reports_router
from stockroom.api.routes.stocks import router as stocks_router
from stockroom.api.routes.suppliers import router as suppliers_router
from stockroom.api.routes.usages import router as usages_router

__all__ = [
    "health_router",
    "stocks_router",
    "suppliers_router",
    "purchases_router",
    "usages_router",
    "expenses_router",
    "reports_router",
]
