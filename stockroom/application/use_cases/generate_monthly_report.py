"""Generate Monthly Report Use Case."""

import datetime as dt
import re
from dataclasses import dataclass

from stockroom.application.dto.responses import MonthlyReportResponse
from stockroom.config import get_logger
from stockroom.core.entities.report import MonthlyReport
from stockroom.core.exceptions import InvalidInputError
from stockroom.core.interfaces.expense_store import IExpenseStore
from stockroom.core.interfaces.purchase_store import IPurchaseStore
from stockroom.core.interfaces.stock_store import IStockStore
from stockroom.core.interfaces.usage_store import IUsageStore

logger = get_logger(__name__)

MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def month_window(month: str) -> tuple[dt.date, dt.date]:
    """Return [first day of month, first day of next month) for 'YYYY-MM'."""
    match = MONTH_PATTERN.match(month or "")
    if not match or not 1 <= int(match.group(2)) <= 12:
        raise InvalidInputError(
            f"Invalid month '{month}', expected YYYY-MM", field="month", value=month
        )
    year, mon = int(match.group(1)), int(match.group(2))
    start = dt.date(year, mon, 1)
    end = dt.date(year + 1, 1, 1) if mon == 12 else dt.date(year, mon + 1, 1)
    return start, end


@dataclass
class GenerateMonthlyReportResult:
    report: MonthlyReport


class GenerateMonthlyReportUseCase:
    """Aggregate purchases, expenses, usages and low stock for one month."""

    def __init__(
        self,
        purchase_store: IPurchaseStore | None = None,
        expense_store: IExpenseStore | None = None,
        usage_store: IUsageStore | None = None,
        stock_store: IStockStore | None = None,
    ):
        self._purchase_store = purchase_store
        self._expense_store = expense_store
        self._usage_store = usage_store
        self._stock_store = stock_store

    async def _get_purchase_store(self) -> IPurchaseStore:
        if self._purchase_store is None:
            from stockroom.infrastructure.storage.sqlite import get_purchase_store

            self._purchase_store = await get_purchase_store()
        return self._purchase_store

    async def _get_expense_store(self) -> IExpenseStore:
        if self._expense_store is None:
            from stockroom.infrastructure.storage.sqlite import get_expense_store

            self._expense_store = await get_expense_store()
        return self._expense_store

    async def _get_usage_store(self) -> IUsageStore:
        if self._usage_store is None:
            from stockroom.infrastructure.storage.sqlite import get_usage_store

            self._usage_store = await get_usage_store()
        return self._usage_store

    async def _get_stock_store(self) -> IStockStore:
        if self._stock_store is None:
            from stockroom.infrastructure.storage.sqlite import get_stock_store

            self._stock_store = await get_stock_store()
        return self._stock_store

    async def execute(self, month: str) -> GenerateMonthlyReportResult:
        """Execute monthly report use case."""
        start, end = month_window(month)

        purchases = await (await self._get_purchase_store()).sum_totals_between(start, end)
        expenses = await (await self._get_expense_store()).sum_amounts_between(start, end)
        usage_count = await (await self._get_usage_store()).count_between(start, end)
        low_stock = await (await self._get_stock_store()).count_low_stock()

        report = MonthlyReport(
            month=month,
            start=start,
            end=end,
            purchases=purchases,
            expenses=expenses,
            low_stock=low_stock,
            usage_count=usage_count,
        )
        logger.info(
            "monthly_report_generated",
            month=month,
            purchases=purchases,
            expenses=expenses,
        )
        return GenerateMonthlyReportResult(report=report)

    def to_response(self, result: GenerateMonthlyReportResult) -> MonthlyReportResponse:
        """Convert result to API response."""
        return MonthlyReportResponse.from_entity(result.report)
