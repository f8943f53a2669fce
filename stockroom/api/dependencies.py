"""
Dependency injection container for FastAPI.

Provides store and use case instances to route handlers.
"""

from functools import lru_cache

from fastapi import Depends

from stockroom.application.use_cases import (
    DeletePurchaseUseCase,
    DeleteUsageUseCase,
    GenerateMonthlyReportUseCase,
    RecordPurchaseUseCase,
    RecordUsageUseCase,
    UpdateUsageUseCase,
)
from stockroom.config import Settings, get_settings
from stockroom.core.interfaces import (
    IExpenseStore,
    ILedger,
    IPurchaseStore,
    IStockStore,
    ISupplierStore,
    IUsageStore,
)
from stockroom.infrastructure.storage.sqlite import (
    get_expense_store,
    get_ledger,
    get_purchase_store,
    get_stock_store,
    get_supplier_store,
    get_usage_store,
)


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Store dependencies
async def get_stock_store_dep() -> IStockStore:
    return await get_stock_store()


async def get_supplier_store_dep() -> ISupplierStore:
    return await get_supplier_store()


async def get_purchase_store_dep() -> IPurchaseStore:
    return await get_purchase_store()


async def get_usage_store_dep() -> IUsageStore:
    return await get_usage_store()


async def get_expense_store_dep() -> IExpenseStore:
    return await get_expense_store()


async def get_ledger_dep() -> ILedger:
    return await get_ledger()


# Use case dependencies
def get_record_purchase_use_case(
    ledger: ILedger = Depends(get_ledger_dep),
) -> RecordPurchaseUseCase:
    return RecordPurchaseUseCase(ledger=ledger)


def get_delete_purchase_use_case(
    ledger: ILedger = Depends(get_ledger_dep),
) -> DeletePurchaseUseCase:
    return DeletePurchaseUseCase(ledger=ledger)


def get_record_usage_use_case(
    ledger: ILedger = Depends(get_ledger_dep),
) -> RecordUsageUseCase:
    return RecordUsageUseCase(ledger=ledger)


def get_update_usage_use_case(
    ledger: ILedger = Depends(get_ledger_dep),
) -> UpdateUsageUseCase:
    return UpdateUsageUseCase(ledger=ledger)


def get_delete_usage_use_case(
    ledger: ILedger = Depends(get_ledger_dep),
) -> DeleteUsageUseCase:
    return DeleteUsageUseCase(ledger=ledger)


def get_monthly_report_use_case(
    purchase_store: IPurchaseStore = Depends(get_purchase_store_dep),
    expense_store: IExpenseStore = Depends(get_expense_store_dep),
    usage_store: IUsageStore = Depends(get_usage_store_dep),
    stock_store: IStockStore = Depends(get_stock_store_dep),
) -> GenerateMonthlyReportUseCase:
    return GenerateMonthlyReportUseCase(
        purchase_store=purchase_store,
        expense_store=expense_store,
        usage_store=usage_store,
        stock_store=stock_store,
    )
