"""Application use cases."""

from stockroom.application.use_cases.delete_purchase import DeletePurchaseUseCase
from stockroom.application.use_cases.delete_usage import DeleteUsageUseCase
from stockroom.application.use_cases.generate_monthly_report import (
    GenerateMonthlyReportResult,
    GenerateMonthlyReportUseCase,
    month_window,
)
from stockroom.application.use_cases.record_purchase import (
    RecordPurchaseResult,
    RecordPurchaseUseCase,
)
from stockroom.application.use_cases.record_usage import (
    RecordUsageResult,
    RecordUsageUseCase,
)
from stockroom.application.use_cases.update_usage import (
    UpdateUsageResult,
    UpdateUsageUseCase,
)

__all__ = [
    "RecordPurchaseUseCase",
    "RecordPurchaseResult",
    "DeletePurchaseUseCase",
    "RecordUsageUseCase",
    "RecordUsageResult",
    "UpdateUsageUseCase",
    "UpdateUsageResult",
    "DeleteUsageUseCase",
    "GenerateMonthlyReportUseCase",
    "GenerateMonthlyReportResult",
    "month_window",
]
