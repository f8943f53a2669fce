"""Reporting endpoints."""

from fastapi import APIRouter, Depends, Query

from stockroom.api.dependencies import get_monthly_report_use_case
from stockroom.api.security import require_caller
from stockroom.application.dto.responses import ErrorResponse, MonthlyReportResponse
from stockroom.application.use_cases import GenerateMonthlyReportUseCase

router = APIRouter(
    prefix="/api/reports",
    tags=["reports"],
    dependencies=[Depends(require_caller)],
)


@router.get(
    "/monthly",
    response_model=MonthlyReportResponse,
    responses={400: {"model": ErrorResponse}},
)
async def monthly_report(
    month: str = Query(..., description="Calendar month as YYYY-MM"),
    use_case: GenerateMonthlyReportUseCase = Depends(get_monthly_report_use_case),
) -> MonthlyReportResponse:
    """Purchase and expense totals, usage count and low-stock count for a month."""
    result = await use_case.execute(month)
    return use_case.to_response(result)
