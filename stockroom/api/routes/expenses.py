"""Expense ledger endpoints."""

from fastapi import APIRouter, Depends, status
from starlette.responses import Response

from stockroom.api.dependencies import get_expense_store_dep
from stockroom.api.security import require_caller, require_manager
from stockroom.application.dto.requests import CreateExpenseRequest, UpdateExpenseRequest
from stockroom.application.dto.responses import ErrorResponse, ExpenseResponse
from stockroom.core.entities.expense import Expense
from stockroom.core.exceptions import ExpenseNotFoundError
from stockroom.core.interfaces import IExpenseStore

router = APIRouter(
    prefix="/api/expenses",
    tags=["expenses"],
    dependencies=[Depends(require_caller)],
)


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(
    limit: int | None = None,
    offset: int = 0,
    store: IExpenseStore = Depends(get_expense_store_dep),
) -> list[ExpenseResponse]:
    expenses = await store.list_expenses(limit=limit, offset=offset)
    return [ExpenseResponse.from_entity(e) for e in expenses]


@router.get(
    "/{expense_id}",
    response_model=ExpenseResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_expense(
    expense_id: int,
    store: IExpenseStore = Depends(get_expense_store_dep),
) -> ExpenseResponse:
    expense = await store.get(expense_id)
    if expense is None:
        raise ExpenseNotFoundError(expense_id)
    return ExpenseResponse.from_entity(expense)


@router.post(
    "",
    response_model=ExpenseResponse,
    responses={400: {"model": ErrorResponse}},
    dependencies=[Depends(require_manager)],
)
async def create_expense(
    request: CreateExpenseRequest,
    store: IExpenseStore = Depends(get_expense_store_dep),
) -> ExpenseResponse:
    """Record an expense dated today unless a date is given."""
    expense = Expense(
        category=request.category,
        amount=request.amount,
        description=request.description,
    )
    if request.date is not None:
        expense.date = request.date
    return ExpenseResponse.from_entity(await store.create(expense))


@router.put(
    "/{expense_id}",
    response_model=ExpenseResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    dependencies=[Depends(require_manager)],
)
async def update_expense(
    expense_id: int,
    request: UpdateExpenseRequest,
    store: IExpenseStore = Depends(get_expense_store_dep),
) -> ExpenseResponse:
    """Edit an expense. An omitted date keeps the stored one."""
    existing = await store.get(expense_id)
    if existing is None:
        raise ExpenseNotFoundError(expense_id)

    existing.category = request.category
    existing.amount = request.amount
    existing.description = request.description
    if request.date is not None:
        existing.date = request.date

    updated = await store.update(existing)
    if updated is None:
        raise ExpenseNotFoundError(expense_id)
    return ExpenseResponse.from_entity(updated)


@router.delete(
    "/{expense_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
    dependencies=[Depends(require_manager)],
)
async def delete_expense(
    expense_id: int,
    store: IExpenseStore = Depends(get_expense_store_dep),
) -> Response:
    if not await store.delete(expense_id):
        raise ExpenseNotFoundError(expense_id)
    return Response(status_code=status.HTTP_200_OK)
