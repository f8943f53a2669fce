"""Purchase (stock inflow) endpoints."""

from fastapi import APIRouter, Depends, status
from starlette.responses import Response

from stockroom.api.dependencies import (
    get_delete_purchase_use_case,
    get_purchase_store_dep,
    get_record_purchase_use_case,
)
from stockroom.api.security import require_caller, require_manager
from stockroom.application.dto.requests import CreatePurchaseRequest
from stockroom.application.dto.responses import ErrorResponse, PurchaseResponse
from stockroom.application.use_cases import DeletePurchaseUseCase, RecordPurchaseUseCase
from stockroom.core.exceptions import PurchaseNotFoundError
from stockroom.core.interfaces import IPurchaseStore

router = APIRouter(
    prefix="/api/purchases",
    tags=["purchases"],
    dependencies=[Depends(require_caller)],
)


@router.get("", response_model=list[PurchaseResponse])
async def list_purchases(
    limit: int | None = None,
    offset: int = 0,
    store: IPurchaseStore = Depends(get_purchase_store_dep),
) -> list[PurchaseResponse]:
    purchases = await store.list_purchases(limit=limit, offset=offset)
    return [PurchaseResponse.from_entity(p) for p in purchases]


@router.get(
    "/{purchase_id}",
    response_model=PurchaseResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_purchase(
    purchase_id: int,
    store: IPurchaseStore = Depends(get_purchase_store_dep),
) -> PurchaseResponse:
    purchase = await store.get_purchase(purchase_id)
    if purchase is None:
        raise PurchaseNotFoundError(purchase_id)
    return PurchaseResponse.from_entity(purchase)


@router.post(
    "",
    response_model=PurchaseResponse,
    responses={400: {"model": ErrorResponse}},
    dependencies=[Depends(require_manager)],
)
async def record_purchase(
    request: CreatePurchaseRequest,
    use_case: RecordPurchaseUseCase = Depends(get_record_purchase_use_case),
) -> PurchaseResponse:
    """Record a purchase and add its quantities to stock."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.delete(
    "/{purchase_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
    dependencies=[Depends(require_manager)],
)
async def delete_purchase(
    purchase_id: int,
    use_case: DeletePurchaseUseCase = Depends(get_delete_purchase_use_case),
) -> Response:
    """Delete a purchase. Stock it added is not removed."""
    await use_case.execute(purchase_id)
    return Response(status_code=status.HTTP_200_OK)
