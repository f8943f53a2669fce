"""Supplier directory endpoints."""

from fastapi import APIRouter, Depends, status
from starlette.responses import Response

from stockroom.api.dependencies import get_supplier_store_dep
from stockroom.api.security import require_admin, require_caller, require_manager
from stockroom.application.dto.requests import CreateSupplierRequest, UpdateSupplierRequest
from stockroom.application.dto.responses import ErrorResponse, SupplierResponse
from stockroom.core.entities.supplier import Supplier
from stockroom.core.exceptions import SupplierNotFoundError
from stockroom.core.interfaces import ISupplierStore

router = APIRouter(
    prefix="/api/suppliers",
    tags=["suppliers"],
    dependencies=[Depends(require_caller)],
)


@router.get("", response_model=list[SupplierResponse])
async def list_suppliers(
    limit: int | None = None,
    offset: int = 0,
    store: ISupplierStore = Depends(get_supplier_store_dep),
) -> list[SupplierResponse]:
    suppliers = await store.list_suppliers(limit=limit, offset=offset)
    return [SupplierResponse.from_entity(s) for s in suppliers]


@router.get(
    "/{supplier_id}",
    response_model=SupplierResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_supplier(
    supplier_id: int,
    store: ISupplierStore = Depends(get_supplier_store_dep),
) -> SupplierResponse:
    supplier = await store.get(supplier_id)
    if supplier is None:
        raise SupplierNotFoundError(supplier_id)
    return SupplierResponse.from_entity(supplier)


@router.post(
    "",
    response_model=SupplierResponse,
    responses={400: {"model": ErrorResponse}},
    dependencies=[Depends(require_manager)],
)
async def create_supplier(
    request: CreateSupplierRequest,
    store: ISupplierStore = Depends(get_supplier_store_dep),
) -> SupplierResponse:
    supplier = await store.create(Supplier(**request.model_dump()))
    return SupplierResponse.from_entity(supplier)


@router.put(
    "/{supplier_id}",
    response_model=SupplierResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    dependencies=[Depends(require_manager)],
)
async def update_supplier(
    supplier_id: int,
    request: UpdateSupplierRequest,
    store: ISupplierStore = Depends(get_supplier_store_dep),
) -> SupplierResponse:
    """Replace every field of a supplier."""
    updated = await store.update(Supplier(id=supplier_id, **request.model_dump()))
    if updated is None:
        raise SupplierNotFoundError(supplier_id)
    return SupplierResponse.from_entity(updated)


@router.delete(
    "/{supplier_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
    dependencies=[Depends(require_admin)],
)
async def delete_supplier(
    supplier_id: int,
    store: ISupplierStore = Depends(get_supplier_store_dep),
) -> Response:
    """Delete a supplier. Purchases recorded against it are kept."""
    if not await store.delete(supplier_id):
        raise SupplierNotFoundError(supplier_id)
    return Response(status_code=status.HTTP_200_OK)
