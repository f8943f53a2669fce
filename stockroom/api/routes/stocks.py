"""Stock catalog endpoints."""

from fastapi import APIRouter, Depends, status
from starlette.responses import Response

from stockroom.api.dependencies import get_stock_store_dep
from stockroom.api.security import require_admin, require_caller, require_manager
from stockroom.application.dto.requests import CreateStockItemRequest, UpdateStockItemRequest
from stockroom.application.dto.responses import ErrorResponse, StockItemResponse
from stockroom.core.entities.stock import StockItem
from stockroom.core.exceptions import StockItemNotFoundError
from stockroom.core.interfaces import IStockStore

router = APIRouter(
    prefix="/api/stocks",
    tags=["stocks"],
    dependencies=[Depends(require_caller)],
)


@router.get("", response_model=list[StockItemResponse])
async def list_stock_items(
    limit: int | None = None,
    offset: int = 0,
    store: IStockStore = Depends(get_stock_store_dep),
) -> list[StockItemResponse]:
    """List stock items."""
    items = await store.list_items(limit=limit, offset=offset)
    return [StockItemResponse.from_entity(item) for item in items]


@router.get("/low-stock", response_model=list[StockItemResponse])
async def list_low_stock(
    store: IStockStore = Depends(get_stock_store_dep),
) -> list[StockItemResponse]:
    """List items at or below their reorder level."""
    items = await store.list_low_stock()
    return [StockItemResponse.from_entity(item) for item in items]


@router.get(
    "/{item_id}",
    response_model=StockItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_stock_item(
    item_id: int,
    store: IStockStore = Depends(get_stock_store_dep),
) -> StockItemResponse:
    """Get a stock item by ID."""
    item = await store.get_item(item_id)
    if item is None:
        raise StockItemNotFoundError(item_id)
    return StockItemResponse.from_entity(item)


@router.post(
    "",
    response_model=StockItemResponse,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
    dependencies=[Depends(require_manager)],
)
async def create_stock_item(
    request: CreateStockItemRequest,
    store: IStockStore = Depends(get_stock_store_dep),
) -> StockItemResponse:
    """Add an item to the catalog."""
    item = await store.create_item(
        StockItem(
            name=request.name,
            category=request.category,
            quantity=request.quantity,
            unit_price=request.unit_price,
            reorder_level=request.reorder_level,
        )
    )
    return StockItemResponse.from_entity(item)


@router.put(
    "/{item_id}",
    response_model=StockItemResponse,
    responses={404: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
    dependencies=[Depends(require_manager)],
)
async def update_stock_item(
    item_id: int,
    request: UpdateStockItemRequest,
    store: IStockStore = Depends(get_stock_store_dep),
) -> StockItemResponse:
    """Overwrite every field of a stock item, quantity included."""
    updated = await store.update_item(
        StockItem(
            id=item_id,
            name=request.name,
            category=request.category,
            quantity=request.quantity,
            unit_price=request.unit_price,
            reorder_level=request.reorder_level,
        )
    )
    if updated is None:
        raise StockItemNotFoundError(item_id)
    return StockItemResponse.from_entity(updated)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={404: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
    dependencies=[Depends(require_admin)],
)
async def delete_stock_item(
    item_id: int,
    store: IStockStore = Depends(get_stock_store_dep),
) -> Response:
    """Delete a stock item. Purchases and usages referencing it are kept."""
    if not await store.delete_item(item_id):
        raise StockItemNotFoundError(item_id)
    return Response(status_code=status.HTTP_200_OK)
