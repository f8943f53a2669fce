"""Usage (stock outflow) endpoints."""

from fastapi import APIRouter, Depends, status
from starlette.responses import Response

from stockroom.api.dependencies import (
    get_delete_usage_use_case,
    get_record_usage_use_case,
    get_update_usage_use_case,
    get_usage_store_dep,
)
from stockroom.api.security import require_caller
from stockroom.application.dto.requests import CreateUsageRequest, UpdateUsageRequest
from stockroom.application.dto.responses import ErrorResponse, UsageResponse
from stockroom.application.use_cases import (
    DeleteUsageUseCase,
    RecordUsageUseCase,
    UpdateUsageUseCase,
)
from stockroom.core.entities.caller import CallerIdentity
from stockroom.core.exceptions import UsageNotFoundError
from stockroom.core.interfaces import IUsageStore

router = APIRouter(
    prefix="/api/usages",
    tags=["usages"],
    dependencies=[Depends(require_caller)],
)


@router.get("", response_model=list[UsageResponse])
async def list_usages(
    limit: int | None = None,
    offset: int = 0,
    store: IUsageStore = Depends(get_usage_store_dep),
) -> list[UsageResponse]:
    usages = await store.list_usages(limit=limit, offset=offset)
    return [UsageResponse.from_entity(u) for u in usages]


@router.get(
    "/{usage_id}",
    response_model=UsageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_usage(
    usage_id: int,
    store: IUsageStore = Depends(get_usage_store_dep),
) -> UsageResponse:
    usage = await store.get_usage(usage_id)
    if usage is None:
        raise UsageNotFoundError(usage_id)
    return UsageResponse.from_entity(usage)


@router.post(
    "",
    response_model=UsageResponse,
    responses={400: {"model": ErrorResponse}},
)
async def record_usage(
    request: CreateUsageRequest,
    caller: CallerIdentity = Depends(require_caller),
    use_case: RecordUsageUseCase = Depends(get_record_usage_use_case),
) -> UsageResponse:
    """Record consumption of a stock item by the calling user."""
    result = await use_case.execute(request, caller=caller)
    return use_case.to_response(result)


@router.put(
    "/{usage_id}",
    response_model=UsageResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_usage(
    usage_id: int,
    request: UpdateUsageRequest,
    caller: CallerIdentity = Depends(require_caller),
    use_case: UpdateUsageUseCase = Depends(get_update_usage_use_case),
) -> UsageResponse:
    """Edit a usage. Only the user who recorded it may do so."""
    result = await use_case.execute(usage_id, request, caller)
    return use_case.to_response(result)


@router.delete(
    "/{usage_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
async def delete_usage(
    usage_id: int,
    use_case: DeleteUsageUseCase = Depends(get_delete_usage_use_case),
) -> Response:
    """Delete a usage and return its quantity to stock."""
    await use_case.execute(usage_id)
    return Response(status_code=status.HTTP_200_OK)
