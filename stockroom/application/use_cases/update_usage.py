"""Update Usage Use Case: re-reconcile an edited usage."""

from dataclasses import dataclass

from stockroom.application.dto.requests import UpdateUsageRequest
from stockroom.application.dto.responses import UsageResponse
from stockroom.application.use_cases.record_usage import resolve_stock_item
from stockroom.config import get_logger
from stockroom.core.entities.caller import CallerIdentity
from stockroom.core.entities.usage import Usage
from stockroom.core.exceptions import ForbiddenError, UsageNotFoundError
from stockroom.core.interfaces.ledger import ILedger
from stockroom.core.services.reconciliation import ensure_positive, usage_update_adjustment

logger = get_logger(__name__)


@dataclass
class UpdateUsageResult:
    """Result of updating a usage."""

    usage: Usage
    adjustment: float


class UpdateUsageUseCase:
    """Edit a usage and apply the change in quantity used to stock.

    The adjustment is ``-(new - old)`` and is applied to the stock item the
    request references. When the request moves the usage to another stock
    item, the old item is not credited and the new one is only charged the
    difference.
    """

    def __init__(self, ledger: ILedger | None = None):
        self._ledger = ledger

    async def _get_ledger(self) -> ILedger:
        if self._ledger is None:
            from stockroom.infrastructure.storage.sqlite import get_ledger

            self._ledger = await get_ledger()
        return self._ledger

    async def execute(
        self,
        usage_id: int,
        request: UpdateUsageRequest,
        caller: CallerIdentity,
    ) -> UpdateUsageResult:
        """Execute update usage use case."""
        logger.info(
            "update_usage_started",
            usage_id=usage_id,
            stock_item_id=request.stock_item_id,
            quantity_used=request.quantity_used,
            user=caller.username,
        )

        ledger = await self._get_ledger()
        async with ledger.transaction() as tx:
            usage = await tx.get_usage(usage_id)
            if usage is None:
                raise UsageNotFoundError(usage_id)

            if not usage.is_owned_by(caller.username):
                raise ForbiddenError(
                    "You are not authorized to update this record",
                    username=caller.username,
                )

            item = await resolve_stock_item(tx, request.stock_item_id)
            new_quantity = ensure_positive(
                request.quantity_used,
                "quantityUsed",
                "Quantity used must be greater than 0",
            )

            adjustment = usage_update_adjustment(item, usage.quantity_used, new_quantity)
            if adjustment != 0:
                await tx.adjust_stock_quantity(item.id, adjustment)

            usage.stock_item_id = item.id
            usage.quantity_used = new_quantity
            if request.date is not None:
                usage.date = request.date
            usage = await tx.save_usage(usage)

        logger.info(
            "update_usage_complete",
            usage_id=usage.id,
            adjustment=adjustment,
        )
        return UpdateUsageResult(usage=usage, adjustment=adjustment)

    def to_response(self, result: UpdateUsageResult) -> UsageResponse:
        """Convert result to API response."""
        return UsageResponse.from_entity(result.usage)
