"""Record Usage Use Case: stock outflow with sufficiency check."""

from dataclasses import dataclass

from stockroom.application.dto.requests import CreateUsageRequest
from stockroom.application.dto.responses import UsageResponse
from stockroom.config import get_logger
from stockroom.core.entities.caller import CallerIdentity
from stockroom.core.entities.stock import StockItem
from stockroom.core.entities.usage import Usage
from stockroom.core.exceptions import InvalidInputError, ReferenceNotFoundError
from stockroom.core.interfaces.ledger import ILedger, ILedgerTransaction
from stockroom.core.services.reconciliation import ensure_positive, ensure_sufficient_stock

logger = get_logger(__name__)


async def resolve_stock_item(
    tx: ILedgerTransaction,
    stock_item_id: int | None,
) -> StockItem:
    """Load the referenced stock item or raise the matching input error."""
    if stock_item_id is None:
        raise InvalidInputError("Stock item ID cannot be null", field="stockItemId")
    item = await tx.get_stock_item(stock_item_id)
    if item is None:
        raise ReferenceNotFoundError(
            "stockItemId",
            stock_item_id,
            message=f"Stock item not found with ID: {stock_item_id}",
        )
    return item


@dataclass
class RecordUsageResult:
    """Result of recording a usage."""

    usage: Usage
    remaining_quantity: float


class RecordUsageUseCase:
    """Record consumption of a stock item and decrement its quantity."""

    def __init__(self, ledger: ILedger | None = None):
        self._ledger = ledger

    async def _get_ledger(self) -> ILedger:
        if self._ledger is None:
            from stockroom.infrastructure.storage.sqlite import get_ledger

            self._ledger = await get_ledger()
        return self._ledger

    async def execute(
        self,
        request: CreateUsageRequest,
        caller: CallerIdentity | None = None,
    ) -> RecordUsageResult:
        """Execute record usage use case."""
        logger.info(
            "record_usage_started",
            stock_item_id=request.stock_item_id,
            quantity_used=request.quantity_used,
            user=caller.username if caller else None,
        )

        ledger = await self._get_ledger()
        async with ledger.transaction() as tx:
            item = await resolve_stock_item(tx, request.stock_item_id)
            quantity_used = ensure_positive(
                request.quantity_used,
                "quantityUsed",
                "Quantity used must be greater than 0",
            )
            ensure_sufficient_stock(item, quantity_used)

            usage = Usage(
                stock_item_id=item.id,
                quantity_used=quantity_used,
                user=caller.username if caller else None,
            )
            if request.date is not None:
                usage.date = request.date

            remaining = await tx.adjust_stock_quantity(item.id, -quantity_used)
            usage = await tx.add_usage(usage)

        logger.info(
            "record_usage_complete",
            usage_id=usage.id,
            stock_item_id=usage.stock_item_id,
            remaining_qty=remaining,
        )
        return RecordUsageResult(usage=usage, remaining_quantity=remaining)

    def to_response(self, result: RecordUsageResult) -> UsageResponse:
        """Convert result to API response."""
        return UsageResponse.from_entity(result.usage)
