"""Delete Usage Use Case: remove a usage and credit its stock back."""

from stockroom.config import get_logger
from stockroom.core.exceptions import UsageNotFoundError
from stockroom.core.interfaces.ledger import ILedger
from stockroom.core.services.reconciliation import usage_delete_adjustment

logger = get_logger(__name__)


class DeleteUsageUseCase:
    """Delete a usage, returning its quantity to the stock item.

    The credit is skipped when the stock item has since been deleted.
    """

    def __init__(self, ledger: ILedger | None = None):
        self._ledger = ledger

    async def _get_ledger(self) -> ILedger:
        if self._ledger is None:
            from stockroom.infrastructure.storage.sqlite import get_ledger

            self._ledger = await get_ledger()
        return self._ledger

    async def execute(self, usage_id: int) -> None:
        ledger = await self._get_ledger()
        async with ledger.transaction() as tx:
            usage = await tx.get_usage(usage_id)
            if usage is None:
                raise UsageNotFoundError(usage_id)

            credited = False
            if await tx.get_stock_item(usage.stock_item_id) is not None:
                await tx.adjust_stock_quantity(
                    usage.stock_item_id, usage_delete_adjustment(usage)
                )
                credited = True
            await tx.delete_usage(usage_id)

        logger.info(
            "usage_deleted",
            usage_id=usage_id,
            stock_item_id=usage.stock_item_id,
            credited=credited,
        )
