"""Delete Purchase Use Case."""

from stockroom.config import get_logger
from stockroom.core.exceptions import PurchaseNotFoundError
from stockroom.core.interfaces.ledger import ILedger

logger = get_logger(__name__)


class DeletePurchaseUseCase:
    """Delete a purchase and its items.

    Stock added by the purchase is left in place. Reversing it would need a
    sufficiency check against stock that may since have been consumed, and
    no reversal policy has been agreed.
    """

    def __init__(self, ledger: ILedger | None = None):
        self._ledger = ledger

    async def _get_ledger(self) -> ILedger:
        if self._ledger is None:
            from stockroom.infrastructure.storage.sqlite import get_ledger

            self._ledger = await get_ledger()
        return self._ledger

    async def execute(self, purchase_id: int) -> None:
        ledger = await self._get_ledger()
        async with ledger.transaction() as tx:
            purchase = await tx.get_purchase(purchase_id)
            if purchase is None:
                raise PurchaseNotFoundError(purchase_id)
            await tx.delete_purchase(purchase_id)

        logger.info(
            "purchase_deleted",
            purchase_id=purchase_id,
            stock_reversed=False,
            total_amount=purchase.total_amount,
        )
