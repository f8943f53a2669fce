"""Record Purchase Use Case: validated stock inflow across many items."""

from dataclasses import dataclass, field

from stockroom.application.dto.requests import CreatePurchaseRequest
from stockroom.application.dto.responses import PurchaseResponse
from stockroom.config import get_logger
from stockroom.core.entities.purchase import Purchase, PurchaseItem
from stockroom.core.exceptions import InvalidInputError, ReferenceNotFoundError
from stockroom.core.interfaces.ledger import ILedger, ILedgerTransaction
from stockroom.core.services.reconciliation import ensure_positive, purchase_adjustments

logger = get_logger(__name__)


@dataclass
class RecordPurchaseResult:
    """Result of recording a purchase."""

    purchase: Purchase
    stock_quantities: dict[int, float] = field(default_factory=dict)


class RecordPurchaseUseCase:
    """Record a purchase and increase every referenced stock item.

    All validation happens before the first write, inside the same ledger
    transaction as the writes, so a rejected purchase leaves no trace.
    """

    def __init__(self, ledger: ILedger | None = None):
        self._ledger = ledger

    async def _get_ledger(self) -> ILedger:
        if self._ledger is None:
            from stockroom.infrastructure.storage.sqlite import get_ledger

            self._ledger = await get_ledger()
        return self._ledger

    async def execute(self, request: CreatePurchaseRequest) -> RecordPurchaseResult:
        """Execute record purchase use case."""
        logger.info(
            "record_purchase_started",
            supplier_id=request.supplier_id,
            items=len(request.items or []),
        )

        ledger = await self._get_ledger()
        async with ledger.transaction() as tx:
            purchase = await self._validate(tx, request)

            quantities = {}
            for stock_item_id, quantity in purchase_adjustments(purchase).items():
                quantities[stock_item_id] = await tx.adjust_stock_quantity(
                    stock_item_id, quantity
                )
            purchase = await tx.add_purchase(purchase)

        logger.info(
            "record_purchase_complete",
            purchase_id=purchase.id,
            total_amount=purchase.total_amount,
        )
        return RecordPurchaseResult(purchase=purchase, stock_quantities=quantities)

    async def _validate(
        self,
        tx: ILedgerTransaction,
        request: CreatePurchaseRequest,
    ) -> Purchase:
        """Check the request in order and build the Purchase to persist."""
        supplier_id = request.supplier_id
        if supplier_id is None or not await tx.supplier_exists(supplier_id):
            shown = "null" if supplier_id is None else supplier_id
            raise ReferenceNotFoundError(
                "supplierId",
                supplier_id,
                message=f"Invalid or not found supplier ID: {shown}",
            )

        if not request.items:
            raise InvalidInputError("At least one item is required", field="items")

        items = []
        for line in request.items:
            if line.stock_item_id is None:
                raise InvalidInputError(
                    "Stock item ID cannot be null", field="stockItemId"
                )
            if await tx.get_stock_item(line.stock_item_id) is None:
                raise ReferenceNotFoundError(
                    "stockItemId",
                    line.stock_item_id,
                    message=f"Stock item not found with ID: {line.stock_item_id}",
                )
            quantity = ensure_positive(
                line.quantity, "quantity", "Item quantity must be greater than 0"
            )
            price = ensure_positive(
                line.price, "price", "Item price must be greater than 0"
            )
            items.append(
                PurchaseItem(
                    stock_item_id=line.stock_item_id,
                    quantity=quantity,
                    price=price,
                )
            )

        purchase = Purchase(supplier_id=supplier_id, items=items)
        if request.date is not None:
            purchase.date = request.date
        return purchase

    def to_response(self, result: RecordPurchaseResult) -> PurchaseResponse:
        """Convert result to API response."""
        return PurchaseResponse.from_entity(result.purchase)
