"""
Pricing & stock validation.

Computes the authoritative order total from the store's current prices
and checks stock, inside the caller's transaction. Read-only.
"""
from dataclasses import dataclass
from typing import List, Sequence
import logging

from core.domain.exceptions import EmptyOrder, InsufficientStock, ProductNotFound
from core.domain.repositories import ProductRepository
from core.domain.value_objects import Money, RequestedItem


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricedLine:
    """A requested item with the unit price captured at validation time."""
    product_id: int
    quantity: int
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class PricedOrder:
    """Validated line items, in caller order, and their grand total."""
    lines: List[PricedLine]
    total: Money


class PricingValidator:
    """
    Validates requested items against current price and stock.

    Prices and stock are always re-read through a locking read, so values
    the client saw earlier (a cart listing, say) are never trusted, and
    the rows stay locked until the surrounding transaction ends.
    """

    def __init__(self, products: ProductRepository, currency: str = "KRW"):
        """
        Args:
            products: Product repository bound to the active transaction
            currency: Currency of the computed total
        """
        self._products = products
        self._currency = currency

    async def validate(self, items: Sequence[RequestedItem]) -> PricedOrder:
        """
        Price every item and check its stock.

        Args:
            items: Non-empty requested items, one per product

        Returns:
            PricedOrder with per-item frozen prices and the total

        Raises:
            EmptyOrder: No items
            ProductNotFound: A product does not exist
            InsufficientStock: Quantity exceeds the stock on hand
        """
        if not items:
            raise EmptyOrder()

        products = await self._products.lock_for_update(item.product_id for item in items)

        lines: List[PricedLine] = []
        total = Money.zero(self._currency)

        for item in items:
            product = products.get(item.product_id)

            if product is None:
                raise ProductNotFound(item.product_id)

            if not product.has_stock_for(item.quantity):
                raise InsufficientStock(
                    product_id=product.product_id,
                    requested=item.quantity,
                    available=product.stock,
                    product_name=product.name,
                )

            line = PricedLine(
                product_id=product.product_id,
                quantity=item.quantity,
                unit_price=product.price,
            )
            lines.append(line)
            total = total + line.line_total

        logger.debug(f"Validated {len(lines)} line item(s), total {total}")
        return PricedOrder(lines=lines, total=total)
