"""
Order placement.

The whole order runs as one unit of work on one pooled connection:

1. Validate price and stock (locking read)
2. Insert the order header with the computed total
3. Insert each line item, then decrement that product's stock
4. Insert the payment
5. Purge the purchased products from the member's cart
6. Commit

Any failure rolls every write back and the connection is always
released. Failures come back as a PlaceOrderResult, never as an exception.
"""
from typing import Dict, Iterable, List, Optional
import logging

from core.application.dtos.order_dto import (
    LineItemRequest,
    OrderHistoryItemDTO,
    PlaceOrderRequest,
    PlaceOrderResult,
)
from core.application.services.cart_purge import CartPurge
from core.application.services.pricing_validator import PricingValidator
from core.data.uow import create_uow
from core.domain.entities import Order, OrderLineItem, Payment
from core.domain.exceptions import EmptyOrder, OrderPlacementError, TransactionFailure
from core.domain.value_objects import RequestedItem, TransactionId
from core.infrastructure.database.pool import ConnectionPool
from core.settings.sections.checkout import CheckoutSettings


logger = logging.getLogger(__name__)


def normalize_line_items(items: Iterable[LineItemRequest]) -> List[RequestedItem]:
    """
    Turn request items into one RequestedItem per product.

    Repeated product references are merged by summing quantities; the
    position of the first occurrence is kept.

    Raises:
        EmptyOrder: No items
    """
    quantities: Dict[int, int] = {}
    for item in items:
        quantities[item.product_id] = quantities.get(item.product_id, 0) + item.quantity

    if not quantities:
        raise EmptyOrder()

    return [
        RequestedItem(product_id=product_id, quantity=quantity)
        for product_id, quantity in quantities.items()
    ]


class OrderPlacementService:
    """
    Coordinates the atomic order placement sequence.

    Concurrency safety is delegated to the store: the validator's locking
    read keeps competing orders for the same products from interleaving
    between validation and stock decrement.
    """

    def __init__(self, pool: ConnectionPool, settings: Optional[CheckoutSettings] = None) -> None:
        """Initialize order placement service.

        Args:
            pool: Connection pool
            settings: Checkout settings (defaults loaded from environment)
        """
        self._pool = pool
        self._settings = settings or CheckoutSettings()

    async def place_order(self, request: PlaceOrderRequest) -> PlaceOrderResult:
        """Place an order.

        Args:
            request: PlaceOrderRequest DTO

        Returns:
            PlaceOrderResult; on failure it carries the error kind and the
            most specific message available
        """
        try:
            items = normalize_line_items(request.items)
        except EmptyOrder as e:
            # Rejected before any connection is taken
            logger.info(f"Order rejected for member {request.member_id}: {e.message}")
            return self._failure(e)

        try:
            result = await self._place(request, items)
        except OrderPlacementError as e:
            logger.warning(f"❌ Order failed for member {request.member_id}: {e.message}")
            return self._failure(e)
        except Exception as e:
            logger.error(
                f"❌ Order transaction failed for member {request.member_id}: "
                f"{type(e).__name__}: {e}",
                exc_info=True,
            )
            return self._failure(TransactionFailure())

        logger.info(
            f"✅ Order {result.order_id} placed for member {request.member_id} "
            f"(total {result.total_price})"
        )
        return result

    async def _place(self, request: PlaceOrderRequest, items: List[RequestedItem]) -> PlaceOrderResult:
        currency = self._settings.currency

        async with create_uow(self._pool, currency) as uow:
            # 1. Authoritative prices and stock
            priced = await PricingValidator(uow.products, currency).validate(items)

            order = Order(
                member_id=request.member_id,
                recipient_name=request.recipient_name,
                recipient_phone=request.recipient_phone,
                shipping_address=request.shipping_address,
                status=self._settings.initial_order_status,
                currency=currency,
            )
            for line in priced.lines:
                order.add_line_item(
                    OrderLineItem(
                        product_id=line.product_id,
                        quantity=line.quantity,
                        price_at_purchase=line.unit_price,
                    )
                )

            if order.total_price != priced.total:
                raise TransactionFailure(
                    f"Order total mismatch: {order.total_price} vs {priced.total}"
                )

            # 2. Order header
            order.order_id = await uow.orders.add(order)

            # 3. Line items and stock, in caller order
            for item in order.line_items:
                item.order_detail_id = await uow.orders.add_line_item(order.order_id, item)
                await uow.products.decrement_stock(item.product_id, item.quantity)

            # 4. Payment
            payment = Payment(
                order_id=order.order_id,
                payment_method=request.payment_method,
                amount=order.total_price,
                transaction_id=TransactionId.generate(self._settings.transaction_id_prefix),
                status=self._settings.payment_status,
            )
            payment.payment_id = await uow.payments.add(payment)

            # 5. Cart
            await CartPurge(uow.cart).purge(request.member_id, order.product_ids)

            # 6. Atomic commit
            await uow.commit()

        return PlaceOrderResult(
            success=True,
            order_id=order.order_id,
            total_price=order.total_price.amount,
            payment_transaction_id=payment.transaction_id.value,
            message="Order placed successfully",
        )

    @staticmethod
    def _failure(error: OrderPlacementError) -> PlaceOrderResult:
        return PlaceOrderResult(success=False, error_kind=error.kind, message=error.message)


class OrderHistoryService:
    """Read-only order history for members."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    async def list_for_member(self, member_id: int) -> List[OrderHistoryItemDTO]:
        """List purchased products across the member's orders, newest first.

        Args:
            member_id: Member ID

        Returns:
            List of OrderHistoryItemDTO instances
        """
        async with create_uow(self._pool) as uow:
            rows = await uow.orders.history_for_member(member_id)
            return [OrderHistoryItemDTO(**row) for row in rows]
