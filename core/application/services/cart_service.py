"""Application service for the shopping cart (outside of order placement)."""

from typing import List
import logging

from core.application.dtos.cart_dto import AddCartItemRequest, CartItemDTO
from core.data.uow import create_uow
from core.domain.entities import CartEntry
from core.infrastructure.database.pool import ConnectionPool


logger = logging.getLogger(__name__)


class CartService:
    """Cart listing and edits."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    async def list_items(self, member_id: int) -> List[CartItemDTO]:
        async with create_uow(self._pool) as uow:
            rows = await uow.cart.list_with_products(member_id)
            return [CartItemDTO(**row) for row in rows]

    async def add_item(self, request: AddCartItemRequest) -> int:
        """Add a product to the cart.

        If the product is already in the member's cart its quantity is
        increased instead of adding a second row.

        Args:
            request: AddCartItemRequest DTO

        Returns:
            cart_id of the new or updated row
        """
        async with create_uow(self._pool) as uow:
            existing = await uow.cart.find(request.member_id, request.product_id)

            if existing is not None:
                await uow.cart.increase_quantity(existing.cart_id, request.quantity)
                cart_id = existing.cart_id
            else:
                cart_id = await uow.cart.add(
                    CartEntry(
                        member_id=request.member_id,
                        product_id=request.product_id,
                        quantity=request.quantity,
                    )
                )

            await uow.commit()

        logger.debug(f"Cart row {cart_id} updated for member {request.member_id}")
        return cart_id

    async def update_quantity(self, cart_id: int, quantity: int) -> bool:
        """Set a cart row's quantity. Returns False if the row does not exist."""
        async with create_uow(self._pool) as uow:
            updated = await uow.cart.set_quantity(cart_id, quantity)
            await uow.commit()
        return updated

    async def remove_item(self, cart_id: int) -> bool:
        """Delete a cart row. Returns False if the row does not exist."""
        async with create_uow(self._pool) as uow:
            removed = await uow.cart.remove(cart_id)
            await uow.commit()
        return removed
