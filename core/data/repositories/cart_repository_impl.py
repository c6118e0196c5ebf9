"""SQLAlchemy implementation of CartRepository."""

from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import CartEntry
from core.domain.repositories import CartRepository

from ..mappers import CartMapper
from ..models.catalog_model import ProductModel
from ..models.member_model import CartModel


class SqlAlchemyCartRepository(CartRepository):
    """Concrete implementation of CartRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find(self, member_id: int, product_id: int) -> Optional[CartEntry]:
        result = await self._session.execute(
            select(CartModel).where(
                CartModel.member_id == member_id,
                CartModel.product_id == product_id,
            )
        )
        model = result.scalars().first()
        return CartMapper.to_domain(model) if model else None

    async def add(self, entry: CartEntry) -> int:
        cart_model = CartMapper.to_persistence(entry)
        self._session.add(cart_model)
        await self._session.flush()
        return cart_model.cart_id

    async def increase_quantity(self, cart_id: int, quantity: int) -> None:
        await self._session.execute(
            update(CartModel)
            .where(CartModel.cart_id == cart_id)
            .values(quantity=CartModel.quantity + quantity)
            .execution_options(synchronize_session=False)
        )

    async def set_quantity(self, cart_id: int, quantity: int) -> bool:
        result = await self._session.execute(
            update(CartModel)
            .where(CartModel.cart_id == cart_id)
            .values(quantity=quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def remove(self, cart_id: int) -> bool:
        result = await self._session.execute(
            delete(CartModel)
            .where(CartModel.cart_id == cart_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def delete_for_products(self, member_id: int, product_ids: Iterable[int]) -> int:
        """Delete the member's entries whose product is in product_ids.

        Args:
            member_id: Owner of the cart
            product_ids: Products to remove from the cart

        Returns:
            Number of deleted rows
        """
        ids = list(set(product_ids))
        if not ids:
            return 0

        result = await self._session.execute(
            delete(CartModel)
            .where(
                CartModel.member_id == member_id,
                CartModel.product_id.in_(ids),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def list_with_products(self, member_id: int) -> List[Dict[str, Any]]:
        """Cart rows joined with product name, price and image.

        Args:
            member_id: Owner of the cart

        Returns:
            List of row mappings
        """
        result = await self._session.execute(
            select(
                CartModel.cart_id,
                CartModel.product_id,
                CartModel.quantity,
                ProductModel.name,
                ProductModel.price,
                ProductModel.image_url,
            )
            .join(ProductModel, ProductModel.product_id == CartModel.product_id)
            .where(CartModel.member_id == member_id)
            .order_by(CartModel.cart_id)
        )
        return [dict(row) for row in result.mappings().all()]
