"""SQLAlchemy implementation of ProductRepository."""

from typing import Dict, Iterable

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import Product
from core.domain.repositories import ProductRepository

from ..mappers import ProductMapper
from ..models.catalog_model import ProductModel


class SqlAlchemyProductRepository(ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy.

    On PostgreSQL/MySQL the locking read is a row-level SELECT ... FOR UPDATE.
    SQLite ignores FOR UPDATE; there the connection pool opens every
    transaction with BEGIN IMMEDIATE, which serializes writers instead.
    """

    def __init__(self, session: AsyncSession, currency: str = "KRW") -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
            currency: Currency the catalog prices are expressed in
        """
        self._session = session
        self._currency = currency

    async def lock_for_update(self, product_ids: Iterable[int]) -> Dict[int, Product]:
        """Locking read of price and stock, rows locked in ascending id order.

        Args:
            product_ids: Products to read

        Returns:
            Map of product_id to Product; missing products are absent
        """
        ids = sorted(set(product_ids))
        if not ids:
            return {}

        result = await self._session.execute(
            select(ProductModel)
            .where(ProductModel.product_id.in_(ids))
            .order_by(ProductModel.product_id)
            .with_for_update()
            # Always take the store's values over anything cached in the session
            .execution_options(populate_existing=True)
        )
        models = result.scalars().all()

        return {
            model.product_id: ProductMapper.to_domain(model, self._currency)
            for model in models
        }

    async def decrement_stock(self, product_id: int, quantity: int) -> None:
        """Relative stock decrement (stock = stock - quantity).

        Args:
            product_id: Product to update
            quantity: Units to remove
        """
        await self._session.execute(
            update(ProductModel)
            .where(ProductModel.product_id == product_id)
            .values(stock=ProductModel.stock - quantity)
            .execution_options(synchronize_session=False)
        )
