"""Pytest configuration and fixtures shared by the test suite."""

from decimal import Decimal
from typing import List, Optional

import pytest_asyncio
from sqlalchemy import func, select

from core.data.models import (
    CartModel,
    CategoryModel,
    MemberModel,
    OrderDetailModel,
    OrderModel,
    PaymentModel,
    ProductModel,
)
from core.infrastructure.database.pool import ConnectionPool
from core.settings.sections.database import DatabaseSettings


class StoreFixture:
    """Direct table access for arranging and asserting test state."""

    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    async def add_category(self, name: str) -> int:
        async with self.pool.acquire() as session:
            category = CategoryModel(name=name)
            session.add(category)
            await session.commit()
            return category.category_id

    async def add_product(
        self,
        name: str,
        price: str,
        stock: int,
        category_id: Optional[int] = None,
    ) -> int:
        async with self.pool.acquire() as session:
            product = ProductModel(
                name=name,
                price=Decimal(price),
                stock=stock,
                category_id=category_id,
            )
            session.add(product)
            await session.commit()
            return product.product_id

    async def add_member(self, email: str, name: str = "Tester") -> int:
        async with self.pool.acquire() as session:
            member = MemberModel(email=email, password="not-a-hash", name=name)
            session.add(member)
            await session.commit()
            return member.member_id

    async def add_cart_row(self, member_id: int, product_id: int, quantity: int = 1) -> int:
        async with self.pool.acquire() as session:
            row = CartModel(member_id=member_id, product_id=product_id, quantity=quantity)
            session.add(row)
            await session.commit()
            return row.cart_id

    async def stock_of(self, product_id: int) -> int:
        async with self.pool.acquire() as session:
            result = await session.execute(
                select(ProductModel.stock).where(ProductModel.product_id == product_id)
            )
            return result.scalar_one()

    async def cart_product_ids(self, member_id: int) -> List[int]:
        async with self.pool.acquire() as session:
            result = await session.execute(
                select(CartModel.product_id)
                .where(CartModel.member_id == member_id)
                .order_by(CartModel.product_id)
            )
            return list(result.scalars().all())

    async def count(self, model) -> int:
        async with self.pool.acquire() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()

    async def order(self, order_id: int) -> OrderModel:
        async with self.pool.acquire() as session:
            return await session.get(OrderModel, order_id)

    async def order_details(self, order_id: int) -> List[OrderDetailModel]:
        async with self.pool.acquire() as session:
            result = await session.execute(
                select(OrderDetailModel)
                .where(OrderDetailModel.order_id == order_id)
                .order_by(OrderDetailModel.order_detail_id)
            )
            return list(result.scalars().all())

    async def payment_for(self, order_id: int) -> Optional[PaymentModel]:
        async with self.pool.acquire() as session:
            result = await session.execute(
                select(PaymentModel).where(PaymentModel.order_id == order_id)
            )
            return result.scalar_one_or_none()


@pytest_asyncio.fixture
async def pool(tmp_path):
    """Connection pool on a file-backed SQLite database.

    A file database is used so concurrent transactions get separate
    connections, as they would against a server database.
    """
    settings = DatabaseSettings(
        url=f"sqlite+aiosqlite:///{tmp_path / 'storefront.db'}",
        pool_size=5,
        max_overflow=15,
        pool_timeout=30,
    )
    pool = ConnectionPool(settings)
    await pool.create_schema()

    yield pool

    await pool.dispose()


@pytest_asyncio.fixture
async def store(pool) -> StoreFixture:
    return StoreFixture(pool)


@pytest_asyncio.fixture
async def member_id(store) -> int:
    return await store.add_member("buyer@example.com", name="Buyer")
