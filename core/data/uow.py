"""Unit of Work pattern for atomic transactions."""

from contextlib import AsyncExitStack
from typing import Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from core.infrastructure.database.pool import ConnectionPool

from .repositories import (
    SqlAlchemyCartRepository,
    SqlAlchemyCatalogRepository,
    SqlAlchemyMemberRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyProductRepository,
    SqlAlchemyReviewRepository,
)


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Hold exactly one pooled connection for the whole unit of work
    2. Atomic commit/rollback of all repository operations
    3. Release the connection on every exit path
    4. Lazy initialization of repositories

    Usage:
        async with UnitOfWork(pool) as uow:
            products = await uow.products.lock_for_update([1, 2])
            ...
            await uow.commit()

    Leaving the block without commit() rolls everything back.
    """

    def __init__(self, pool: ConnectionPool, currency: str = "KRW") -> None:
        """Initialize Unit of Work.

        Args:
            pool: Connection pool to check a connection out of
            currency: Currency catalog prices are expressed in
        """
        self._pool = pool
        self._currency = currency
        self._stack: Optional[AsyncExitStack] = None
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._products: Optional[SqlAlchemyProductRepository] = None
        self._orders: Optional[SqlAlchemyOrderRepository] = None
        self._payments: Optional[SqlAlchemyPaymentRepository] = None
        self._cart: Optional[SqlAlchemyCartRepository] = None
        self._catalog: Optional[SqlAlchemyCatalogRepository] = None
        self._members: Optional[SqlAlchemyMemberRepository] = None
        self._reviews: Optional[SqlAlchemyReviewRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Acquire a connection and begin the transaction."""
        self._stack = AsyncExitStack()
        self._session = await self._stack.enter_async_context(self._pool.acquire())
        await self._session.begin()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, then release the connection."""
        try:
            if exc_type is not None:
                logger.warning(f"Transaction failed, rolling back: {exc_val}")
                await self._session.rollback()
        finally:
            await self._stack.aclose()
            self._session = None
            self._stack = None

    @property
    def session(self) -> AsyncSession:
        """Get the underlying session.

        Returns:
            AsyncSession bound to this unit of work's connection
        """
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def products(self) -> SqlAlchemyProductRepository:
        if self._products is None:
            self._products = SqlAlchemyProductRepository(self.session, self._currency)
        return self._products

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        if self._orders is None:
            self._orders = SqlAlchemyOrderRepository(self.session)
        return self._orders

    @property
    def payments(self) -> SqlAlchemyPaymentRepository:
        if self._payments is None:
            self._payments = SqlAlchemyPaymentRepository(self.session)
        return self._payments

    @property
    def cart(self) -> SqlAlchemyCartRepository:
        if self._cart is None:
            self._cart = SqlAlchemyCartRepository(self.session)
        return self._cart

    @property
    def catalog(self) -> SqlAlchemyCatalogRepository:
        if self._catalog is None:
            self._catalog = SqlAlchemyCatalogRepository(self.session)
        return self._catalog

    @property
    def members(self) -> SqlAlchemyMemberRepository:
        if self._members is None:
            self._members = SqlAlchemyMemberRepository(self.session)
        return self._members

    @property
    def reviews(self) -> SqlAlchemyReviewRepository:
        if self._reviews is None:
            self._reviews = SqlAlchemyReviewRepository(self.session)
        return self._reviews

    async def commit(self) -> None:
        """Commit all pending changes."""
        await self.session.commit()
        logger.debug("Transaction committed")


def create_uow(pool: ConnectionPool, currency: str = "KRW") -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        pool: Connection pool
        currency: Catalog currency

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(pool, currency)
