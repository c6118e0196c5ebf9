"""
Connection pool.

Bounded set of database connections shared by every request.
Built on the SQLAlchemy async engine pool: at most
pool_size + max_overflow connections exist, and acquire() waits up to
pool_timeout seconds for one to free up.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
import logging

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from core.settings.sections.database import DatabaseSettings


logger = logging.getLogger(__name__)


# =============================================================================
# ENGINE CREATION
# =============================================================================

def _configure_sqlite(engine: AsyncEngine) -> None:
    """Enforce foreign keys and start every SQLite transaction with BEGIN IMMEDIATE.

    SQLite has no row locks and ignores SELECT ... FOR UPDATE. Taking the
    write lock when the transaction begins serializes order transactions,
    so two of them can never validate against the same stock.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _configure_connection(dbapi_connection, connection_record):
        # Stop the driver from emitting its own deferred BEGIN
        dbapi_connection.isolation_level = None

        # SQLite leaves foreign keys unenforced unless asked, per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_pool_engine(settings: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine for the configured database.

    Args:
        settings: Database settings

    Returns:
        Configured async engine
    """
    url = make_url(settings.url)
    logger.info(f"Creating database engine: {url.render_as_string(hide_password=True)}")

    if settings.is_sqlite:
        in_memory = url.database in (None, "", ":memory:")
        if in_memory:
            # One shared connection; concurrent transactions are not supported
            engine = create_async_engine(
                settings.url,
                echo=settings.echo_sql,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            engine = create_async_engine(
                settings.url,
                echo=settings.echo_sql,
                connect_args={"timeout": settings.sqlite_busy_timeout},
                pool_size=settings.pool_size,
                max_overflow=settings.max_overflow,
                pool_timeout=settings.pool_timeout,
            )
        _configure_sqlite(engine)
        return engine

    return create_async_engine(
        settings.url,
        echo=settings.echo_sql,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
        pool_recycle=settings.pool_recycle,
        pool_pre_ping=True,  # Test connections before using
    )


# =============================================================================
# CONNECTION POOL
# =============================================================================

class ConnectionPool:
    """
    Bounded pool of transactional database connections.

    Usage:
        async with pool.acquire() as session:
            ...
            await session.commit()

    The session is closed when the block exits on any path. Closing
    rolls back a transaction that was neither committed nor rolled back
    and hands the connection back to the pool.
    """

    def __init__(self, settings: DatabaseSettings, engine: Optional[AsyncEngine] = None):
        """
        Initialize the pool.

        Args:
            settings: Database settings
            engine: Pre-built engine (tests); created from settings otherwise
        """
        self.settings = settings
        self._engine = engine or create_pool_engine(settings)
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[AsyncSession]:
        """
        Check out one connection for the duration of the block.

        Yields:
            Async session bound to a single pooled connection
        """
        session = self._session_factory()
        try:
            yield session
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create all tables if they don't exist."""
        from core.data.models import Base

        logger.info("Initializing database schema...")
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ Database schema ready")

    async def ping(self) -> bool:
        """Return True when a connection can be checked out and used."""
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    async def dispose(self) -> None:
        """Close all pooled connections."""
        logger.info("Closing database connections...")
        await self._engine.dispose()
        logger.info("✅ Database connections closed")
