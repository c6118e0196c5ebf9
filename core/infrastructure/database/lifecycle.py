"""Database Lifecycle Management - Async Version"""

from typing import Optional

from core.infrastructure.database.pool import ConnectionPool
from core.settings.sections.database import DatabaseSettings

_pool: Optional[ConnectionPool] = None


async def init_database(settings: Optional[DatabaseSettings] = None, create_schema: bool = True) -> ConnectionPool:
    """Initialize the global connection pool (and schema)."""
    global _pool

    if _pool is not None:
        return _pool

    if settings is None:
        from core.settings import get_app_settings
        settings = get_app_settings().database

    _pool = ConnectionPool(settings)

    if create_schema:
        await _pool.create_schema()

    return _pool


def get_pool() -> ConnectionPool:
    """Get the global connection pool."""
    if _pool is None:
        raise RuntimeError(
            "Database not initialized. Call init_database() first."
        )
    return _pool


async def close_database() -> None:
    """Dispose the global connection pool."""
    global _pool

    if _pool is not None:
        await _pool.dispose()

    _pool = None
