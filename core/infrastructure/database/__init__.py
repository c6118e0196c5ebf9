"""Database infrastructure: connection pool and its lifecycle."""

from .lifecycle import close_database, get_pool, init_database
from .pool import ConnectionPool, create_pool_engine

__all__ = [
    "ConnectionPool",
    "close_database",
    "create_pool_engine",
    "get_pool",
    "init_database",
]
