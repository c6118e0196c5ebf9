"""FastAPI dependencies for dependency injection."""

from pathlib import Path

from dotenv import load_dotenv
from fastapi import Depends

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.services import (  # noqa: E402
    CartService,
    CatalogService,
    MemberService,
    OrderHistoryService,
    OrderPlacementService,
    ReviewService,
)
from core.infrastructure.database import lifecycle  # noqa: E402
from core.infrastructure.database.pool import ConnectionPool  # noqa: E402
from core.settings import get_app_settings  # noqa: E402


def get_pool() -> ConnectionPool:
    """Get the application connection pool.

    Returns:
        ConnectionPool instance
    """
    return lifecycle.get_pool()


def get_order_service(pool: ConnectionPool = Depends(get_pool)) -> OrderPlacementService:
    """Get OrderPlacementService instance.

    Returns:
        OrderPlacementService instance
    """
    return OrderPlacementService(pool, get_app_settings().checkout)


def get_order_history_service(pool: ConnectionPool = Depends(get_pool)) -> OrderHistoryService:
    return OrderHistoryService(pool)


def get_member_service(pool: ConnectionPool = Depends(get_pool)) -> MemberService:
    return MemberService(pool, get_app_settings().security)


def get_catalog_service(pool: ConnectionPool = Depends(get_pool)) -> CatalogService:
    return CatalogService(pool)


def get_cart_service(pool: ConnectionPool = Depends(get_pool)) -> CartService:
    return CartService(pool)


def get_review_service(pool: ConnectionPool = Depends(get_pool)) -> ReviewService:
    return ReviewService(pool)
