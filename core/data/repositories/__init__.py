"""SQLAlchemy repository implementations."""

from .cart_repository_impl import SqlAlchemyCartRepository
from .catalog_repository_impl import SqlAlchemyCatalogRepository
from .member_repository_impl import SqlAlchemyMemberRepository
from .order_repository_impl import SqlAlchemyOrderRepository
from .payment_repository_impl import SqlAlchemyPaymentRepository
from .product_repository_impl import SqlAlchemyProductRepository
from .review_repository_impl import SqlAlchemyReviewRepository

__all__ = [
    "SqlAlchemyCartRepository",
    "SqlAlchemyCatalogRepository",
    "SqlAlchemyMemberRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemyReviewRepository",
]
