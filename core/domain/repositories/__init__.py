"""Repository interfaces."""

from .cart_repository import CartRepository
from .order_repository import OrderRepository
from .payment_repository import PaymentRepository
from .product_repository import ProductRepository

__all__ = [
    "CartRepository",
    "OrderRepository",
    "PaymentRepository",
    "ProductRepository",
]
