"""Database models."""

from .base import Base
from .catalog_model import CategoryModel, ProductModel
from .member_model import CartModel, MemberModel, ReviewModel
from .order_model import OrderDetailModel, OrderModel, PaymentModel

__all__ = [
    "Base",
    "CartModel",
    "CategoryModel",
    "MemberModel",
    "OrderDetailModel",
    "OrderModel",
    "PaymentModel",
    "ProductModel",
    "ReviewModel",
]
