"""Domain layer - pure domain models and interfaces."""

from .entities import CartEntry, Order, OrderLineItem, Payment, Product
from .enums import OrderErrorKind, OrderStatus, PaymentStatus
from .repositories import (
    CartRepository,
    OrderRepository,
    PaymentRepository,
    ProductRepository,
)
from .value_objects import Money, RequestedItem, TransactionId

__all__ = [
    "CartEntry",
    "CartRepository",
    "Money",
    "Order",
    "OrderErrorKind",
    "OrderLineItem",
    "OrderRepository",
    "OrderStatus",
    "Payment",
    "PaymentRepository",
    "PaymentStatus",
    "Product",
    "ProductRepository",
    "RequestedItem",
    "TransactionId",
]
