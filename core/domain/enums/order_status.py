"""
Order Status Enums.

Status values for orders, payments and order placement failures.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order header status values."""

    PAID = "PAID"


class PaymentStatus(str, Enum):
    """Payment status values."""

    SUCCESS = "SUCCESS"


class OrderErrorKind(str, Enum):
    """Failure kinds surfaced by order placement."""

    EMPTY_ORDER = "EMPTY_ORDER"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    TRANSACTION_FAILURE = "TRANSACTION_FAILURE"
