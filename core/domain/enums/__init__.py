"""Domain enums."""

from .order_status import OrderErrorKind, OrderStatus, PaymentStatus

__all__ = ["OrderErrorKind", "OrderStatus", "PaymentStatus"]
