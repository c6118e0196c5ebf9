"""Data layer - infrastructure persistence and mapping."""

from .mappers import CartMapper, OrderLineItemMapper, OrderMapper, PaymentMapper, ProductMapper
from .models import Base
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "CartMapper",
    "create_uow",
    "OrderLineItemMapper",
    "OrderMapper",
    "PaymentMapper",
    "ProductMapper",
    "UnitOfWork",
]
