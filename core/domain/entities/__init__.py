"""Domain entities."""

from .cart import CartEntry
from .order import Order, OrderLineItem
from .payment import Payment
from .product import Product

__all__ = ["CartEntry", "Order", "OrderLineItem", "Payment", "Product"]
