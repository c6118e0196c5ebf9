"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..enums import OrderStatus
from ..value_objects import Money


@dataclass
class OrderLineItem:
    """
    One purchased product within an order.

    price_at_purchase is frozen when the order is placed and never
    follows later catalog price changes.
    """
    product_id: int
    quantity: int
    price_at_purchase: Money
    order_detail_id: Optional[int] = None

    @property
    def line_total(self) -> Money:
        return self.price_at_purchase * self.quantity


@dataclass
class Order:
    """
    Order header with its line items.

    total_price always equals the sum of the line totals.
    """
    member_id: int
    recipient_name: Optional[str]
    recipient_phone: Optional[str]
    shipping_address: Optional[str]
    line_items: List[OrderLineItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PAID
    order_date: datetime = field(default_factory=datetime.utcnow)
    order_id: Optional[int] = None
    currency: str = "KRW"

    @property
    def total_price(self) -> Money:
        total = Money.zero(self.currency)
        for item in self.line_items:
            total = total + item.line_total
        return total

    @property
    def product_ids(self) -> List[int]:
        return [item.product_id for item in self.line_items]

    def add_line_item(self, item: OrderLineItem) -> None:
        """Add a line item; each product may appear only once."""
        if item.product_id in self.product_ids:
            raise ValueError(f"Product {item.product_id} already in order")
        if item.price_at_purchase.currency != self.currency:
            raise ValueError(
                f"Line item currency {item.price_at_purchase.currency} "
                f"does not match order currency {self.currency}"
            )
        self.line_items.append(item)
