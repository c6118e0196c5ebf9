"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod

from ..entities.order import Order, OrderLineItem


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def add(self, order: Order) -> int:
        """Insert the order header.

        Args:
            order: Order aggregate; its total_price is persisted as-is

        Returns:
            Generated order_id
        """
        pass

    @abstractmethod
    async def add_line_item(self, order_id: int, item: OrderLineItem) -> int:
        """Insert one order line item.

        Args:
            order_id: Owning order
            item: Line item with its frozen price_at_purchase

        Returns:
            Generated order_detail_id
        """
        pass
