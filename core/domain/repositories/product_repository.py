"""Repository interface for product price and stock."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable

from ..entities.product import Product


class ProductRepository(ABC):
    """Abstract repository for product reads and stock updates."""

    @abstractmethod
    async def lock_for_update(self, product_ids: Iterable[int]) -> Dict[int, Product]:
        """Read price and stock for the given products with a locking read.

        Isolation contract: the returned rows stay locked until the
        enclosing transaction ends, so no concurrent transaction can
        validate against stock this transaction is about to consume.
        Implementations use row-level SELECT ... FOR UPDATE, or a
        serializing transaction where the store has no row locks.
        Rows are locked in ascending product_id order.

        Args:
            product_ids: Products to read

        Returns:
            Map of product_id to Product; missing products are absent
        """
        pass

    @abstractmethod
    async def decrement_stock(self, product_id: int, quantity: int) -> None:
        """Relative stock decrement (stock = stock - quantity).

        Args:
            product_id: Product to update
            quantity: Units to remove
        """
        pass
