"""Repository interface for cart entries."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..entities.cart import CartEntry


class CartRepository(ABC):
    """Abstract repository for CartEntry persistence."""

    @abstractmethod
    async def find(self, member_id: int, product_id: int) -> Optional[CartEntry]:
        """Find the cart entry for (member, product), if any."""
        pass

    @abstractmethod
    async def add(self, entry: CartEntry) -> int:
        """Insert a cart entry and return its cart_id."""
        pass

    @abstractmethod
    async def increase_quantity(self, cart_id: int, quantity: int) -> None:
        """Relative quantity increase for an existing entry."""
        pass

    @abstractmethod
    async def set_quantity(self, cart_id: int, quantity: int) -> bool:
        """Overwrite the quantity. Returns False if the entry does not exist."""
        pass

    @abstractmethod
    async def remove(self, cart_id: int) -> bool:
        """Delete one entry. Returns False if the entry does not exist."""
        pass

    @abstractmethod
    async def delete_for_products(self, member_id: int, product_ids: Iterable[int]) -> int:
        """Delete the member's entries whose product is in product_ids.

        Args:
            member_id: Owner of the cart
            product_ids: Products to remove from the cart

        Returns:
            Number of deleted rows
        """
        pass
