"""Cart purge: drop purchased products from the buyer's cart."""
from typing import Iterable
import logging

from core.domain.repositories import CartRepository


logger = logging.getLogger(__name__)


class CartPurge:
    """
    Deletes the cart rows of one member for the products just purchased.

    Other products in the cart, and other members' carts, are untouched.
    Runs inside the order transaction: if it fails, the order fails.
    """

    def __init__(self, cart: CartRepository):
        self._cart = cart

    async def purge(self, member_id: int, product_ids: Iterable[int]) -> int:
        """Delete (member, product in product_ids) cart rows; returns the row count."""
        deleted = await self._cart.delete_for_products(member_id, product_ids)
        logger.debug(f"Purged {deleted} cart row(s) for member {member_id}")
        return deleted
