"""Tests for request normalization and cart purging."""

from typing import Dict, Iterable, List, Optional, Tuple

import pytest

from core.application.dtos import LineItemRequest
from core.application.services import CartPurge, normalize_line_items
from core.domain.entities import CartEntry
from core.domain.exceptions import EmptyOrder
from core.domain.repositories import CartRepository
from core.domain.value_objects import RequestedItem


class TestNormalizeLineItems:

    def test_single_items_pass_through(self):
        items = normalize_line_items([
            LineItemRequest(product_id=3, quantity=1),
            LineItemRequest(product_id=1, quantity=2),
        ])

        assert items == [
            RequestedItem(product_id=3, quantity=1),
            RequestedItem(product_id=1, quantity=2),
        ]

    def test_repeated_products_are_merged(self):
        items = normalize_line_items([
            LineItemRequest(product_id=1, quantity=2),
            LineItemRequest(product_id=2, quantity=1),
            LineItemRequest(product_id=1, quantity=3),
        ])

        assert items == [
            RequestedItem(product_id=1, quantity=5),
            RequestedItem(product_id=2, quantity=1),
        ]

    def test_empty(self):
        with pytest.raises(EmptyOrder):
            normalize_line_items([])


class InMemoryCartRepository(CartRepository):
    """Cart repository over a dict keyed by cart_id."""

    def __init__(self, rows: List[Tuple[int, int, int]]):
        self.rows: Dict[int, CartEntry] = {
            cart_id: CartEntry(cart_id=cart_id, member_id=member_id, product_id=product_id, quantity=1)
            for cart_id, member_id, product_id in rows
        }

    async def find(self, member_id: int, product_id: int) -> Optional[CartEntry]:
        for row in self.rows.values():
            if row.member_id == member_id and row.product_id == product_id:
                return row
        return None

    async def add(self, entry: CartEntry) -> int:
        cart_id = max(self.rows, default=0) + 1
        self.rows[cart_id] = entry
        return cart_id

    async def increase_quantity(self, cart_id: int, quantity: int) -> None:
        self.rows[cart_id].quantity += quantity

    async def set_quantity(self, cart_id: int, quantity: int) -> bool:
        if cart_id not in self.rows:
            return False
        self.rows[cart_id].quantity = quantity
        return True

    async def remove(self, cart_id: int) -> bool:
        return self.rows.pop(cart_id, None) is not None

    async def delete_for_products(self, member_id: int, product_ids: Iterable[int]) -> int:
        targets = set(product_ids)
        doomed = [
            cart_id for cart_id, row in self.rows.items()
            if row.member_id == member_id and row.product_id in targets
        ]
        for cart_id in doomed:
            del self.rows[cart_id]
        return len(doomed)


class TestCartPurge:

    @pytest.mark.asyncio
    async def test_only_purchased_products_of_buyer_are_removed(self):
        # (cart_id, member_id, product_id)
        cart = InMemoryCartRepository([(1, 7, 1), (2, 7, 2), (3, 7, 3), (4, 8, 1)])

        deleted = await CartPurge(cart).purge(7, [1, 2])

        assert deleted == 2
        assert sorted(cart.rows) == [3, 4]

    @pytest.mark.asyncio
    async def test_nothing_to_purge(self):
        cart = InMemoryCartRepository([(1, 7, 3)])

        assert await CartPurge(cart).purge(7, [1]) == 0
        assert list(cart.rows) == [1]
