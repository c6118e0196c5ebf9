"""Tests for PricingValidator against an in-memory product repository."""

from decimal import Decimal
from typing import Dict, Iterable, List

import pytest

from core.application.services import PricingValidator
from core.domain.entities import Product
from core.domain.enums import OrderErrorKind
from core.domain.exceptions import EmptyOrder, InsufficientStock, ProductNotFound
from core.domain.repositories import ProductRepository
from core.domain.value_objects import Money, RequestedItem


class InMemoryProductRepository(ProductRepository):
    """Product repository over a dict; records every locking read."""

    def __init__(self, products: List[Product]):
        self._products = {p.product_id: p for p in products}
        self.locked: List[List[int]] = []

    async def lock_for_update(self, product_ids: Iterable[int]) -> Dict[int, Product]:
        ids = sorted(set(product_ids))
        self.locked.append(ids)
        return {pid: self._products[pid] for pid in ids if pid in self._products}

    async def decrement_stock(self, product_id: int, quantity: int) -> None:
        raise AssertionError("validator must not write")


@pytest.fixture
def products() -> InMemoryProductRepository:
    return InMemoryProductRepository([
        Product(product_id=1, name="Chair", price=Money(Decimal("1000")), stock=10),
        Product(product_id=2, name="Table", price=Money(Decimal("2500")), stock=2),
    ])


class TestPricingValidator:
    """Test price computation and stock checks."""

    @pytest.mark.asyncio
    async def test_total_uses_store_prices(self, products):
        priced = await PricingValidator(products).validate([
            RequestedItem(product_id=2, quantity=2),
            RequestedItem(product_id=1, quantity=3),
        ])

        assert priced.total == Money(Decimal("8000"))
        # Caller order is kept
        assert [line.product_id for line in priced.lines] == [2, 1]
        assert priced.lines[0].unit_price == Money(Decimal("2500"))

    @pytest.mark.asyncio
    async def test_locking_read_is_ordered(self, products):
        await PricingValidator(products).validate([
            RequestedItem(product_id=2, quantity=1),
            RequestedItem(product_id=1, quantity=1),
        ])

        assert products.locked == [[1, 2]]

    @pytest.mark.asyncio
    async def test_stock_equal_to_quantity_is_enough(self, products):
        priced = await PricingValidator(products).validate([RequestedItem(product_id=2, quantity=2)])

        assert priced.total == Money(Decimal("5000"))

    @pytest.mark.asyncio
    async def test_insufficient_stock(self, products):
        with pytest.raises(InsufficientStock) as exc_info:
            await PricingValidator(products).validate([RequestedItem(product_id=2, quantity=5)])

        error = exc_info.value
        assert error.kind == OrderErrorKind.INSUFFICIENT_STOCK
        assert error.available == 2
        assert "Table" in error.message
        assert "remaining stock: 2" in error.message

    @pytest.mark.asyncio
    async def test_first_failing_item_wins(self, products):
        with pytest.raises(ProductNotFound) as exc_info:
            await PricingValidator(products).validate([
                RequestedItem(product_id=99, quantity=1),
                RequestedItem(product_id=2, quantity=5),
            ])

        assert exc_info.value.product_id == 99
        assert exc_info.value.kind == OrderErrorKind.PRODUCT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_empty_items(self, products):
        with pytest.raises(EmptyOrder):
            await PricingValidator(products).validate([])

        assert products.locked == []
