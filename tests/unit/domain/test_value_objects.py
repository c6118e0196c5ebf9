"""Tests for domain value objects and the order aggregate."""

from decimal import Decimal

import pytest

from core.domain.entities import Order, OrderLineItem
from core.domain.value_objects import Money, RequestedItem, TransactionId


class TestMoney:
    """Test Money arithmetic."""

    def test_amount_is_coerced_to_decimal(self):
        assert Money(1000).amount == Decimal("1000")

    def test_multiply_by_quantity(self):
        assert Money(Decimal("1000")) * 3 == Money(Decimal("3000"))

    def test_add_rejects_mixed_currencies(self):
        with pytest.raises(ValueError):
            Money(Decimal("1"), "KRW") + Money(Decimal("1"), "USD")

    def test_invalid_currency_code(self):
        with pytest.raises(ValueError):
            Money(Decimal("1"), "WON!")


class TestRequestedItem:

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(ValueError):
            RequestedItem(product_id=1, quantity=quantity)


class TestTransactionId:
    """Test payment transaction id generation."""

    def test_format(self):
        tx = TransactionId.generate()

        assert tx.value.startswith("PG_")
        digits = tx.value[len("PG_"):]
        assert digits.isdigit()
        # 13 digits of epoch millis + 5 random digits
        assert len(digits) == 18

    def test_custom_prefix(self):
        assert str(TransactionId.generate("TX-")).startswith("TX-")


class TestOrder:
    """Test Order totals and line item rules."""

    def _order(self) -> Order:
        return Order(
            member_id=1,
            recipient_name="Kim",
            recipient_phone="010-0000-0000",
            shipping_address="Seoul",
        )

    def test_total_is_sum_of_line_totals(self):
        order = self._order()
        order.add_line_item(OrderLineItem(product_id=1, quantity=3, price_at_purchase=Money(Decimal("1000"))))
        order.add_line_item(OrderLineItem(product_id=2, quantity=1, price_at_purchase=Money(Decimal("2500"))))

        assert order.total_price == Money(Decimal("5500"))
        assert order.product_ids == [1, 2]

    def test_duplicate_product_rejected(self):
        order = self._order()
        order.add_line_item(OrderLineItem(product_id=1, quantity=1, price_at_purchase=Money(Decimal("1000"))))

        with pytest.raises(ValueError):
            order.add_line_item(OrderLineItem(product_id=1, quantity=2, price_at_purchase=Money(Decimal("1000"))))

    def test_empty_order_total_is_zero(self):
        assert self._order().total_price == Money.zero()
