"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal

from core.domain.entities import CartEntry, Order, OrderLineItem, Payment, Product
from core.domain.value_objects import Money

from .models.catalog_model import ProductModel
from .models.member_model import CartModel
from .models.order_model import OrderDetailModel, OrderModel, PaymentModel


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel, currency: str = "KRW") -> Product:
        """Convert ORM model to domain entity.

        Args:
            model: ProductModel instance
            currency: Catalog currency (not stored per row)

        Returns:
            Product domain entity
        """
        return Product(
            product_id=model.product_id,
            name=model.name,
            price=Money(amount=Decimal(str(model.price)), currency=currency),
            stock=model.stock,
            category_id=model.category_id,
        )


class OrderMapper:
    """Static mapper for Order → OrderModel (header only)."""

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model.

        Line items are inserted separately so each one can be followed
        by its stock decrement.

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        return OrderModel(
            member_id=entity.member_id,
            total_price=entity.total_price.amount,
            status=entity.status.value,
            recipient_name=entity.recipient_name,
            recipient_phone=entity.recipient_phone,
            shipping_address=entity.shipping_address,
            order_date=entity.order_date,
        )


class OrderLineItemMapper:
    """Static mapper for OrderLineItem → OrderDetailModel."""

    @staticmethod
    def to_persistence(entity: OrderLineItem, order_id: int) -> OrderDetailModel:
        return OrderDetailModel(
            order_id=order_id,
            product_id=entity.product_id,
            quantity=entity.quantity,
            price_at_purchase=entity.price_at_purchase.amount,
        )


class PaymentMapper:
    """Static mapper for Payment → PaymentModel."""

    @staticmethod
    def to_persistence(entity: Payment) -> PaymentModel:
        return PaymentModel(
            order_id=entity.order_id,
            payment_method=entity.payment_method,
            payment_amount=entity.amount.amount,
            payment_status=entity.status.value,
            transaction_id=entity.transaction_id.value,
            payment_date=entity.payment_date,
        )


class CartMapper:
    """Static mapper for CartEntry ↔ CartModel."""

    @staticmethod
    def to_domain(model: CartModel) -> CartEntry:
        return CartEntry(
            cart_id=model.cart_id,
            member_id=model.member_id,
            product_id=model.product_id,
            quantity=model.quantity,
        )

    @staticmethod
    def to_persistence(entity: CartEntry) -> CartModel:
        return CartModel(
            member_id=entity.member_id,
            product_id=entity.product_id,
            quantity=entity.quantity,
        )
