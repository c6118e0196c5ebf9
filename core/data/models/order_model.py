"""SQLAlchemy ORM models for orders, order details and payments."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True, autoincrement=True)
    member_id = Column(Integer, ForeignKey("members.member_id"), nullable=False, index=True)
    total_price = Column(Numeric(12, 2), nullable=False)
    status = Column(String(20), nullable=False, default="PAID")
    recipient_name = Column(String(100), nullable=True)
    recipient_phone = Column(String(50), nullable=True)
    shipping_address = Column(String(500), nullable=True)
    order_date = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Relationship to items
    details = relationship(
        "OrderDetailModel", back_populates="order", cascade="all, delete-orphan"
    )
    payment = relationship("PaymentModel", back_populates="order", uselist=False)


class OrderDetailModel(Base):
    """SQLAlchemy ORM model for order_details table (one row per purchased product)."""

    __tablename__ = "order_details"

    order_detail_id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.order_id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.product_id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    price_at_purchase = Column(Numeric(12, 2), nullable=False)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="details")


class PaymentModel(Base):
    """SQLAlchemy ORM model for payments table."""

    __tablename__ = "payments"

    payment_id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.order_id"), nullable=False, unique=True)
    payment_method = Column(String(50), nullable=True)
    payment_amount = Column(Numeric(12, 2), nullable=False)
    payment_status = Column(String(20), nullable=False)
    transaction_id = Column(String(64), nullable=False, index=True)
    payment_date = Column(DateTime, default=datetime.utcnow, nullable=False)

    order = relationship("OrderModel", back_populates="payment")
