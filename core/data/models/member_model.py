"""SQLAlchemy ORM models for members, carts and reviews."""

from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)

from .base import Base


class MemberModel(Base):
    """SQLAlchemy ORM model for members table."""

    __tablename__ = "members"

    member_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    name = Column(String(100), nullable=False)
    phone = Column(String(50), nullable=True)
    address = Column(String(500), nullable=True)
    role = Column(String(20), nullable=False, default="USER")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class CartModel(Base):
    """SQLAlchemy ORM model for cart table."""

    __tablename__ = "cart"

    cart_id = Column(Integer, primary_key=True, autoincrement=True)
    member_id = Column(Integer, ForeignKey("members.member_id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.product_id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        Index("ix_cart_member_product", "member_id", "product_id"),
    )


class ReviewModel(Base):
    """SQLAlchemy ORM model for reviews table."""

    __tablename__ = "reviews"

    review_id = Column(Integer, primary_key=True, autoincrement=True)
    member_id = Column(Integer, ForeignKey("members.member_id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.product_id"), nullable=False, index=True)
    order_detail_id = Column(Integer, ForeignKey("order_details.order_detail_id"), nullable=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating_range"),
    )
