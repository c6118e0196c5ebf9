"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from core.domain.enums import OrderErrorKind


class LineItemRequest(BaseModel):
    """One requested (product, quantity) pair.

    There is deliberately no price field: prices always come from the store.
    """

    product_id: int = Field(..., description="Product ID")
    quantity: int = Field(..., gt=0, description="Quantity ordered")

    model_config = {"frozen": True}


class PlaceOrderRequest(BaseModel):
    """Request DTO for placing an order."""

    member_id: Optional[int] = Field(None, description="Purchasing member ID (required)")
    recipient_name: Optional[str] = Field(None, description="Recipient name")
    recipient_phone: Optional[str] = Field(None, description="Recipient phone")
    shipping_address: Optional[str] = Field(None, description="Shipping address")
    payment_method: Optional[str] = Field(None, description="Payment method (e.g. CARD)")
    items: List[LineItemRequest] = Field(default_factory=list, description="Requested line items")

    model_config = {"frozen": True}


class PlaceOrderResult(BaseModel):
    """Outcome of an order placement attempt.

    Exactly one of (order_id, total_price) or (error_kind, message)
    describes the outcome, depending on success.
    """

    success: bool = Field(..., description="Whether the order was committed")
    order_id: Optional[int] = Field(None, description="New order ID")
    total_price: Optional[Decimal] = Field(None, description="Authoritative order total")
    payment_transaction_id: Optional[str] = Field(None, description="Generated payment transaction ID")
    error_kind: Optional[OrderErrorKind] = Field(None, description="Failure kind")
    message: str = Field("", description="Human-readable outcome")

    model_config = {"frozen": True}


class PlaceOrderResponse(BaseModel):
    """Response DTO for a successfully placed order."""

    message: str = Field(..., description="Confirmation message")
    order_id: int = Field(..., description="New order ID")
    total_price: Decimal = Field(..., ge=0, description="Order total")

    model_config = {"frozen": True}


class OrderHistoryItemDTO(BaseModel):
    """One purchased product in a member's order history."""

    order_id: int
    order_date: datetime
    status: str
    total_price: Decimal
    order_detail_id: int
    product_id: int
    product_name: str
    image_url: Optional[str] = None
    quantity: int
    price_at_purchase: Decimal
    review_id: Optional[int] = None
    rating: Optional[int] = None
    comment: Optional[str] = None

    model_config = {"frozen": True}
