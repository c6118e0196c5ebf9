"""Application DTOs for the shopping cart."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class CartItemDTO(BaseModel):
    """DTO for a cart row joined with its product."""

    cart_id: int
    product_id: int
    quantity: int
    name: str
    price: Decimal
    image_url: Optional[str] = None

    model_config = {"frozen": True}


class AddCartItemRequest(BaseModel):
    """Request DTO for adding a product to the cart."""

    member_id: int = Field(..., description="Cart owner")
    product_id: int = Field(..., description="Product ID")
    quantity: int = Field(1, gt=0, description="Quantity to add")

    model_config = {"frozen": True}


class UpdateCartItemRequest(BaseModel):
    """Request DTO for changing a cart row's quantity."""

    quantity: int = Field(..., gt=0, description="New quantity")

    model_config = {"frozen": True}
