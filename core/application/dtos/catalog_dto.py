"""Application DTOs for catalog browsing."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class CategoryDTO(BaseModel):
    """DTO for a product category."""

    category_id: int
    name: str

    model_config = {"frozen": True}


class ProductSummaryDTO(BaseModel):
    """DTO for a product in the catalog listing."""

    product_id: int
    name: str
    price: Decimal
    stock: int
    image_url: Optional[str] = None
    category_name: Optional[str] = None
    avg_rating: float = Field(0.0, ge=0, le=5, description="Average review rating, 0 without reviews")
    review_count: int = Field(0, ge=0)

    model_config = {"frozen": True}
