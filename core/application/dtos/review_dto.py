"""Application DTOs for product reviews."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SubmitReviewRequest(BaseModel):
    """Request DTO for submitting a review."""

    member_id: int = Field(..., description="Reviewing member")
    product_id: int = Field(..., description="Reviewed product")
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: Optional[str] = Field(None, description="Free-text comment")

    model_config = {"frozen": True}


class ReviewDTO(BaseModel):
    """DTO for a review with the reviewer's name."""

    review_id: int
    member_id: int
    product_id: int
    order_detail_id: Optional[int] = None
    rating: int
    comment: Optional[str] = None
    created_at: datetime
    reviewer_name: str

    model_config = {"frozen": True}
