"""Product review endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from core.application.dtos.review_dto import ReviewDTO, SubmitReviewRequest
from core.application.services import ReviewService
from core.domain.exceptions import ReviewNotAllowed

from apps.api.deps import get_review_service

router = APIRouter(tags=["reviews"])


@router.get("/products/{product_id}/reviews", response_model=List[ReviewDTO])
async def list_reviews(
    product_id: int,
    service: ReviewService = Depends(get_review_service),
) -> List[ReviewDTO]:
    """List a product's reviews, newest first."""
    return await service.list_for_product(product_id)


@router.post("/reviews", status_code=status.HTTP_201_CREATED)
async def submit_review(
    request: SubmitReviewRequest,
    service: ReviewService = Depends(get_review_service),
):
    """Submit a review; only members who bought the product may review it.

    Raises:
        HTTPException: 403 if the member never purchased the product
    """
    try:
        review_id = await service.submit(request)
    except ReviewNotAllowed:
        raise HTTPException(
            status_code=403,
            detail="Only purchased products can be reviewed",
        )
    return {"message": "Review submitted", "review_id": review_id}
