"""Application service for product reviews."""

from typing import List
import logging

from core.application.dtos.review_dto import ReviewDTO, SubmitReviewRequest
from core.data.uow import create_uow
from core.domain.exceptions import ReviewNotAllowed
from core.infrastructure.database.pool import ConnectionPool


logger = logging.getLogger(__name__)


class ReviewService:
    """Review listing and submission."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    async def list_for_product(self, product_id: int) -> List[ReviewDTO]:
        async with create_uow(self._pool) as uow:
            rows = await uow.reviews.list_for_product(product_id)
            return [ReviewDTO(**row) for row in rows]

    async def submit(self, request: SubmitReviewRequest) -> int:
        """Submit a review for a purchased product.

        The review is linked to one of the member's order line items for
        the product.

        Args:
            request: SubmitReviewRequest DTO

        Returns:
            New review_id

        Raises:
            ReviewNotAllowed: Member never purchased the product
        """
        async with create_uow(self._pool) as uow:
            order_detail_id = await uow.reviews.find_purchased_line_item(
                request.member_id, request.product_id
            )
            if order_detail_id is None:
                raise ReviewNotAllowed(request.member_id, request.product_id)

            review_id = await uow.reviews.add(
                member_id=request.member_id,
                product_id=request.product_id,
                order_detail_id=order_detail_id,
                rating=request.rating,
                comment=request.comment,
            )
            await uow.commit()

        logger.info(f"✅ Review {review_id} added for product {request.product_id}")
        return review_id
