"""SQLAlchemy persistence for product reviews."""

from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.member_model import MemberModel, ReviewModel
from ..models.order_model import OrderDetailModel, OrderModel


class SqlAlchemyReviewRepository:
    """Review reads and writes, plus the purchase check reviews depend on."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_product(self, product_id: int) -> List[Dict[str, Any]]:
        """Reviews for one product, newest first, with the reviewer's name."""
        result = await self._session.execute(
            select(
                ReviewModel.review_id,
                ReviewModel.member_id,
                ReviewModel.product_id,
                ReviewModel.order_detail_id,
                ReviewModel.rating,
                ReviewModel.comment,
                ReviewModel.created_at,
                MemberModel.name.label("reviewer_name"),
            )
            .join(MemberModel, MemberModel.member_id == ReviewModel.member_id)
            .where(ReviewModel.product_id == product_id)
            .order_by(ReviewModel.created_at.desc(), ReviewModel.review_id.desc())
        )
        return [dict(row) for row in result.mappings().all()]

    async def find_purchased_line_item(self, member_id: int, product_id: int) -> Optional[int]:
        """Return an order_detail_id proving the member bought the product, if any."""
        result = await self._session.execute(
            select(OrderDetailModel.order_detail_id)
            .join(OrderModel, OrderModel.order_id == OrderDetailModel.order_id)
            .where(
                OrderModel.member_id == member_id,
                OrderDetailModel.product_id == product_id,
            )
            .order_by(OrderDetailModel.order_detail_id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def add(
        self,
        member_id: int,
        product_id: int,
        order_detail_id: int,
        rating: int,
        comment: Optional[str],
    ) -> int:
        review = ReviewModel(
            member_id=member_id,
            product_id=product_id,
            order_detail_id=order_detail_id,
            rating=rating,
            comment=comment,
        )
        self._session.add(review)
        await self._session.flush()
        return review.review_id
