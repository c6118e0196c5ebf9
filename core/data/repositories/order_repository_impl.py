"""SQLAlchemy implementation of OrderRepository."""

from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import Order, OrderLineItem
from core.domain.repositories import OrderRepository

from ..mappers import OrderLineItemMapper, OrderMapper
from ..models.catalog_model import ProductModel
from ..models.member_model import ReviewModel
from ..models.order_model import OrderDetailModel, OrderModel


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def add(self, order: Order) -> int:
        """Insert the order header.

        Args:
            order: Order aggregate

        Returns:
            Generated order_id
        """
        order_model = OrderMapper.to_persistence(order)
        self._session.add(order_model)
        await self._session.flush()  # Propagate to DB without committing
        return order_model.order_id

    async def add_line_item(self, order_id: int, item: OrderLineItem) -> int:
        """Insert one order line item.

        Args:
            order_id: Owning order
            item: Line item with its frozen price_at_purchase

        Returns:
            Generated order_detail_id
        """
        detail_model = OrderLineItemMapper.to_persistence(item, order_id)
        self._session.add(detail_model)
        await self._session.flush()
        return detail_model.order_detail_id

    async def history_for_member(self, member_id: int) -> List[Dict[str, Any]]:
        """Order history rows: one per purchased product, newest order first.

        Each row carries the review left for that line item, if any.

        Args:
            member_id: Purchasing member

        Returns:
            List of row mappings
        """
        result = await self._session.execute(
            select(
                OrderModel.order_id,
                OrderModel.order_date,
                OrderModel.status,
                OrderModel.total_price,
                OrderDetailModel.order_detail_id,
                ProductModel.product_id,
                ProductModel.name.label("product_name"),
                ProductModel.image_url,
                OrderDetailModel.quantity,
                OrderDetailModel.price_at_purchase,
                ReviewModel.review_id,
                ReviewModel.rating,
                ReviewModel.comment,
            )
            .join(OrderDetailModel, OrderDetailModel.order_id == OrderModel.order_id)
            .join(ProductModel, ProductModel.product_id == OrderDetailModel.product_id)
            .outerjoin(
                ReviewModel,
                ReviewModel.order_detail_id == OrderDetailModel.order_detail_id,
            )
            .where(OrderModel.member_id == member_id)
            .order_by(OrderModel.order_date.desc(), OrderModel.order_id.desc(), OrderDetailModel.order_detail_id)
        )
        return [dict(row) for row in result.mappings().all()]
