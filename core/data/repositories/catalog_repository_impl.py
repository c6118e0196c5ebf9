"""SQLAlchemy read queries for the product catalog."""

from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.catalog_model import CategoryModel, ProductModel
from ..models.member_model import ReviewModel


class SqlAlchemyCatalogRepository:
    """Category and product listings for browsing."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_categories(self) -> List[Dict[str, Any]]:
        result = await self._session.execute(
            select(CategoryModel.category_id, CategoryModel.name).order_by(CategoryModel.category_id)
        )
        return [dict(row) for row in result.mappings().all()]

    async def list_products(self, category_id: Optional[int] = None) -> List[Dict[str, Any]]:
        """List products with category name and review statistics.

        Products without reviews report an average rating of 0.

        Args:
            category_id: Restrict to one category; None lists everything

        Returns:
            List of row mappings
        """
        query = (
            select(
                ProductModel.product_id,
                ProductModel.name,
                ProductModel.price,
                ProductModel.stock,
                ProductModel.image_url,
                CategoryModel.name.label("category_name"),
                func.coalesce(func.avg(ReviewModel.rating), 0).label("avg_rating"),
                func.count(ReviewModel.review_id).label("review_count"),
            )
            .outerjoin(CategoryModel, CategoryModel.category_id == ProductModel.category_id)
            .outerjoin(ReviewModel, ReviewModel.product_id == ProductModel.product_id)
        )

        if category_id is not None:
            query = query.where(ProductModel.category_id == category_id)

        query = query.group_by(
            ProductModel.product_id,
            ProductModel.name,
            ProductModel.price,
            ProductModel.stock,
            ProductModel.image_url,
            CategoryModel.name,
        ).order_by(ProductModel.product_id)

        result = await self._session.execute(query)
        return [dict(row) for row in result.mappings().all()]
