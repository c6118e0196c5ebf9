"""Application service for catalog browsing."""

from typing import List, Optional

from core.application.dtos.catalog_dto import CategoryDTO, ProductSummaryDTO
from core.data.uow import create_uow
from core.infrastructure.database.pool import ConnectionPool


class CatalogService:
    """Category and product listings."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    async def list_categories(self) -> List[CategoryDTO]:
        async with create_uow(self._pool) as uow:
            rows = await uow.catalog.list_categories()
            return [CategoryDTO(**row) for row in rows]

    async def list_products(self, category_id: Optional[int] = None) -> List[ProductSummaryDTO]:
        """List products, optionally for one category.

        Args:
            category_id: Category filter; None lists all products

        Returns:
            List of ProductSummaryDTO with rating statistics
        """
        async with create_uow(self._pool) as uow:
            rows = await uow.catalog.list_products(category_id)
            return [ProductSummaryDTO(**row) for row in rows]
