"""Catalog browsing endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from core.application.dtos.catalog_dto import CategoryDTO, ProductSummaryDTO
from core.application.services import CatalogService

from apps.api.deps import get_catalog_service

router = APIRouter(tags=["catalog"])


@router.get("/categories", response_model=List[CategoryDTO])
async def list_categories(
    service: CatalogService = Depends(get_catalog_service),
) -> List[CategoryDTO]:
    """List all product categories."""
    return await service.list_categories()


@router.get("/products", response_model=List[ProductSummaryDTO])
async def list_products(
    category_id: Optional[str] = Query(default=None, description="Category ID, or 'all'"),
    service: CatalogService = Depends(get_catalog_service),
) -> List[ProductSummaryDTO]:
    """List products with average rating and review count.

    Raises:
        HTTPException: 400 if category_id is neither 'all' nor an integer
    """
    category_filter = None
    if category_id is not None and category_id != "all":
        try:
            category_filter = int(category_id)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Invalid category_id: {category_id}")

    return await service.list_products(category_filter)
