"""Application layer - services and DTOs."""

from .dtos import PlaceOrderRequest, PlaceOrderResult
from .services import (
    CartService,
    CatalogService,
    MemberService,
    OrderHistoryService,
    OrderPlacementService,
    ReviewService,
)

__all__ = [
    # DTOs
    "PlaceOrderRequest",
    "PlaceOrderResult",
    # Services
    "CartService",
    "CatalogService",
    "MemberService",
    "OrderHistoryService",
    "OrderPlacementService",
    "ReviewService",
]
