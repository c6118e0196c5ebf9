"""Application services."""
from .cart_purge import CartPurge
from .cart_service import CartService
from .catalog_service import CatalogService
from .member_service import MemberService
from .order_service import OrderHistoryService, OrderPlacementService, normalize_line_items
from .pricing_validator import PricedLine, PricedOrder, PricingValidator
from .review_service import ReviewService

__all__ = [
    "CartPurge",
    "CartService",
    "CatalogService",
    "MemberService",
    "normalize_line_items",
    "OrderHistoryService",
    "OrderPlacementService",
    "PricedLine",
    "PricedOrder",
    "PricingValidator",
    "ReviewService",
]
