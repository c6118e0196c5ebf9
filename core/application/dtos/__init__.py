"""Application DTOs."""

from .cart_dto import AddCartItemRequest, CartItemDTO, UpdateCartItemRequest
from .catalog_dto import CategoryDTO, ProductSummaryDTO
from .member_dto import LoginRequest, MemberDTO, RegisterMemberRequest
from .order_dto import (
    LineItemRequest,
    OrderHistoryItemDTO,
    PlaceOrderRequest,
    PlaceOrderResponse,
    PlaceOrderResult,
)
from .review_dto import ReviewDTO, SubmitReviewRequest

__all__ = [
    "AddCartItemRequest",
    "CartItemDTO",
    "CategoryDTO",
    "LineItemRequest",
    "LoginRequest",
    "MemberDTO",
    "OrderHistoryItemDTO",
    "PlaceOrderRequest",
    "PlaceOrderResponse",
    "PlaceOrderResult",
    "ProductSummaryDTO",
    "RegisterMemberRequest",
    "ReviewDTO",
    "SubmitReviewRequest",
    "UpdateCartItemRequest",
]
