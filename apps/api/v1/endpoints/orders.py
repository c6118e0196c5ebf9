"""Order endpoints for REST API."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from core.application.dtos.order_dto import (
    OrderHistoryItemDTO,
    PlaceOrderRequest,
    PlaceOrderResponse,
)
from core.application.services import OrderHistoryService, OrderPlacementService
from core.domain.enums import OrderErrorKind

from apps.api.deps import get_order_history_service, get_order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "",
    response_model=PlaceOrderResponse,
    status_code=status.HTTP_200_OK,
    summary="Place an order",
    responses={
        400: {"description": "Missing member_id or no items to order"},
        500: {"description": "Stock, validation or transaction failure"},
    },
)
async def place_order(
    request: PlaceOrderRequest,
    service: OrderPlacementService = Depends(get_order_service),
):
    """Place an order as one atomic transaction.

    Prices are recomputed on the server; stock is checked and decremented,
    a payment is recorded and the purchased products leave the cart.

    Args:
        request: PlaceOrderRequest DTO
        service: OrderPlacementService instance

    Returns:
        PlaceOrderResponse, or a JSON error with the failure message
    """
    if request.member_id is None:
        raise HTTPException(status_code=400, detail="member_id is required")

    result = await service.place_order(request)

    if not result.success:
        status_code = (
            status.HTTP_400_BAD_REQUEST
            if result.error_kind == OrderErrorKind.EMPTY_ORDER
            else status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        return JSONResponse(
            status_code=status_code,
            content={"detail": result.message, "error_kind": result.error_kind.value},
        )

    return PlaceOrderResponse(
        message="Order placed successfully",
        order_id=result.order_id,
        total_price=result.total_price,
    )


@router.get("/history", response_model=List[OrderHistoryItemDTO])
async def order_history(
    member_id: Optional[int] = Query(default=None, description="Member whose orders to list"),
    service: OrderHistoryService = Depends(get_order_history_service),
) -> List[OrderHistoryItemDTO]:
    """List a member's purchased products, newest order first.

    Raises:
        HTTPException: 400 if member_id is missing
    """
    if member_id is None:
        raise HTTPException(status_code=400, detail="member_id is required")

    try:
        return await service.list_for_member(member_id)
    except Exception as e:
        logger.error(f"Order history failed: {type(e).__name__}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load order history")
