"""Shopping cart endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from core.application.dtos.cart_dto import AddCartItemRequest, CartItemDTO, UpdateCartItemRequest
from core.application.services import CartService

from apps.api.deps import get_cart_service

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=List[CartItemDTO])
async def list_cart(
    member_id: Optional[int] = Query(default=None, description="Cart owner"),
    service: CartService = Depends(get_cart_service),
) -> List[CartItemDTO]:
    """List the member's cart with product details.

    Raises:
        HTTPException: 400 if member_id is missing
    """
    if member_id is None:
        raise HTTPException(status_code=400, detail="member_id is required")
    return await service.list_items(member_id)


@router.post("")
async def add_to_cart(
    request: AddCartItemRequest,
    service: CartService = Depends(get_cart_service),
):
    """Add a product; an existing row for the product gets its quantity increased."""
    cart_id = await service.add_item(request)
    return {"message": "Added to cart", "cart_id": cart_id}


@router.put("/{cart_id}")
async def update_cart_item(
    cart_id: int,
    request: UpdateCartItemRequest,
    service: CartService = Depends(get_cart_service),
):
    """Set a cart row's quantity."""
    if not await service.update_quantity(cart_id, request.quantity):
        raise HTTPException(status_code=404, detail=f"Cart item {cart_id} not found")
    return {"message": "Cart item updated"}


@router.delete("/{cart_id}")
async def remove_cart_item(
    cart_id: int,
    service: CartService = Depends(get_cart_service),
):
    """Remove a cart row."""
    if not await service.remove_item(cart_id):
        raise HTTPException(status_code=404, detail=f"Cart item {cart_id} not found")
    return {"message": "Cart item removed"}
