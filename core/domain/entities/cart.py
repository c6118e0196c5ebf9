"""Cart entry entity."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class CartEntry:
    """A product a member has placed in their cart."""
    member_id: int
    product_id: int
    quantity: int
    cart_id: Optional[int] = None
