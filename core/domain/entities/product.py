"""Product entity as seen by order placement."""
from dataclasses import dataclass
from typing import Optional

from ..value_objects import Money


@dataclass
class Product:
    """Catalog product with its current unit price and stock on hand."""
    product_id: int
    name: str
    price: Money
    stock: int
    category_id: Optional[int] = None

    def has_stock_for(self, quantity: int) -> bool:
        return quantity <= self.stock
