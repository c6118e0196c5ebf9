"""
Domain exceptions for order placement and the storefront collaborators.

Every order placement failure carries an OrderErrorKind so the
coordinator can fold it into a single result.
"""
from typing import Optional

from .enums import OrderErrorKind


class OrderPlacementError(Exception):
    """Base class for failures while placing an order."""

    kind: OrderErrorKind = OrderErrorKind.TRANSACTION_FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyOrder(OrderPlacementError):
    """No line items were supplied."""

    kind = OrderErrorKind.EMPTY_ORDER

    def __init__(self, message: str = "No items to order"):
        super().__init__(message)


class ProductNotFound(OrderPlacementError):
    """A requested product does not exist."""

    kind = OrderErrorKind.PRODUCT_NOT_FOUND

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class InsufficientStock(OrderPlacementError):
    """Requested quantity exceeds the stock on hand."""

    kind = OrderErrorKind.INSUFFICIENT_STOCK

    def __init__(
        self,
        product_id: int,
        requested: int,
        available: int,
        product_name: Optional[str] = None,
    ):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        self.product_name = product_name
        label = f"'{product_name}'" if product_name else f"Product {product_id}"
        super().__init__(
            f"Insufficient stock for {label}: requested {requested} "
            f"(remaining stock: {available})"
        )


class TransactionFailure(OrderPlacementError):
    """Any other store-level failure during the order transaction."""

    kind = OrderErrorKind.TRANSACTION_FAILURE

    def __init__(self, message: str = "Order could not be processed"):
        super().__init__(message)


# =============================================================================
# MEMBERS / REVIEWS
# =============================================================================

class DuplicateEmail(ValueError):
    """Registration with an email that already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class InvalidCredentials(ValueError):
    """Login with an unknown email or a wrong password."""


class ReviewNotAllowed(ValueError):
    """Review submitted for a product the member never purchased."""

    def __init__(self, member_id: int, product_id: int):
        self.member_id = member_id
        self.product_id = product_id
        super().__init__(
            f"Member {member_id} has not purchased product {product_id}"
        )
