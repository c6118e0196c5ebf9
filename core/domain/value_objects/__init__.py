"""Domain value objects."""

from .value_objects import Money, RequestedItem, TransactionId

__all__ = [
    "Money",
    "RequestedItem",
    "TransactionId",
]
