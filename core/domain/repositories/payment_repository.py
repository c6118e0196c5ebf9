"""Repository interface for payments."""

from abc import ABC, abstractmethod

from ..entities.payment import Payment


class PaymentRepository(ABC):
    """Abstract repository for Payment persistence."""

    @abstractmethod
    async def add(self, payment: Payment) -> int:
        """Insert a payment record.

        Args:
            payment: Payment for an order created in the same transaction

        Returns:
            Generated payment_id
        """
        pass
