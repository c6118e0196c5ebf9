"""SQLAlchemy implementation of PaymentRepository."""

from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import Payment
from core.domain.repositories import PaymentRepository

from ..mappers import PaymentMapper


class SqlAlchemyPaymentRepository(PaymentRepository):
    """Concrete implementation of PaymentRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, payment: Payment) -> int:
        """Insert a payment record.

        Args:
            payment: Payment domain entity

        Returns:
            Generated payment_id
        """
        payment_model = PaymentMapper.to_persistence(payment)
        self._session.add(payment_model)
        await self._session.flush()
        return payment_model.payment_id
